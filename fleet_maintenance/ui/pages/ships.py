from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from fleet_maintenance.config import SHIP_STATUSES
from fleet_maintenance.data.models import Ship, missing_fields, new_id
from fleet_maintenance.ui.components.tables import render_table
from fleet_maintenance.ui.layout import open_ship_detail
from fleet_maintenance.ui.pages.context import PageContext

FIELD_LABELS = {"name": "Ship Name", "imo": "IMO Number", "flag": "Flag", "status": "Status"}


def _ships_frame(ships: List[Ship]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"name": s.name, "imo": s.imo, "flag": s.flag, "status": s.status} for s in ships],
        columns=["name", "imo", "flag", "status"],
    )


def ship_form(key: str, ship: Optional[Ship] = None) -> Optional[Ship]:
    """Render the ship form; return the filled-in ship once submitted and complete."""
    base = ship or Ship()
    with st.form(key, clear_on_submit=ship is None):
        name = st.text_input("Ship Name", value=base.name)
        imo = st.text_input("IMO Number", value=base.imo)
        flag = st.text_input("Flag", value=base.flag)
        status_index = SHIP_STATUSES.index(base.status) if base.status in SHIP_STATUSES else 0
        status = st.selectbox("Status", SHIP_STATUSES, index=status_index)
        submitted = st.form_submit_button("Update" if ship else "Create")

    if not submitted:
        return None
    result = Ship(id=base.id, name=name.strip(), imo=imo.strip(), flag=flag.strip(), status=status)
    missing = missing_fields(result)
    if missing:
        st.error("Please fill in: " + ", ".join(FIELD_LABELS[m] for m in missing))
        return None
    return result


def render(context: PageContext) -> None:
    st.subheader("Ships")
    accessors = context.accessors
    ships = accessors.get_ships()

    render_table(
        _ships_frame(ships),
        column_config={"status": {"type": "badge"}},
        labels={"name": "Name", "imo": "IMO Number", "flag": "Flag", "status": "Status"},
        empty_message="No ships registered yet.",
    )

    with st.expander("Add Ship", expanded=not ships):
        created = ship_form("fleet_ship_add")
        if created is not None:
            created.id = new_id("s")
            accessors.add_ship(created)
            st.toast(f"Ship {created.name} created", icon="🚢")
            st.rerun()

    if not ships:
        return

    ship_names = {s.id: f"{s.name} ({s.imo})" for s in ships}
    selected_id = st.selectbox(
        "Select a ship",
        options=list(ship_names),
        format_func=lambda sid: ship_names[sid],
        key="fleet_ship_select",
    )
    selected = next(s for s in ships if s.id == selected_id)

    if st.button("View details", key="fleet_ship_view"):
        open_ship_detail(selected.id)
        st.rerun()

    with st.expander("Edit Ship"):
        edited = ship_form(f"fleet_ship_edit_{selected.id}", selected)
        if edited is not None:
            if accessors.update_ship(edited) is None:
                st.toast("Ship no longer exists; nothing was updated.", icon="⚠️")
            else:
                st.toast("Ship updated", icon="✏️")
                st.rerun()

    with st.expander("Delete Ship"):
        st.caption("Components and jobs of this ship are kept and will show as N/A.")
        confirm = st.checkbox(
            f"Yes, delete {selected.name}",
            key=f"fleet_ship_delete_confirm_{selected.id}",
        )
        if st.button("Delete", key="fleet_ship_delete", type="primary", disabled=not confirm):
            accessors.delete_ship(selected.id)
            st.toast("Ship deleted", icon="🗑️")
            st.rerun()
