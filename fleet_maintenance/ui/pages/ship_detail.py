from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from fleet_maintenance.data.models import Component, missing_fields, new_id
from fleet_maintenance.data.relations import components_for_ship, job_rows, jobs_for_ship
from fleet_maintenance.ui.components.formatting import parse_date, status_badge, to_iso
from fleet_maintenance.ui.components.tables import render_table
from fleet_maintenance.ui.layout import close_ship_detail
from fleet_maintenance.ui.pages.context import PageContext

FIELD_LABELS = {
    "name": "Component Name",
    "serial_number": "Serial Number",
    "install_date": "Installation Date",
    "last_maintenance_date": "Last Maintenance Date",
}


def _components_frame(components: List[Component]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "name": c.name,
                "serial_number": c.serial_number,
                "install_date": c.install_date,
                "last_maintenance_date": c.last_maintenance_date,
            }
            for c in components
        ],
        columns=list(FIELD_LABELS),
    )


def component_form(key: str, ship_id: str, component: Optional[Component] = None) -> Optional[Component]:
    base = component or Component(ship_id=ship_id)
    with st.form(key, clear_on_submit=component is None):
        name = st.text_input("Component Name", value=base.name)
        serial = st.text_input("Serial Number", value=base.serial_number)
        installed = st.date_input("Installation Date", value=parse_date(base.install_date), format="YYYY-MM-DD")
        maintained = st.date_input(
            "Last Maintenance Date",
            value=parse_date(base.last_maintenance_date),
            format="YYYY-MM-DD",
        )
        submitted = st.form_submit_button("Update" if component else "Create")

    if not submitted:
        return None
    result = Component(
        id=base.id,
        ship_id=base.ship_id or ship_id,
        name=name.strip(),
        serial_number=serial.strip(),
        install_date=to_iso(installed),
        last_maintenance_date=to_iso(maintained),
    )
    missing = missing_fields(result)
    if missing:
        st.error("Please fill in: " + ", ".join(FIELD_LABELS[m] for m in missing))
        return None
    return result


def _render_components(context: PageContext, ship_id: str, components: List[Component]) -> None:
    accessors = context.accessors
    render_table(
        _components_frame(components),
        column_config={"install_date": {"type": "date"}, "last_maintenance_date": {"type": "date"}},
        labels=FIELD_LABELS,
        empty_message="No components installed on this ship.",
    )

    with st.expander("Add Component"):
        created = component_form("fleet_component_add", ship_id)
        if created is not None:
            created.id = new_id("c")
            accessors.add_component(created)
            st.toast("Component added", icon="🔩")
            st.rerun()

    if not components:
        return

    names = {c.id: f"{c.name} ({c.serial_number})" for c in components}
    selected_id = st.selectbox(
        "Select a component",
        options=list(names),
        format_func=lambda cid: names[cid],
        key=f"fleet_component_select_{ship_id}",
    )
    selected = next(c for c in components if c.id == selected_id)

    with st.expander("Edit Component"):
        edited = component_form(f"fleet_component_edit_{selected.id}", ship_id, selected)
        if edited is not None:
            if accessors.update_component(edited) is None:
                st.toast("Component no longer exists; nothing was updated.", icon="⚠️")
            else:
                st.toast("Component updated", icon="✏️")
                st.rerun()

    with st.expander("Delete Component"):
        confirm = st.checkbox(
            f"Yes, delete {selected.name}",
            key=f"fleet_component_delete_confirm_{selected.id}",
        )
        if st.button("Delete", key="fleet_component_delete", type="primary", disabled=not confirm):
            accessors.delete_component(selected.id)
            st.toast("Component deleted", icon="🗑️")
            st.rerun()


def render(context: PageContext, ship_id: str) -> None:
    accessors = context.accessors
    ship = accessors.get_ship(ship_id)
    if ship is None:
        # Deleted elsewhere or a stale selection: fall back to the ship list
        close_ship_detail()
        st.toast("That ship no longer exists.", icon="⚠️")
        st.rerun()

    if st.button("← Back to ships", key="fleet_ship_detail_back"):
        close_ship_detail()
        st.rerun()

    st.subheader(ship.name)

    components = components_for_ship(accessors.get_components(), ship.id)
    jobs = jobs_for_ship(accessors.get_jobs(), ship.id)

    tab_info, tab_components, tab_history = st.tabs(["General Information", "Components", "Maintenance History"])

    with tab_info:
        col1, col2, col3 = st.columns(3)
        col1.metric("IMO Number", ship.imo or "–")
        col2.metric("Flag", ship.flag or "–")
        col3.metric("Status", status_badge(ship.status))

    with tab_components:
        _render_components(context, ship.id, components)

    with tab_history:
        # Component names resolve against this ship's components only
        history = job_rows(jobs, [ship], components)
        render_table(
            history[["component", "type", "priority", "status", "scheduled_date"]],
            column_config={"scheduled_date": {"type": "date"}, "status": {"type": "badge"}},
            labels={
                "component": "Component",
                "type": "Job Type",
                "priority": "Priority",
                "status": "Status",
                "scheduled_date": "Scheduled Date",
            },
            empty_message="No maintenance jobs recorded for this ship.",
        )
