from __future__ import annotations

from typing import List, Optional

import streamlit as st

from fleet_maintenance.config import JOB_PRIORITIES, JOB_STATUSES
from fleet_maintenance.data.filters import apply_job_filters, serialize_filters
from fleet_maintenance.data.models import Component, Job, Ship, missing_fields, new_id
from fleet_maintenance.data.relations import components_available_for_ship, job_rows
from fleet_maintenance.ui.components.formatting import parse_date, to_iso
from fleet_maintenance.ui.components.tables import render_table
from fleet_maintenance.ui.layout import job_filters_ui
from fleet_maintenance.ui.pages.context import PageContext

NO_SHIP = ""

FIELD_LABELS = {
    "ship_id": "Ship",
    "component_id": "Component",
    "type": "Job Type",
    "priority": "Priority",
    "status": "Status",
    "scheduled_date": "Scheduled Date",
}

TABLE_LABELS = {
    "ship": "Ship",
    "component": "Component",
    "type": "Type",
    "priority": "Priority",
    "status": "Status",
    "scheduled_date": "Scheduled Date",
    "assigned_engineer_id": "Engineer",
}


def _index_of(options: List[str], value: str) -> int:
    return options.index(value) if value in options else 0


def job_editor(
    key: str,
    ships: List[Ship],
    components: List[Component],
    job: Optional[Job] = None,
) -> Optional[Job]:
    """Job form. The ship picker sits outside the form so component choices follow it."""
    base = job or Job()
    ship_options = [NO_SHIP, *[s.id for s in ships]]
    ship_names = {s.id: s.name for s in ships}
    ship_id = st.selectbox(
        "Ship",
        options=ship_options,
        index=_index_of(ship_options, base.ship_id),
        format_func=lambda sid: ship_names.get(sid, "Select a ship"),
        key=f"{key}_ship",
    )

    available = components_available_for_ship(components, ship_id)
    component_options = [c.id for c in available]
    component_names = {c.id: c.name for c in available}

    with st.form(key, clear_on_submit=job is None):
        component_id = st.selectbox(
            "Component",
            options=component_options,
            index=_index_of(component_options, base.component_id) if component_options else None,
            format_func=lambda cid: component_names.get(cid, cid),
        )
        job_type = st.text_input("Job Type", value=base.type)
        priority = st.selectbox("Priority", JOB_PRIORITIES, index=_index_of(JOB_PRIORITIES, base.priority))
        status = st.selectbox("Status", JOB_STATUSES, index=_index_of(JOB_STATUSES, base.status))
        engineer = st.text_input("Assigned Engineer ID", value=base.assigned_engineer_id)
        scheduled = st.date_input("Scheduled Date", value=parse_date(base.scheduled_date), format="YYYY-MM-DD")
        submitted = st.form_submit_button("Update" if job else "Create")

    if not submitted:
        return None
    result = Job(
        id=base.id,
        ship_id=ship_id,
        component_id=component_id or "",
        type=job_type.strip(),
        priority=priority,
        status=status,
        assigned_engineer_id=engineer.strip(),
        scheduled_date=to_iso(scheduled),
    )
    missing = missing_fields(result)
    if missing:
        st.error("Please fill in: " + ", ".join(FIELD_LABELS[m] for m in missing))
        return None
    return result


def render(context: PageContext) -> None:
    st.subheader("Maintenance Jobs")
    accessors = context.accessors
    ships = accessors.get_ships()
    components = accessors.get_components()
    jobs = accessors.get_jobs()

    filters = job_filters_ui(ships)
    st.session_state["fleet_jobs_active_filters"] = serialize_filters(filters)
    filtered = apply_job_filters(jobs, filters)
    st.caption(f"Showing {len(filtered)} of {len(jobs)} jobs.")

    rows = job_rows(filtered, ships, components)
    render_table(
        rows.drop(columns=["id"]),
        column_config={"scheduled_date": {"type": "date"}, "status": {"type": "badge"}},
        labels=TABLE_LABELS,
        export_file_name="maintenance_jobs.csv",
        empty_message="No jobs match the current filters.",
    )

    with st.expander("Add Job"):
        created = job_editor("fleet_job_add", ships, components)
        if created is not None:
            created.id = new_id("j")
            accessors.add_job(created)
            st.toast("Job created successfully", icon="✅")
            st.rerun()

    if not filtered:
        return

    labels = dict(zip(rows["id"], rows["type"] + " • " + rows["ship"] + " • " + rows["scheduled_date"]))
    selected_id = st.selectbox(
        "Select a job",
        options=list(labels),
        format_func=lambda jid: labels[jid],
        key="fleet_job_select",
    )
    selected = next(j for j in filtered if j.id == selected_id)

    with st.expander("Edit Job"):
        edited = job_editor(f"fleet_job_edit_{selected.id}", ships, components, selected)
        if edited is not None:
            if accessors.update_job(edited) is None:
                st.toast("Job no longer exists; nothing was updated.", icon="⚠️")
            elif edited.status == "Completed":
                st.toast("Job marked as completed", icon="🏁")
                st.rerun()
            else:
                st.toast("Job updated successfully", icon="✏️")
                st.rerun()

    with st.expander("Delete Job"):
        confirm = st.checkbox("Yes, delete this job", key=f"fleet_job_delete_confirm_{selected.id}")
        if st.button("Delete", key="fleet_job_delete", type="primary", disabled=not confirm):
            accessors.delete_job(selected.id)
            st.toast("Job deleted successfully", icon="🗑️")
            st.rerun()
