from __future__ import annotations

from datetime import date
from typing import List, MutableMapping, Optional

import streamlit as st

from fleet_maintenance.data.calendar import WEEKDAY_LABELS, CalendarDay, build_month, jobs_on, shift_month
from fleet_maintenance.data.models import Job
from fleet_maintenance.ui.components.formatting import status_badge
from fleet_maintenance.ui.pages.context import PageContext

OFFSET_KEY = "fleet_calendar_offset"
SELECTED_DAY_KEY = "fleet_calendar_selected_day"


def step_month(state: MutableMapping, delta: int) -> None:
    """Move the visible month and close any open day panel."""
    state[OFFSET_KEY] = state.get(OFFSET_KEY, 0) + delta
    state.pop(SELECTED_DAY_KEY, None)


def _cell_label(cell: CalendarDay) -> str:
    label = f"**{cell.day.day}**" if cell.is_today else str(cell.day.day)
    if cell.job_count:
        label += f" · {cell.job_count} job(s)"
    return label


def _render_grid(weeks: List[List[Optional[CalendarDay]]]) -> None:
    header = st.columns(len(WEEKDAY_LABELS))
    for col, name in zip(header, WEEKDAY_LABELS):
        col.markdown(f"<div style='text-align:center'><b>{name}</b></div>", unsafe_allow_html=True)

    for week in weeks:
        cols = st.columns(len(WEEKDAY_LABELS))
        for col, cell in zip(cols, week):
            if cell is None:
                col.write("")
                continue
            if col.button(
                _cell_label(cell),
                key=f"fleet_calendar_day_{cell.day.isoformat()}",
                use_container_width=True,
                type="secondary",
            ):
                st.session_state[SELECTED_DAY_KEY] = cell.day


def _render_day_detail(day: date, jobs: List[Job]) -> None:
    with st.container(border=True):
        st.markdown(f"#### Jobs on {day.isoformat()}")
        if not jobs:
            st.write("No jobs scheduled.")
        for job in jobs:
            st.markdown(
                f"**Type:** {job.type}  \n"
                f"**Priority:** {job.priority}  \n"
                f"**Status:** {status_badge(job.status)}"
            )
        if st.button("Close", key="fleet_calendar_close"):
            st.session_state.pop(SELECTED_DAY_KEY, None)
            st.rerun()


def render(context: PageContext) -> None:
    st.subheader("Maintenance Calendar")
    jobs = context.accessors.get_jobs()
    offset = st.session_state.setdefault(OFFSET_KEY, 0)

    col_prev, col_title, col_next = st.columns([1, 4, 1])
    with col_prev:
        if st.button("‹ Prev", key="fleet_calendar_prev", use_container_width=True):
            step_month(st.session_state, -1)
            st.rerun()
    with col_next:
        if st.button("Next ›", key="fleet_calendar_next", use_container_width=True):
            step_month(st.session_state, 1)
            st.rerun()

    year, month = shift_month(context.today, offset)
    calendar_month = build_month(jobs, year, month, today=context.today)
    with col_title:
        st.markdown(f"<h3 style='text-align:center'>{calendar_month.label}</h3>", unsafe_allow_html=True)

    _render_grid(calendar_month.weeks())

    selected_day = st.session_state.get(SELECTED_DAY_KEY)
    if selected_day is not None:
        _render_day_detail(selected_day, jobs_on(jobs, selected_day))
