"""
Layout helpers for the Streamlit application (page setup, sidebar, filters).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import streamlit as st

from fleet_maintenance.auth import has_role
from fleet_maintenance.config import JOB_PRIORITIES, JOB_STATUSES, PAGES
from fleet_maintenance.data.filters import DEFAULT_FILTERS, JobFilters
from fleet_maintenance.data.models import Ship

ALL_OPTION = "All"
PAGE_STATE_KEY = "fleet_page"
SHIP_DETAIL_STATE_KEY = "fleet_ship_detail_id"


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="Fleet Maintenance",
        layout="wide",
        page_icon=":ship:",
    )
    _inject_danger_button_style()


def sidebar_navigation(user: Optional[Dict[str, Any]]) -> str:
    """Render the page switcher and the signed-in user; return the chosen page key."""
    labels = {page.key: page.label for page in PAGES}
    st.sidebar.title("⚓ Fleet Maintenance")
    page_key = st.sidebar.radio(
        "Navigate",
        options=list(labels),
        format_func=lambda k: labels[k],
        key=PAGE_STATE_KEY,
    )
    if user:
        st.sidebar.divider()
        st.sidebar.caption(f"Signed in as **{user.get('email')}**")
        role = user.get("role", "")
        st.sidebar.caption(f"Role: {role}" + (" (full access)" if has_role(user, "Admin") else ""))
    return page_key


def open_ship_detail(ship_id: str) -> None:
    st.session_state[SHIP_DETAIL_STATE_KEY] = ship_id


def close_ship_detail() -> None:
    st.session_state.pop(SHIP_DETAIL_STATE_KEY, None)


def selected_ship_detail() -> Optional[str]:
    return st.session_state.get(SHIP_DETAIL_STATE_KEY)


def _optional_choice(value: str) -> Optional[str]:
    return None if value == ALL_OPTION else value


def job_filters_ui(ships: List[Ship], defaults: JobFilters = DEFAULT_FILTERS) -> JobFilters:
    ship_labels = {ALL_OPTION: "All Ships", **{s.id: s.name for s in ships}}
    col_ship, col_status, col_priority = st.columns(3)
    with col_ship:
        ship_id = st.selectbox(
            "Ship",
            options=list(ship_labels),
            format_func=lambda k: ship_labels[k],
            key="fleet_jobs_filter_ship",
        )
    with col_status:
        status = st.selectbox("Status", [ALL_OPTION, *JOB_STATUSES], key="fleet_jobs_filter_status")
    with col_priority:
        priority = st.selectbox("Priority", [ALL_OPTION, *JOB_PRIORITIES], key="fleet_jobs_filter_priority")

    return JobFilters(
        ship_id=_optional_choice(ship_id) or defaults.ship_id,
        status=_optional_choice(status) or defaults.status,
        priority=_optional_choice(priority) or defaults.priority,
    )


def _inject_danger_button_style() -> None:
    """Style PRIMARY buttons as red (danger-like); only destructive actions use type="primary"."""
    st.markdown(
        """
        <style>
        button[kind="primary"],
        button[data-testid="baseButton-primary"] {
            background-color: #e53935 !important; /* red 600 */
            border-color: #e53935 !important;
            color: #ffffff !important;
        }
        button[kind="primary"]:hover,
        button[data-testid="baseButton-primary"]:hover {
            background-color: #c62828 !important; /* red 800 */
            border-color: #c62828 !important;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
