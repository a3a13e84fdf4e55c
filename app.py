import fleet_maintenance.bootstrap_env  # must be first to set env/secrets
import logging
from datetime import date

import streamlit as st

from fleet_maintenance.auth import current_user, logout
from fleet_maintenance.data.loader import load_accessors
from fleet_maintenance.errors import FleetStoreError
from fleet_maintenance.ui.layout import selected_ship_detail, setup_page, sidebar_navigation
from fleet_maintenance.ui.pages import calendar, dashboard, jobs, login, ship_detail, ships
from fleet_maintenance.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "dashboard": dashboard.render,
    "ships": ships.render,
    "jobs": jobs.render,
    "calendar": calendar.render,
}


def _render_page(page_key: str, context: PageContext) -> None:
    detail_id = selected_ship_detail()
    if page_key == "ships" and detail_id:
        ship_detail.render(context, detail_id)
        return
    renderer = PAGE_RENDERERS.get(page_key)
    if renderer is None:
        st.warning(f"Unknown page: {page_key}")
        return
    renderer(context)


def _fail(exc: FleetStoreError, where: str) -> None:
    logger.exception("Storage failure while %s", where)
    st.error(f"Stored data could not be read or written: {exc}")
    st.stop()


def main() -> None:
    setup_page()

    try:
        accessors = load_accessors()
        store = accessors.repository.store
        user = current_user(store)
        if user is None:
            login.render(store)
            return
    except FleetStoreError as exc:
        _fail(exc, "opening the fleet store")
        return

    page_key = sidebar_navigation(user)
    context = PageContext(
        accessors=accessors,
        store=store,
        today=date.today(),
        user=user,
    )

    try:
        if st.sidebar.button("Log out", key="fleet_logout"):
            logout(store)
            st.rerun()
        _render_page(page_key, context)
    except FleetStoreError as exc:
        _fail(exc, f"rendering {page_key}")


if __name__ == "__main__":
    main()
