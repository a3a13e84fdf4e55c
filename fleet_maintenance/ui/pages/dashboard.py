from __future__ import annotations

import streamlit as st

from fleet_maintenance.data.aggregations import compute_kpis, status_histogram_frame
from fleet_maintenance.ui.components.charts import jobs_by_status_chart, render_plotly
from fleet_maintenance.ui.components.kpi import fleet_kpi_cards, render_kpi_cards
from fleet_maintenance.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.subheader("Dashboard")

    accessors = context.accessors
    ships = accessors.get_ships()
    components = accessors.get_components()
    jobs = accessors.get_jobs()

    kpis = compute_kpis(ships, components, jobs, today=context.today)
    render_kpi_cards(fleet_kpi_cards(kpis), columns=4)

    st.divider()

    histogram = status_histogram_frame(jobs)
    if histogram.empty:
        st.info("No maintenance jobs recorded yet.")
        return
    render_plotly(jobs_by_status_chart(histogram))
