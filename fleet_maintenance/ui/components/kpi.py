from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from fleet_maintenance.data.aggregations import FleetKpis
from fleet_maintenance.ui.components.formatting import format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    icon: Optional[str] = None
    decimals: int = 0
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    return format_number(card.value, decimals=card.decimals)


def fleet_kpi_cards(kpis: FleetKpis) -> List[KpiCard]:
    return [
        KpiCard("Total Ships", kpis.total_ships, icon="🚢"),
        KpiCard(
            "Overdue Maintenance",
            kpis.overdue_maintenance,
            icon="⚠️",
            help_text="Components whose last maintenance date is before today.",
        ),
        KpiCard("Jobs in Progress", kpis.jobs_in_progress, icon="🔧"),
        KpiCard("Completed Jobs", kpis.completed_jobs, icon="✅"),
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No KPIs available yet.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                label = f"{card.icon} {card.label}" if card.icon else card.label
                st.metric(label=label, value=_format_value(card), help=card.help_text)
