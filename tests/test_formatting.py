"""
Unit tests for display helpers used by the tables and KPI cards.
"""

from datetime import date

from fleet_maintenance.data.aggregations import FleetKpis
from fleet_maintenance.ui.components.formatting import (
    format_date,
    format_number,
    parse_date,
    status_badge,
    to_iso,
)
from fleet_maintenance.ui.components.kpi import fleet_kpi_cards


class TestFormatting:
    """Test the formatting helpers."""

    def test_format_number(self):
        """Test thousands separators and missing values."""
        assert format_number(12345) == "12,345"
        assert format_number(None) == "–"

    def test_dates(self):
        """Test ISO parsing, display and blank handling."""
        assert parse_date("2024-05-05") == date(2024, 5, 5)
        assert parse_date("05/05/2024") is None
        assert to_iso(date(2024, 5, 5)) == "2024-05-05"
        assert to_iso(None) == ""
        assert format_date("2024-05-05") == "05 May 2024"
        assert format_date("") == "–"
        assert format_date("soon") == "soon"

    def test_status_badge(self):
        """Test known statuses get an icon and unknown ones pass through."""
        assert status_badge("Completed").endswith(" Completed")
        assert status_badge("Archived") == "Archived"


class TestKpiCards:
    """Test fleet_kpi_cards."""

    def test_cards_follow_kpi_order(self):
        """Test the four dashboard cards carry the computed values in order."""
        cards = fleet_kpi_cards(FleetKpis(total_ships=2, overdue_maintenance=1, jobs_in_progress=3, completed_jobs=4))
        assert [c.label for c in cards] == [
            "Total Ships", "Overdue Maintenance", "Jobs in Progress", "Completed Jobs",
        ]
        assert [c.value for c in cards] == [2, 1, 3, 4]
