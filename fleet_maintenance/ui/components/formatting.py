"""
Utility helpers for formatting counts, dates and status labels.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from fleet_maintenance.config import DATE_FORMAT

STATUS_ICONS = {
    "Active": "🟢",
    "Under Maintenance": "🟠",
    "Inactive": "⚪",
    "Open": "🔵",
    "In Progress": "🟠",
    "Completed": "🟢",
    "Cancelled": "⚪",
    "Low": "▫️",
    "Medium": "🔸",
    "High": "🔺",
}


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_date(value: Optional[str], fmt: str = "%d %b %Y") -> str:
    """Render an ISO date string for display; blanks and bad values pass through."""
    if not value:
        return "–"
    try:
        return datetime.strptime(value, DATE_FORMAT).strftime(fmt)
    except ValueError:
        return value


def parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def to_iso(value: Optional[date]) -> str:
    return value.strftime(DATE_FORMAT) if value else ""


def status_badge(label: str) -> str:
    icon = STATUS_ICONS.get(label)
    return f"{icon} {label}" if icon else label
