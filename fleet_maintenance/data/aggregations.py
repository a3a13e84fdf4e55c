"""
Dashboard aggregates computed on demand from the raw entity collections.

All functions are pure: pass the collections and the reference date, get the
summary back. Nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from fleet_maintenance.config import DATE_FORMAT
from fleet_maintenance.data.models import Component, Job, Ship

IN_PROGRESS = "In Progress"
COMPLETED = "Completed"


@dataclass(frozen=True)
class FleetKpis:
    total_ships: int
    overdue_maintenance: int
    jobs_in_progress: int
    completed_jobs: int


def _parse_dates(values: Sequence[str]) -> pd.Series:
    return pd.to_datetime(pd.Series(list(values), dtype="object"), format=DATE_FORMAT, errors="coerce")


def _status_series(jobs: Sequence[Job]) -> pd.Series:
    return pd.Series([job.status for job in jobs], dtype="object")


def count_overdue(components: Sequence[Component], today: date) -> int:
    """Components last maintained strictly before ``today``.

    Blank or unparsable dates never count as overdue.
    """
    if not components:
        return 0
    last_maintained = _parse_dates([c.last_maintenance_date for c in components])
    return int((last_maintained < pd.Timestamp(today)).sum())


def count_status(jobs: Sequence[Job], status: str) -> int:
    if not jobs:
        return 0
    return int(_status_series(jobs).eq(status).sum())


def compute_kpis(
    ships: Sequence[Ship],
    components: Sequence[Component],
    jobs: Sequence[Job],
    today: Optional[date] = None,
) -> FleetKpis:
    today = today or date.today()
    return FleetKpis(
        total_ships=len(ships),
        overdue_maintenance=count_overdue(components, today),
        jobs_in_progress=count_status(jobs, IN_PROGRESS),
        completed_jobs=count_status(jobs, COMPLETED),
    )


def status_histogram(jobs: Sequence[Job]) -> List[Tuple[str, int]]:
    """(status, count) pairs in the order each status is first seen."""
    if not jobs:
        return []
    statuses = _status_series(jobs)
    counts = statuses.groupby(statuses, sort=False).size()
    return [(str(status), int(count)) for status, count in counts.items()]


def status_histogram_frame(jobs: Sequence[Job]) -> pd.DataFrame:
    return pd.DataFrame(status_histogram(jobs), columns=["status", "count"])
