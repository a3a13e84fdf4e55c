"""
Joins between jobs, components and ships by their id references.

References are never enforced, so every lookup tolerates a missing target and
falls back to the ``N/A`` display label.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, TypeVar

import pandas as pd

from fleet_maintenance.config import NOT_FOUND_LABEL
from fleet_maintenance.data.models import Component, Job, Ship

T = TypeVar("T")

JOB_ROW_COLUMNS = [
    "id",
    "ship",
    "component",
    "type",
    "priority",
    "status",
    "scheduled_date",
    "assigned_engineer_id",
]


def find_by_id(items: Iterable[T], item_id: Optional[str]) -> Optional[T]:
    if not item_id:
        return None
    return next((item for item in items if getattr(item, "id", None) == item_id), None)


def components_for_ship(components: Sequence[Component], ship_id: str) -> List[Component]:
    return [c for c in components if c.ship_id == ship_id]


def jobs_for_ship(jobs: Sequence[Job], ship_id: str) -> List[Job]:
    return [j for j in jobs if j.ship_id == ship_id]


def resolve_ship_name(job: Job, ships: Sequence[Ship]) -> str:
    ship = find_by_id(ships, job.ship_id)
    return ship.name if ship else NOT_FOUND_LABEL


def resolve_component_name(job: Job, components: Sequence[Component]) -> str:
    component = find_by_id(components, job.component_id)
    return component.name if component else NOT_FOUND_LABEL


def components_available_for_ship(
    components: Sequence[Component],
    ship_id: Optional[str],
) -> List[Component]:
    """Component choices for a job form.

    Until a ship is picked every component is offered; afterwards only that
    ship's components.
    """
    if not ship_id:
        return list(components)
    return components_for_ship(components, ship_id)


def job_rows(
    jobs: Sequence[Job],
    ships: Sequence[Ship],
    components: Sequence[Component],
) -> pd.DataFrame:
    """Jobs with ship and component names resolved, one row per job."""
    if not jobs:
        return pd.DataFrame(columns=JOB_ROW_COLUMNS)
    records = [
        {
            "id": job.id,
            "ship": resolve_ship_name(job, ships),
            "component": resolve_component_name(job, components),
            "type": job.type,
            "priority": job.priority,
            "status": job.status,
            "scheduled_date": job.scheduled_date,
            "assigned_engineer_id": job.assigned_engineer_id,
        }
        for job in jobs
    ]
    return pd.DataFrame.from_records(records, columns=JOB_ROW_COLUMNS)
