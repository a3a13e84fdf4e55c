"""
Filter utilities applied to the job list on the jobs screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from fleet_maintenance.data.models import Job


@dataclass
class JobFilters:
    ship_id: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None


DEFAULT_FILTERS = JobFilters()


def apply_job_filters(jobs: Sequence[Job], filters: JobFilters) -> List[Job]:
    """
    Keep the jobs that match every filter that is set. Unset (None or empty)
    filters match everything; the original order is preserved.
    """
    filtered = list(jobs)

    if filters.ship_id:
        filtered = [job for job in filtered if job.ship_id == filters.ship_id]

    if filters.status:
        filtered = [job for job in filtered if job.status == filters.status]

    if filters.priority:
        filtered = [job for job in filtered if job.priority == filters.priority]

    return filtered


def serialize_filters(filters: JobFilters) -> Dict[str, Any]:
    """
    Convert the JobFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "ship_id": filters.ship_id,
        "status": filters.status,
        "priority": filters.priority,
    }
