"""Quick validation script for the seeded store and derived views.

Run with `python scripts/validate_storage.py` to seed a throwaway store and
check the dashboard KPIs, status chart data and calendar buckets.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

from fleet_maintenance.data.aggregations import compute_kpis, status_histogram
from fleet_maintenance.data.calendar import build_month
from fleet_maintenance.data.loader import build_accessors


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        accessors = build_accessors(Path(tmp))
        reseeded = accessors.initialize_storage()
        if reseeded:
            raise SystemExit(f"Seeding is not idempotent, reseeded: {reseeded}")

        ships = accessors.get_ships()
        components = accessors.get_components()
        jobs = accessors.get_jobs()

        kpis = compute_kpis(ships, components, jobs, today=date(2025, 1, 1))
        assert kpis.total_ships == 2, kpis
        assert kpis.overdue_maintenance == 2, kpis
        assert status_histogram(jobs) == [("Open", 1)]

        may_2024 = build_month(jobs, 2024, 5, today=date(2025, 1, 1))
        assert may_2024.day(5).job_count == 1
        assert sum(d.job_count for d in may_2024.days) == 1

    print("Storage validation passed. Ships:", len(ships), "Jobs:", len(jobs))


if __name__ == "__main__":
    main()
