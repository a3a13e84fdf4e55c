"""
Starter dataset written on a fresh install so every screen has data.
"""

from __future__ import annotations

from typing import Dict, List

from fleet_maintenance.config import COMPONENTS_KEY, JOBS_KEY, NOTIFICATIONS_KEY, SHIPS_KEY
from fleet_maintenance.data.repository import Record

DEFAULT_SHIPS: List[Record] = [
    {"id": "s1", "name": "Ever Given", "imo": "9811000", "flag": "Panama", "status": "Active"},
    {"id": "s2", "name": "Maersk Alabama", "imo": "9164263", "flag": "USA", "status": "Under Maintenance"},
]

DEFAULT_COMPONENTS: List[Record] = [
    {
        "id": "c1",
        "shipId": "s1",
        "name": "Main Engine",
        "serialNumber": "ME-1234",
        "installDate": "2020-01-10",
        "lastMaintenanceDate": "2024-03-12",
    },
    {
        "id": "c2",
        "shipId": "s2",
        "name": "Radar",
        "serialNumber": "RAD-5678",
        "installDate": "2021-07-18",
        "lastMaintenanceDate": "2023-12-01",
    },
]

DEFAULT_JOBS: List[Record] = [
    {
        "id": "j1",
        "componentId": "c1",
        "shipId": "s1",
        "type": "Inspection",
        "priority": "High",
        "status": "Open",
        "assignedEngineerId": "3",
        "scheduledDate": "2024-05-05",
    },
]


def default_collections() -> Dict[str, List[Record]]:
    # Key order matters only for the seeding log line
    return {
        SHIPS_KEY: DEFAULT_SHIPS,
        COMPONENTS_KEY: DEFAULT_COMPONENTS,
        JOBS_KEY: DEFAULT_JOBS,
        NOTIFICATIONS_KEY: [],
    }
