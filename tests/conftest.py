"""
Shared fixtures: an in-memory store and a file-backed store, each wrapped in
a repository and the typed accessors.
"""

import pytest

from fleet_maintenance.data.accessors import FleetAccessors
from fleet_maintenance.data.models import Component, Job, Ship
from fleet_maintenance.data.repository import Repository
from fleet_maintenance.data.store import JsonFileStore, MemoryStore


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def repository(memory_store):
    return Repository(memory_store)


@pytest.fixture
def accessors(repository):
    return FleetAccessors(repository)


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(tmp_path / "store")


@pytest.fixture
def ships():
    return [
        Ship(id="s1", name="Ever Given", imo="9811000", flag="Panama", status="Active"),
        Ship(id="s2", name="Maersk Alabama", imo="9164263", flag="USA", status="Under Maintenance"),
    ]


@pytest.fixture
def components():
    return [
        Component(id="c1", ship_id="s1", name="Main Engine", serial_number="ME-1234",
                  install_date="2020-01-10", last_maintenance_date="2024-03-12"),
        Component(id="c2", ship_id="s2", name="Radar", serial_number="RAD-5678",
                  install_date="2021-07-18", last_maintenance_date="2023-12-01"),
        Component(id="c3", ship_id="s1", name="Boiler", serial_number="BO-42",
                  install_date="2019-02-02", last_maintenance_date="2099-01-01"),
    ]


@pytest.fixture
def jobs():
    return [
        Job(id="j1", ship_id="s1", component_id="c1", type="Inspection", priority="High",
            status="Open", assigned_engineer_id="3", scheduled_date="2025-05-05"),
        Job(id="j2", ship_id="s2", component_id="c2", type="Calibration", priority="Low",
            status="Completed", scheduled_date="2025-05-12"),
        Job(id="j3", ship_id="s1", component_id="c3", type="Overhaul", priority="Medium",
            status="In Progress", scheduled_date="2025-05-05"),
    ]
