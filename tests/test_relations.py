"""
Unit tests for joins between jobs, components and ships.
"""

from fleet_maintenance.data.models import Job
from fleet_maintenance.data.relations import (
    JOB_ROW_COLUMNS,
    components_available_for_ship,
    components_for_ship,
    find_by_id,
    job_rows,
    jobs_for_ship,
    resolve_component_name,
    resolve_ship_name,
)


class TestShipFilters:
    """Test per-ship filtering."""

    def test_components_for_ship(self, components):
        """Test only the ship's components are returned, in order."""
        assert [c.id for c in components_for_ship(components, "s1")] == ["c1", "c3"]

    def test_jobs_for_ship(self, jobs):
        """Test only the ship's jobs are returned."""
        assert [j.id for j in jobs_for_ship(jobs, "s2")] == ["j2"]

    def test_unknown_ship(self, components, jobs):
        """Test an unknown ship has nothing attached."""
        assert components_for_ship(components, "s404") == []
        assert jobs_for_ship(jobs, "s404") == []


class TestNameResolution:
    """Test display-name lookups."""

    def test_resolves_names(self, jobs, ships, components):
        """Test names come from the referenced entities."""
        assert resolve_ship_name(jobs[0], ships) == "Ever Given"
        assert resolve_component_name(jobs[0], components) == "Main Engine"

    def test_deleted_component_resolves_to_sentinel(self, jobs, components):
        """Test a dangling component reference shows N/A."""
        remaining = [c for c in components if c.id != "c1"]
        assert resolve_component_name(jobs[0], remaining) == "N/A"

    def test_deleted_ship_resolves_to_sentinel(self, jobs):
        """Test a dangling ship reference shows N/A."""
        assert resolve_ship_name(jobs[0], []) == "N/A"

    def test_blank_reference(self, ships):
        """Test a job without a ship resolves to N/A."""
        assert resolve_ship_name(Job(), ships) == "N/A"

    def test_find_by_id(self, ships):
        """Test lookups by id."""
        assert find_by_id(ships, "s2").name == "Maersk Alabama"
        assert find_by_id(ships, "s404") is None
        assert find_by_id(ships, None) is None


class TestComponentAvailability:
    """Test component choices for the job form."""

    def test_no_ship_selected_returns_everything(self, components):
        """Test every component is offered before a ship is chosen."""
        assert components_available_for_ship(components, None) == components
        assert components_available_for_ship(components, "") == components

    def test_selected_ship_narrows_choices(self, components):
        """Test only the chosen ship's components are offered."""
        available = components_available_for_ship(components, "s1")
        assert [c.id for c in available] == ["c1", "c3"]
        assert all(c.ship_id == "s1" for c in available)


class TestJobRows:
    """Test the joined jobs table."""

    def test_rows_include_resolved_names(self, jobs, ships, components):
        """Test each job row carries ship and component names."""
        rows = job_rows(jobs, ships, components)
        assert list(rows.columns) == JOB_ROW_COLUMNS
        assert rows["id"].tolist() == ["j1", "j2", "j3"]
        assert rows["ship"].tolist() == ["Ever Given", "Maersk Alabama", "Ever Given"]
        assert rows["component"].tolist() == ["Main Engine", "Radar", "Boiler"]

    def test_dangling_rows(self, jobs, ships):
        """Test rows survive deleted components."""
        rows = job_rows(jobs, ships, [])
        assert set(rows["component"]) == {"N/A"}

    def test_empty(self, ships, components):
        """Test no jobs gives an empty frame with the expected columns."""
        rows = job_rows([], ships, components)
        assert rows.empty
        assert list(rows.columns) == JOB_ROW_COLUMNS
