"""
Unit tests for the entity structs.
"""

import re

from fleet_maintenance.data.models import Component, Job, Notification, Ship, missing_fields, new_id


class TestRecordConversion:
    """Test from_record / to_record."""

    def test_ship_round_trip_keeps_field_set(self):
        """Test a stored ship record converts back unchanged."""
        record = {"id": "s1", "name": "Ever Given", "imo": "9811000", "flag": "Panama", "status": "Active"}
        assert Ship.from_record(record).to_record() == record

    def test_component_uses_camel_case_keys(self):
        """Test storage keys stay camelCase."""
        component = Component(id="c1", ship_id="s1", name="Radar", serial_number="R-1",
                              install_date="2021-07-18", last_maintenance_date="2023-12-01")
        assert component.to_record() == {
            "id": "c1",
            "shipId": "s1",
            "name": "Radar",
            "serialNumber": "R-1",
            "installDate": "2021-07-18",
            "lastMaintenanceDate": "2023-12-01",
        }

    def test_job_defaults_fill_missing_keys(self):
        """Test partially shaped records become complete structs."""
        job = Job.from_record({"id": "j9", "type": "Inspection"})
        assert job.priority == "Medium"
        assert job.status == "Open"
        assert job.ship_id == ""
        assert set(job.to_record()) == {
            "id", "shipId", "componentId", "type", "priority", "status", "assignedEngineerId", "scheduledDate",
        }

    def test_unknown_keys_are_dropped(self):
        """Test extra stored keys do not leak into ships."""
        ship = Ship.from_record({"id": "s1", "name": "A", "colour": "red"})
        assert "colour" not in ship.to_record()

    def test_none_values_become_defaults(self):
        """Test null fields read as blanks."""
        component = Component.from_record({"id": "c1", "lastMaintenanceDate": None})
        assert component.last_maintenance_date == ""

    def test_notification_keeps_opaque_payload(self):
        """Test notifications preserve every stored key."""
        record = {"id": "n1", "message": "Job j1 overdue", "read": False}
        notification = Notification.from_record(record)
        assert notification.payload == {"message": "Job j1 overdue", "read": False}
        assert notification.to_record() == record

    def test_defaults_are_not_shared(self):
        """Test each notification gets its own payload dict."""
        first, second = Notification(), Notification()
        first.payload["x"] = 1
        assert second.payload == {}


class TestMissingFields:
    """Test required-field presence checks."""

    def test_complete_ship(self):
        """Test a filled ship has no missing fields."""
        assert missing_fields(Ship(name="A", imo="1", flag="X", status="Active")) == []

    def test_blank_and_whitespace_fields(self):
        """Test blanks and whitespace-only values are missing."""
        assert missing_fields(Ship(name=" ", imo="", flag="X")) == ["name", "imo"]

    def test_job_engineer_is_optional(self):
        """Test the engineer id may stay blank."""
        job = Job(ship_id="s1", component_id="c1", type="Inspection", scheduled_date="2025-05-05")
        assert missing_fields(job) == []

    def test_job_requires_component_and_date(self):
        """Test a job without component or date is incomplete."""
        job = Job(ship_id="s1", type="Inspection")
        assert missing_fields(job) == ["component_id", "scheduled_date"]

    def test_component_required_fields(self):
        """Test every component field but the ids is required."""
        assert missing_fields(Component(ship_id="s1")) == [
            "name", "serial_number", "install_date", "last_maintenance_date",
        ]


class TestNewId:
    """Test caller-side id generation."""

    def test_prefix_and_millis(self):
        """Test ids are prefix plus epoch milliseconds."""
        assert re.fullmatch(r"j\d{13}", new_id("j"))
