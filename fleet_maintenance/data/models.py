"""
Data-transfer structs for the persisted entities.

Each struct is fully populated at construction (blank strings or form
defaults), and converts to and from the camelCase records kept in storage.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

from fleet_maintenance.data.repository import Record


def new_id(prefix: str) -> str:
    """Caller-side id generation: prefix plus epoch milliseconds."""
    return f"{prefix}{int(time.time() * 1000)}"


def _str(record: Record, key: str, default: str = "") -> str:
    value = record.get(key)
    if value is None:
        return default
    return str(value)


def _blank(value: str) -> bool:
    return not value or not value.strip()


@dataclass
class Ship:
    id: str = ""
    name: str = ""
    imo: str = ""
    flag: str = ""
    status: str = "Active"

    REQUIRED = ("name", "imo", "flag", "status")

    @classmethod
    def from_record(cls, record: Record) -> "Ship":
        return cls(
            id=_str(record, "id"),
            name=_str(record, "name"),
            imo=_str(record, "imo"),
            flag=_str(record, "flag"),
            status=_str(record, "status", "Active"),
        )

    def to_record(self) -> Record:
        return {
            "id": self.id,
            "name": self.name,
            "imo": self.imo,
            "flag": self.flag,
            "status": self.status,
        }


@dataclass
class Component:
    id: str = ""
    ship_id: str = ""
    name: str = ""
    serial_number: str = ""
    install_date: str = ""
    last_maintenance_date: str = ""

    REQUIRED = ("name", "serial_number", "install_date", "last_maintenance_date")

    @classmethod
    def from_record(cls, record: Record) -> "Component":
        return cls(
            id=_str(record, "id"),
            ship_id=_str(record, "shipId"),
            name=_str(record, "name"),
            serial_number=_str(record, "serialNumber"),
            install_date=_str(record, "installDate"),
            last_maintenance_date=_str(record, "lastMaintenanceDate"),
        )

    def to_record(self) -> Record:
        return {
            "id": self.id,
            "shipId": self.ship_id,
            "name": self.name,
            "serialNumber": self.serial_number,
            "installDate": self.install_date,
            "lastMaintenanceDate": self.last_maintenance_date,
        }


@dataclass
class Job:
    id: str = ""
    ship_id: str = ""
    component_id: str = ""
    type: str = ""
    priority: str = "Medium"
    status: str = "Open"
    assigned_engineer_id: str = ""
    scheduled_date: str = ""

    REQUIRED = ("ship_id", "component_id", "type", "priority", "status", "scheduled_date")

    @classmethod
    def from_record(cls, record: Record) -> "Job":
        return cls(
            id=_str(record, "id"),
            ship_id=_str(record, "shipId"),
            component_id=_str(record, "componentId"),
            type=_str(record, "type"),
            priority=_str(record, "priority", "Medium"),
            status=_str(record, "status", "Open"),
            assigned_engineer_id=_str(record, "assignedEngineerId"),
            scheduled_date=_str(record, "scheduledDate"),
        )

    def to_record(self) -> Record:
        return {
            "id": self.id,
            "shipId": self.ship_id,
            "componentId": self.component_id,
            "type": self.type,
            "priority": self.priority,
            "status": self.status,
            "assignedEngineerId": self.assigned_engineer_id,
            "scheduledDate": self.scheduled_date,
        }


@dataclass
class Notification:
    """Stored and listed, never interpreted; everything but ``id`` is payload."""

    id: str = ""
    payload: Dict[str, Any] = field(default_factory=dict)

    REQUIRED = ()

    @classmethod
    def from_record(cls, record: Record) -> "Notification":
        payload = {k: v for k, v in record.items() if k != "id"}
        return cls(id=_str(record, "id"), payload=payload)

    def to_record(self) -> Record:
        return {"id": self.id, **self.payload}


def missing_fields(entity) -> List[str]:
    """Names of required fields left blank on a Ship, Component or Job."""
    return [name for name in entity.REQUIRED if _blank(getattr(entity, name))]
