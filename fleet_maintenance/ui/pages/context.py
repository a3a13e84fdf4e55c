from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from fleet_maintenance.data.accessors import FleetAccessors
from fleet_maintenance.data.store import KeyValueStore


@dataclass
class PageContext:
    accessors: FleetAccessors
    store: KeyValueStore
    today: date
    user: Optional[Dict[str, Any]] = None
