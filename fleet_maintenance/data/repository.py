"""
Generic CRUD over keyed collections of JSON records.

Every write replaces the whole collection for its key. Records are matched by
their ``id`` field; ids are assigned by callers and never checked for
uniqueness here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fleet_maintenance.data.store import KeyValueStore
from fleet_maintenance.errors import CorruptStoreError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class Repository:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def get_all(self, key: str) -> List[Record]:
        items = self.store.read(key)
        if items is None:
            return []
        if not isinstance(items, list):
            raise CorruptStoreError(key, f"expected a JSON array, found {type(items).__name__}")
        return items

    def set_all(self, key: str, records: List[Record]) -> None:
        self.store.write(key, list(records))

    def add(self, key: str, record: Record) -> Record:
        items = self.get_all(key)
        items.append(record)
        self.set_all(key, items)
        logger.debug("Added %s record id=%s", key, record.get("id"))
        return record

    def update(self, key: str, record: Record) -> Optional[Record]:
        items = self.get_all(key)
        for index, item in enumerate(items):
            if item.get("id") == record.get("id"):
                items[index] = record
                self.set_all(key, items)
                logger.debug("Updated %s record id=%s", key, record.get("id"))
                return record
        logger.warning("Update skipped: no %s record with id=%s", key, record.get("id"))
        return None

    def delete(self, key: str, record_id: str) -> None:
        items = self.get_all(key)
        remaining = [item for item in items if item.get("id") != record_id]
        self.set_all(key, remaining)
        logger.debug("Deleted %d %s record(s) with id=%s", len(items) - len(remaining), key, record_id)

    def seed_defaults(self, defaults: Dict[str, List[Record]]) -> List[str]:
        """Write each fixture collection whose key has never been written.

        An existing collection is left alone even when it is empty. Returns the
        keys that were seeded.
        """
        seeded = []
        for key, records in defaults.items():
            if self.store.exists(key):
                continue
            self.set_all(key, [dict(r) for r in records])
            seeded.append(key)
        if seeded:
            logger.info("Seeded default data for %s", ", ".join(seeded))
        return seeded
