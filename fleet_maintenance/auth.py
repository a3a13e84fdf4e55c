"""
Mock login kept in the key-value store under ``user``.

Credentials are hard-coded demo accounts; nothing here protects data.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fleet_maintenance.config import USER_KEY
from fleet_maintenance.data.store import KeyValueStore

logger = logging.getLogger(__name__)

MOCK_USERS: List[Dict[str, str]] = [
    {"id": "1", "role": "Admin", "email": "admin@entnt.in", "password": "admin123"},
    {"id": "2", "role": "Inspector", "email": "inspector@entnt.in", "password": "inspect123"},
    {"id": "3", "role": "Engineer", "email": "engineer@entnt.in", "password": "engine123"},
]


def login(store: KeyValueStore, email: str, password: str) -> Optional[Dict[str, Any]]:
    found = next(
        (u for u in MOCK_USERS if u["email"] == email and u["password"] == password),
        None,
    )
    if found is None:
        logger.info("Login rejected for %s", email)
        return None
    user = {k: v for k, v in found.items() if k != "password"}
    store.write(USER_KEY, user)
    logger.info("Logged in %s as %s", email, user["role"])
    return user


def current_user(store: KeyValueStore) -> Optional[Dict[str, Any]]:
    user = store.read(USER_KEY)
    return user if isinstance(user, dict) else None


def logout(store: KeyValueStore) -> None:
    store.remove(USER_KEY)


def has_role(user: Optional[Dict[str, Any]], role: str) -> bool:
    return bool(user) and user.get("role") == role
