"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import streamlit as st


@dataclass(frozen=True)
class PageConfig:
    key: str
    label: str


# Ordered page definitions for the sidebar navigation
PAGES: List[PageConfig] = [
    PageConfig("dashboard", "Dashboard"),
    PageConfig("ships", "Ships"),
    PageConfig("jobs", "Maintenance Jobs"),
    PageConfig("calendar", "Calendar"),
]

# Storage keys, one JSON array per key
SHIPS_KEY = "ships"
COMPONENTS_KEY = "components"
JOBS_KEY = "jobs"
NOTIFICATIONS_KEY = "notifications"
USER_KEY = "user"

SHIP_STATUSES = ["Active", "Under Maintenance", "Inactive"]
JOB_PRIORITIES = ["Low", "Medium", "High"]
JOB_STATUSES = ["Open", "In Progress", "Completed", "Cancelled"]

NOT_FOUND_LABEL = "N/A"
DATE_FORMAT = "%Y-%m-%d"

DEFAULT_DATA_DIR = ".fleet_data"

_TRUTHY = {"1", "true", "yes", "on"}


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        v = st.secrets.get(name)
    except Exception:
        return default
    return str(v) if v is not None else default


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path
    seed_on_start: bool


def load_storage_settings() -> StorageSettings:
    data_dir = get_setting("FLEET_DATA_DIR", DEFAULT_DATA_DIR) or DEFAULT_DATA_DIR
    seed_raw = get_setting("FLEET_SEED_ON_START", "true") or "true"
    return StorageSettings(
        data_dir=Path(data_dir).expanduser(),
        seed_on_start=seed_raw.strip().lower() in _TRUTHY,
    )
