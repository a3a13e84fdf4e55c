"""
Wires the configured store, repository and accessors together for the app.
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

from fleet_maintenance.bootstrap_env import ensure_env
from fleet_maintenance.config import load_storage_settings
from fleet_maintenance.data.accessors import FleetAccessors
from fleet_maintenance.data.repository import Repository
from fleet_maintenance.data.store import JsonFileStore

logger = logging.getLogger(__name__)


def build_accessors(data_dir: Path, seed: bool = True) -> FleetAccessors:
    accessors = FleetAccessors(Repository(JsonFileStore(data_dir)))
    if seed:
        accessors.initialize_storage()
    return accessors


def load_accessors() -> FleetAccessors:
    """Wrapper that resolves config and calls the cached implementation."""
    ensure_env()
    settings = load_storage_settings()
    return _load_accessors_impl(str(settings.data_dir), settings.seed_on_start)


@st.cache_resource(show_spinner=False)
def _load_accessors_impl(data_dir: str, seed: bool) -> FleetAccessors:
    """One accessor set per data directory for the lifetime of the server process."""
    logger.info("Opening fleet store at %s", data_dir)
    return build_accessors(Path(data_dir), seed=seed)
