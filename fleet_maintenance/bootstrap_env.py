"""
Process bootstrap for the fleet dashboard, run once on import.

Streamlit secrets are copied into ``os.environ`` as flat upper-case names
(``[storage] data_dir`` becomes ``STORAGE_DATA_DIR``), then a local ``.env``
is read. Neither step overrides a variable that is already set. Logging is
configured last so ``FLEET_LOG_LEVEL`` can come from either source.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, Iterator, Tuple

import streamlit as st
from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "INFO"

_ENV_NAME_INVALID = re.compile(r"[^A-Z0-9_]")
_done = {"secrets": False, "dotenv": False, "logging": False}


def env_name(*parts: str) -> str:
    return _ENV_NAME_INVALID.sub("_", "_".join(parts).upper())


def iter_secret_vars(secrets: Dict[str, Any], *path: str) -> Iterator[Tuple[str, str]]:
    for key, value in secrets.items():
        if isinstance(value, dict):
            yield from iter_secret_vars(value, *path, key)
        else:
            yield env_name(*path, key), str(value)


def _read_secrets() -> Dict[str, Any]:
    try:
        return st.secrets.to_dict()
    except Exception:
        # st.secrets raises when no secrets.toml exists
        return {}


def configure_logging() -> None:
    if _done["logging"]:
        return
    level_name = os.getenv("FLEET_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    _done["logging"] = True


def ensure_env() -> None:
    """Idempotent; safe inside and outside the Streamlit runtime."""
    if not _done["secrets"]:
        for name, value in iter_secret_vars(_read_secrets()):
            os.environ.setdefault(name, value)
        _done["secrets"] = True
    if not _done["dotenv"]:
        load_dotenv(override=False)
        _done["dotenv"] = True
    configure_logging()


ensure_env()
