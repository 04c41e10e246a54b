"""
Environment-driven settings.
Every value is read on call so a .env loaded by run_server.py is honoured.
"""

import os
import tempfile
from typing import Optional

TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY


def get_host() -> str:
    return os.getenv("HOST", "127.0.0.1")


def get_port() -> int:
    return int(os.getenv("PORT", "7860"))


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "info").strip().lower()


def log_to_file() -> bool:
    return _flag("LOG_TO_FILE")


def get_log_file() -> str:
    return os.getenv("LOG_FILE", os.path.join(tempfile.gettempdir(), "hello_addon.log"))


def reload_enabled() -> bool:
    return _flag("RELOAD")


def get_catalog_file() -> Optional[str]:
    """Path of an alternate catalog data file, or None for the bundled one."""
    path = os.getenv("ADDON_CATALOG_FILE", "").strip()
    return path or None
