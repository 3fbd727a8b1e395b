"""Timestamp helpers for naming log directories."""

from datetime import datetime


def now() -> str:
    """Current local time as a sortable directory-safe string (e.g., 20261019_142501)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
