"""Utility helpers shared across layers."""

from .datetime import app_timezone, from_storage, local_now, local_now_naive, to_storage

__all__ = [
    "app_timezone",
    "from_storage",
    "local_now",
    "local_now_naive",
    "to_storage",
]
