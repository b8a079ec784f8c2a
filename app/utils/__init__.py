"""Utility helper functions."""

from app.utils.helpers import get_summary, host, to_iso, utc_now

__all__ = [
    "get_summary",
    "host",
    "to_iso",
    "utc_now",
]
