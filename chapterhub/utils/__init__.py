"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_utc,
    ensure_utc_naive,
    isoformat_utc,
    now_utc,
    now_utc_naive,
)

__all__ = [
    "ensure_utc",
    "ensure_utc_naive",
    "isoformat_utc",
    "now_utc",
    "now_utc_naive",
]
