"""Helpers for working with UTC timestamps."""

from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def now_utc_naive() -> datetime:
    """Return the current UTC time without attaching ``tzinfo``."""

    return now_utc().replace(tzinfo=None)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed as an aware UTC datetime.

    Naive values are assumed to already be in UTC, which is how the record
    store persists every timestamp.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def ensure_utc_naive(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC but without ``tzinfo``.

    The record store columns are plain ``DATETIME`` columns, so aware values
    are converted before they are written or compared.
    """

    normalized = ensure_utc(value)
    if normalized is None:
        return None
    return normalized.replace(tzinfo=None)


def isoformat_utc(value: datetime) -> str:
    """Return the ISO-8601 representation of ``value`` in UTC."""

    normalized = ensure_utc(value)
    if normalized is None:  # pragma: no cover - guarded by the signature
        msg = "A datetime value is required"
        raise ValueError(msg)
    return normalized.isoformat()
