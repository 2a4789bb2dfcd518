"""
Date wrappers for fpbelt.

Thin helpers over datetime with one convention: dates are UTC. Naive
datetimes passed in are read as UTC, and every parsed date comes back
timezone-aware in UTC.

Numbers are epoch milliseconds, matching the timestamps produced by
get_time(), so get_time and parse_date round-trip.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Union

from loguru import logger

from .option import NOTHING, Option, Some


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

# A bare four-digit year, read as January 1st of that year
YEAR_ONLY_PATTERN = re.compile(r"^\d{4}$")

DateInput = Union[int, float, str]


class DateParseError(ValueError):
    """Raised when a value cannot be read as a date."""
    pass


# =============================================================================
# ACCESSORS
# =============================================================================

def _as_utc(d: datetime) -> datetime:
    if d.tzinfo is None:
        return d.replace(tzinfo=timezone.utc)
    return d.astimezone(timezone.utc)


def get_time(d: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (_as_utc(d) - EPOCH) // ONE_MILLISECOND


def to_iso_string(d: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision, e.g. 2020-01-01T00:00:00.000Z."""
    u = _as_utc(d)
    return (
        f"{u.year:04d}-{u.month:02d}-{u.day:02d}"
        f"T{u.hour:02d}:{u.minute:02d}:{u.second:02d}"
        f".{u.microsecond // 1000:03d}Z"
    )


# =============================================================================
# REFINEMENTS
# =============================================================================

def is_date(x: Any) -> bool:
    return isinstance(x, datetime)


def is_valid(x: Any) -> bool:
    """
    True if x is a datetime that can be placed on the UTC timeline.

    Aware datetimes at the edges of the supported range (year 1 or 9999)
    can overflow when shifted to UTC; those are not valid.
    """
    if not is_date(x):
        return False
    try:
        _as_utc(x)
    except OverflowError:
        return False
    return True


# =============================================================================
# PARSING
# =============================================================================

def _from_millis(ms: Union[int, float]) -> datetime:
    if not math.isfinite(ms):
        raise DateParseError(f"Timestamp must be finite, got {ms}")
    try:
        # Fractions of a millisecond are truncated toward zero
        return EPOCH + timedelta(milliseconds=int(ms))
    except OverflowError as e:
        raise DateParseError(f"Timestamp {ms} is outside the supported range") from e


def _from_text(text: str) -> datetime:
    text = text.strip()
    if YEAR_ONLY_PATTERN.match(text):
        year = int(text)
        if year < 1:
            raise DateParseError(f"Year must be at least 1, got '{text}'")
        return datetime(year, 1, 1, tzinfo=timezone.utc)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise DateParseError(f"'{text}' is not an ISO 8601 date") from e
    try:
        return _as_utc(parsed)
    except OverflowError as e:
        raise DateParseError(f"'{text}' is outside the supported range") from e


def unsafe_parse_date(x: DateInput) -> datetime:
    """
    Read x as a UTC datetime.

    Numbers are epoch milliseconds. Strings are ISO 8601 or a bare year.

    Raises:
        DateParseError: If x cannot be read as a date
    """
    # bool is an int subclass but never a timestamp
    if isinstance(x, bool):
        raise DateParseError(f"Cannot read a date from bool {x}")
    if isinstance(x, (int, float)):
        return _from_millis(x)
    if isinstance(x, str):
        return _from_text(x)
    raise DateParseError(f"Cannot read a date from {type(x).__name__}")


def parse_date(x: DateInput) -> Option[datetime]:
    """Total version of unsafe_parse_date."""
    try:
        return Some(unsafe_parse_date(x))
    except DateParseError as e:
        logger.debug("Date parse failed: {}", e)
        return NOTHING
