"""Conversion of instant-like values to epoch milliseconds.

Accepted forms:
    datetime - aware values as is; naive values are local time
    date     - midnight UTC
    int      - epoch milliseconds
    float    - epoch milliseconds, truncated toward zero
    str      - ISO 8601 ("2023-10-27", "2023-10-27T10:00:00.000Z") or
               RFC 2822 ("Fri, 27 Oct 2023 10:00:00 GMT")

ISO date-only strings are midnight UTC; ISO date-time strings without an
offset are local time. Anything that cannot be converted raises
InvalidInstantError rather than producing a difference from garbage.

Valid instants lie within 100,000,000 days of the Unix epoch.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import time
from datetime import date, datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import NoReturn

from .errors import InvalidInstantError

__all__ = [
    "MAX_EPOCH_MS",
    "Instant",
    "now_milliseconds",
    "to_epoch_milliseconds",
]

type Instant = datetime | date | int | float | str
"""Any value accepted as a target or reference instant."""

MAX_EPOCH_MS: int = 100_000_000 * 86_400_000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def now_milliseconds() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def to_epoch_milliseconds(value: Instant, *, argument: str = "target") -> int:
    """Convert an instant-like value to integer epoch milliseconds.

    Args:
        value: datetime, date, int/float epoch milliseconds, or date string
        argument: Name reported in errors ('target' or 'reference')

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z (negative before it)

    Raises:
        InvalidInstantError: If value has an unsupported type, cannot be
            parsed, is not finite, or lies outside the valid range

    Examples:
        >>> to_epoch_milliseconds("2023-10-27T10:00:00.000Z")
        1698400800000
        >>> to_epoch_milliseconds(1698400800000.9)
        1698400800000
        >>> to_epoch_milliseconds(date(1970, 1, 2))
        86400000
    """
    match value:
        case bool():
            # bool is an int subclass; True is not an instant
            _reject(value, argument, "expected a date, datetime, number or string")
        case datetime():
            milliseconds = _from_datetime(value, argument)
        case date():
            milliseconds = _from_datetime(
                datetime(value.year, value.month, value.day, tzinfo=timezone.utc), argument
            )
        case int():
            milliseconds = value
        case float():
            if not math.isfinite(value):
                _reject(value, argument, "number is not finite")
            milliseconds = math.trunc(value)
        case str():
            milliseconds = _from_string(value, argument)
        case _:
            _reject(
                value,
                argument,
                f"unsupported type {type(value).__name__}; "
                "expected a date, datetime, number or string",
            )

    if abs(milliseconds) > MAX_EPOCH_MS:
        _reject(value, argument, "instant is outside the supported range")
    return milliseconds


def _reject(value: object, argument: str, reason: str) -> NoReturn:
    msg = f"Invalid {argument} instant {value!r}: {reason}"
    raise InvalidInstantError(msg, input_value=value, argument=argument)


def _from_datetime(value: datetime, argument: str) -> int:
    try:
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.astimezone()
        return (value - _EPOCH) // _ONE_MS
    except (OverflowError, OSError, ValueError) as e:
        msg = f"Invalid {argument} instant {value!r}: {e}"
        raise InvalidInstantError(msg, input_value=value, argument=argument) from e


def _from_string(value: str, argument: str) -> int:
    text = value.strip()
    if not text:
        _reject(value, argument, "empty string")

    # ISO 8601 date only: midnight UTC
    try:
        parsed_date = date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return _from_datetime(
            datetime(parsed_date.year, parsed_date.month, parsed_date.day, tzinfo=timezone.utc),
            argument,
        )

    # ISO 8601 date-time: naive values are local time
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        pass
    else:
        return _from_datetime(parsed, argument)

    # RFC 2822; "-0000" yields a naive datetime meaning UTC
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError):
        _reject(value, argument, "not an ISO 8601 or RFC 2822 date string")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return _from_datetime(parsed, argument)
