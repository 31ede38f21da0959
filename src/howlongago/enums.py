"""Enumerations for howlongago type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so TimeUnit.DAY == "day".

Python 3.13+.
"""

from enum import StrEnum


class TimeUnit(StrEnum):
    """Granularity of a relative time phrase.

    Members are declared coarsest first. The value doubles as the singular
    template key; plural_key gives the plural one.
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def singular_key(self) -> str:
        """Template key for a count of exactly one (e.g. "minute")."""
        return self.value

    @property
    def plural_key(self) -> str:
        """Template key for every other count (e.g. "minutes")."""
        return f"{self.value}s"


__all__ = [
    "TimeUnit",
]
