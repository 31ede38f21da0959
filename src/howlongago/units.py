"""Unit resolver: fixed millisecond thresholds, coarsest unit first.

Thresholds use fixed conversion constants (365-day year, 30-day month,
7-day week) rather than calendar arithmetic. Changing them changes output
for existing callers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import TimeUnit

__all__ = [
    "UNIT_DEFINITIONS",
    "UnitDefinition",
    "resolve_unit",
]

_SECOND_MS: int = 1000
_MINUTE_MS: int = 60 * _SECOND_MS
_HOUR_MS: int = 60 * _MINUTE_MS
_DAY_MS: int = 24 * _HOUR_MS
_WEEK_MS: int = 7 * _DAY_MS
_MONTH_MS: int = 30 * _DAY_MS
_YEAR_MS: int = 365 * _DAY_MS


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """One row of the resolver table.

    Attributes:
        unit: Time unit selected when the threshold is met
        threshold_milliseconds: Minimum absolute difference for this unit
    """

    unit: TimeUnit
    threshold_milliseconds: int

    def count(self, milliseconds: int) -> int:
        """Whole number of units contained in milliseconds."""
        return milliseconds // self.threshold_milliseconds


# Strictly descending so the first match is the coarsest unit.
UNIT_DEFINITIONS: tuple[UnitDefinition, ...] = (
    UnitDefinition(TimeUnit.YEAR, _YEAR_MS),
    UnitDefinition(TimeUnit.MONTH, _MONTH_MS),
    UnitDefinition(TimeUnit.WEEK, _WEEK_MS),
    UnitDefinition(TimeUnit.DAY, _DAY_MS),
    UnitDefinition(TimeUnit.HOUR, _HOUR_MS),
    UnitDefinition(TimeUnit.MINUTE, _MINUTE_MS),
    UnitDefinition(TimeUnit.SECOND, _SECOND_MS),
)


def resolve_unit(milliseconds: int) -> tuple[TimeUnit, int] | None:
    """Select the coarsest unit whose threshold is met.

    Args:
        milliseconds: Absolute (non-negative) difference in milliseconds

    Returns:
        (unit, count) with count = milliseconds // threshold, or None when
        the difference is below the smallest threshold (one second).

    Raises:
        ValueError: If milliseconds is negative

    Examples:
        >>> resolve_unit(6000)
        (<TimeUnit.SECOND: 'second'>, 6)
        >>> resolve_unit(2 * 31_536_000_000)
        (<TimeUnit.YEAR: 'year'>, 2)
        >>> resolve_unit(999) is None
        True
    """
    if milliseconds < 0:
        msg = f"milliseconds must be non-negative, got {milliseconds}"
        raise ValueError(msg)

    for definition in UNIT_DEFINITIONS:
        if definition.threshold_milliseconds <= milliseconds:
            return (definition.unit, definition.count(milliseconds))
    return None
