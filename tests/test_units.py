"""Tests for units.py - threshold table and coarsest unit selection.

Covers:
    - Table shape: exhaustive, strictly descending, positive thresholds
    - Exact threshold constants (fixed 365-day year, 30-day month)
    - resolve_unit() boundaries, counts, and the below-one-second miss
    - Property: the chosen unit is the coarsest whose threshold is met
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from howlongago.enums import TimeUnit
from howlongago.units import UNIT_DEFINITIONS, UnitDefinition, resolve_unit
from tests.strategies import MAX_TEST_DIFFERENCE_MS, unit_band_differences


class TestUnitTable:
    """Shape and constants of UNIT_DEFINITIONS."""

    def test_exhaustive_over_time_units(self) -> None:
        """Every TimeUnit appears exactly once."""
        units = [definition.unit for definition in UNIT_DEFINITIONS]
        assert sorted(units) == sorted(TimeUnit)
        assert len(units) == len(set(units))

    def test_strictly_descending(self) -> None:
        """Thresholds strictly decrease down the table."""
        thresholds = [definition.threshold_milliseconds for definition in UNIT_DEFINITIONS]
        assert all(a > b for a, b in zip(thresholds, thresholds[1:], strict=False))

    def test_thresholds_positive_and_unique(self) -> None:
        """All thresholds are positive and distinct."""
        thresholds = [definition.threshold_milliseconds for definition in UNIT_DEFINITIONS]
        assert all(t > 0 for t in thresholds)
        assert len(set(thresholds)) == len(thresholds)

    @pytest.mark.parametrize(
        ("unit", "threshold"),
        [
            (TimeUnit.YEAR, 31_536_000_000),
            (TimeUnit.MONTH, 2_592_000_000),
            (TimeUnit.WEEK, 604_800_000),
            (TimeUnit.DAY, 86_400_000),
            (TimeUnit.HOUR, 3_600_000),
            (TimeUnit.MINUTE, 60_000),
            (TimeUnit.SECOND, 1_000),
        ],
    )
    def test_threshold_constants(self, unit: TimeUnit, threshold: int) -> None:
        """Fixed conversion constants are preserved exactly."""
        definition = next(d for d in UNIT_DEFINITIONS if d.unit is unit)
        assert definition.threshold_milliseconds == threshold

    def test_table_order_matches_enum_order(self) -> None:
        """TimeUnit is declared coarsest first, like the table."""
        assert [d.unit for d in UNIT_DEFINITIONS] == list(TimeUnit)

    def test_definition_is_frozen(self) -> None:
        """UnitDefinition cannot be mutated."""
        definition = UnitDefinition(TimeUnit.DAY, 86_400_000)
        with pytest.raises(AttributeError):
            definition.threshold_milliseconds = 1  # type: ignore[misc]


class TestResolveUnit:
    """resolve_unit() behaviour at and around thresholds."""

    def test_below_one_second_is_none(self) -> None:
        """Differences under the smallest threshold match no unit."""
        assert resolve_unit(0) is None
        assert resolve_unit(999) is None

    def test_exact_second(self) -> None:
        """Exactly one second resolves to one second."""
        assert resolve_unit(1000) == (TimeUnit.SECOND, 1)

    def test_six_seconds(self) -> None:
        """Counts are floored."""
        assert resolve_unit(6999) == (TimeUnit.SECOND, 6)

    def test_just_below_minute(self) -> None:
        """59.999 seconds stays in seconds."""
        assert resolve_unit(59_999) == (TimeUnit.SECOND, 59)

    def test_exact_minute(self) -> None:
        """Threshold itself qualifies (<=)."""
        assert resolve_unit(60_000) == (TimeUnit.MINUTE, 1)

    def test_two_years_is_year_not_month(self) -> None:
        """Coarsest matching unit wins."""
        assert resolve_unit(2 * 31_536_000_000) == (TimeUnit.YEAR, 2)

    def test_thirty_days_is_month(self) -> None:
        """30 days is one fixed-length month, not four weeks."""
        assert resolve_unit(30 * 86_400_000) == (TimeUnit.MONTH, 1)

    def test_364_days_is_twelve_months(self) -> None:
        """No calendar awareness: 364 days is 12 fixed months."""
        assert resolve_unit(364 * 86_400_000) == (TimeUnit.MONTH, 12)

    def test_week_band(self) -> None:
        """Two weeks resolve to weeks."""
        assert resolve_unit(14 * 86_400_000) == (TimeUnit.WEEK, 2)

    def test_large_count(self) -> None:
        """Very large differences stay in years with large counts."""
        assert resolve_unit(1000 * 31_536_000_000 + 5) == (TimeUnit.YEAR, 1000)

    def test_negative_rejected(self) -> None:
        """Callers pass absolute values; negatives are a programming error."""
        with pytest.raises(ValueError, match="non-negative"):
            resolve_unit(-1)


class TestResolveUnitProperties:
    """Property-based invariants of resolve_unit()."""

    @given(unit_band_differences())
    def test_band_resolves_to_its_unit(self, band: tuple[int, int]) -> None:
        """Property: every difference in a unit's band resolves to that unit."""
        index, difference = band
        definition = UNIT_DEFINITIONS[index]
        assert resolve_unit(difference) == (
            definition.unit,
            difference // definition.threshold_milliseconds,
        )

    @given(st.integers(min_value=1000, max_value=MAX_TEST_DIFFERENCE_MS))
    def test_coarsest_unit_selected(self, difference: int) -> None:
        """Property: no coarser unit's threshold is met."""
        resolved = resolve_unit(difference)
        assert resolved is not None
        unit, count = resolved
        event(f"unit={unit}")
        position = [d.unit for d in UNIT_DEFINITIONS].index(unit)
        assert all(
            d.threshold_milliseconds > difference for d in UNIT_DEFINITIONS[:position]
        )
        assert count >= 1
