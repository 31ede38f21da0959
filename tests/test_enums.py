"""Property-based tests for the enums module.

Tests TimeUnit for completeness, ordering, and template key derivation.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from howlongago import enums
from howlongago.enums import TimeUnit
from howlongago.localization.pack import TEMPLATE_KEYS


class TestTimeUnitProperties:
    """Property-based tests for TimeUnit enum."""

    def test_all_members_have_string_values(self) -> None:
        """Property: All TimeUnit members have non-empty string values."""
        for member in TimeUnit:
            assert isinstance(member.value, str)
            assert len(member.value) > 0

    def test_str_returns_value(self) -> None:
        """Property: __str__ returns the enum value for all members."""
        for member in TimeUnit:
            assert str(member) == member.value

    def test_members_exist_coarsest_first(self) -> None:
        """Members are declared from year down to second."""
        assert [member.value for member in TimeUnit] == [
            "year", "month", "week", "day", "hour", "minute", "second",
        ]

    def test_members_count(self) -> None:
        """Property: TimeUnit has exactly 7 members."""
        assert len(list(TimeUnit)) == 7

    def test_equals_plain_string(self) -> None:
        """StrEnum members compare equal to their values."""
        assert TimeUnit.DAY == "day"
        assert TimeUnit("minute") is TimeUnit.MINUTE

    @given(st.sampled_from(TimeUnit))
    def test_singular_key_is_value(self, unit: TimeUnit) -> None:
        """Property: singular_key is the member value."""
        event(f"unit={unit.value}")
        assert unit.singular_key == unit.value

    @given(st.sampled_from(TimeUnit))
    def test_plural_key_appends_s(self, unit: TimeUnit) -> None:
        """Property: plural_key is the value with a trailing 's'."""
        assert unit.plural_key == unit.value + "s"
        assert unit.plural_key != unit.singular_key

    def test_keys_cover_template_keys(self) -> None:
        """Singular and plural keys together are exactly the template keys."""
        keys = {key for unit in TimeUnit for key in (unit.singular_key, unit.plural_key)}
        assert keys == set(TEMPLATE_KEYS)
        assert len(TEMPLATE_KEYS) == 14


class TestModuleExports:
    """Module-level exports."""

    def test_all_exports(self) -> None:
        """__all__ lists TimeUnit only."""
        assert enums.__all__ == ["TimeUnit"]
