"""Difference formatter - main API for relative time phrases.

Computes the signed difference between a target and a reference instant,
picks the just-now phrase or the coarsest unit, and renders the selected
template with the unit count.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import JUST_NOW_UNIT, JUST_NOW_WINDOW_MS
from .instants import now_milliseconds, to_epoch_milliseconds
from .localization.registry import LocaleRegistry, get_default_registry
from .options import FormatOptions
from .units import resolve_unit

if TYPE_CHECKING:
    from .enums import TimeUnit
    from .instants import Instant
    from .localization.pack import LanguagePack

__all__ = [
    "RelativeTimeFormatter",
    "TimeDifference",
    "format_time_difference",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimeDifference:
    """Result of formatting one difference.

    Attributes:
        text: Rendered phrase (e.g., "5 minutes ago", "In 1 year", "Just now")
        unit: TimeUnit used for the phrase, or "Just now" inside the
            just-now window
        raw_difference_milliseconds: reference - target; negative when the
            target lies in the future
        difference_milliseconds: Absolute value of the raw difference
        is_future: True when the target lies after the reference
    """

    text: str
    unit: TimeUnit | str
    raw_difference_milliseconds: int
    difference_milliseconds: int
    is_future: bool

    def __str__(self) -> str:
        return self.text


class RelativeTimeFormatter:
    """Formats relative time phrases against a locale registry.

    The formatter holds a reference to its registry; packs registered after
    construction are visible to later calls.

    Examples:
        >>> formatter = RelativeTimeFormatter()
        >>> result = formatter.format(
        ...     "2023-10-27T09:55:59Z",
        ...     FormatOptions(reference="2023-10-27T10:00:00Z"),
        ... )
        >>> result.text, result.unit
        ('4 minutes ago', <TimeUnit.MINUTE: 'minute'>)
        >>>
        >>> # Isolated registry with a custom locale
        >>> registry = LocaleRegistry()
        >>> registry.register("fr", {"past_templates": {"days": "il y a {c} jours"}})
        >>> RelativeTimeFormatter(registry).format(
        ...     "2023-10-25T10:00:00Z",
        ...     FormatOptions(locale="fr", reference="2023-10-27T10:00:00Z"),
        ... ).text
        'il y a 2 jours'
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: LocaleRegistry | None = None) -> None:
        """Initialize formatter.

        Args:
            registry: Registry used for named locales and as the English base
                for inline packs (default: the process-wide registry)
        """
        self._registry = registry if registry is not None else get_default_registry()

    @property
    def registry(self) -> LocaleRegistry:
        """Registry consulted by this formatter (read-only)."""
        return self._registry

    def format(self, target: Instant, options: FormatOptions | None = None) -> TimeDifference:
        """Describe how long ago (or until when) target is.

        Args:
            target: Instant to describe (datetime, date, epoch milliseconds,
                or ISO 8601 / RFC 2822 string)
            options: Locale and reference instant (default: English, now)

        Returns:
            TimeDifference with the rendered text and the raw numbers

        Raises:
            InvalidInstantError: If target or the reference instant cannot be
                converted to a valid point in time
        """
        if options is None:
            options = FormatOptions()

        target_ms = to_epoch_milliseconds(target, argument="target")
        if options.reference is None:
            reference_ms = now_milliseconds()
        else:
            reference_ms = to_epoch_milliseconds(options.reference, argument="reference")

        pack = options.selection.resolve(self._registry)

        difference = reference_ms - target_ms
        is_future = difference < 0
        absolute = abs(difference)

        if absolute <= JUST_NOW_WINDOW_MS:
            return self._just_now(pack, difference, is_future)

        resolved = resolve_unit(absolute)
        if resolved is None:
            # Unreachable while the window covers the smallest threshold
            logger.debug("No unit matched %d ms; using just-now phrase", absolute)
            return self._just_now(pack, difference, is_future)

        unit, count = resolved
        text = pack.templates_for(is_future=is_future).for_unit(unit).render(count)
        logger.debug("Formatted difference %d ms as %s x %d: %s", difference, unit, count, text)

        return TimeDifference(
            text=text,
            unit=unit,
            raw_difference_milliseconds=difference,
            difference_milliseconds=absolute,
            is_future=is_future,
        )

    @staticmethod
    def _just_now(pack: LanguagePack, difference: int, is_future: bool) -> TimeDifference:
        return TimeDifference(
            text=pack.just_now,
            unit=JUST_NOW_UNIT,
            raw_difference_milliseconds=difference,
            difference_milliseconds=abs(difference),
            is_future=is_future,
        )


def format_time_difference(
    target: Instant,
    options: FormatOptions | None = None,
    *,
    registry: LocaleRegistry | None = None,
) -> TimeDifference:
    """Describe how long ago (or until when) target is.

    Convenience wrapper around RelativeTimeFormatter.

    Args:
        target: Instant to describe
        options: Locale and reference instant (default: English, now)
        registry: Registry to resolve named locales in (default: the
            process-wide registry)

    Returns:
        TimeDifference

    Raises:
        InvalidInstantError: If an instant cannot be converted

    Examples:
        >>> from datetime import datetime, timedelta, timezone
        >>> yesterday = datetime.now(timezone.utc) - timedelta(days=1)
        >>> format_time_difference(yesterday).text
        '1 day ago'
        >>> tomorrow = datetime.now(timezone.utc) + timedelta(days=1, seconds=1)
        >>> format_time_difference(tomorrow, FormatOptions(locale="vi")).text
        'Sau 1 ngày'
    """
    return RelativeTimeFormatter(registry).format(target, options)
