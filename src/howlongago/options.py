"""Formatting options and locale selection.

The locale option is a sum type resolved at the call boundary:

    NamedLocale("vi")          - look the pack up in a registry
    InlineLocale({...})        - merge a (partial) pack on top of English,
                                 for one call only

FormatOptions accepts the convenient forms as well (a key string, a
LanguagePack, or a partial-pack mapping) and coerces them on construction.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from .constants import DEFAULT_LOCALE
from .errors import LanguagePackError
from .localization.pack import LanguagePack

if TYPE_CHECKING:
    from .instants import Instant
    from .localization.registry import LocaleRegistry
    from .localization.types import LocaleKey, PartialLanguagePack

__all__ = [
    "FormatOptions",
    "InlineLocale",
    "LocaleSelection",
    "NamedLocale",
    "coerce_locale",
]


@dataclass(frozen=True, slots=True)
class NamedLocale:
    """Locale selected by registry key. Unknown keys fall back to English."""

    key: LocaleKey

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            msg = f"Locale key must be a string, got {type(self.key).__name__}"
            raise LanguagePackError(msg)

    def resolve(self, registry: LocaleRegistry) -> LanguagePack:
        return registry.get(self.key)


@dataclass(frozen=True, slots=True)
class InlineLocale:
    """Locale given directly as a full or partial language pack.

    Resolution merges the pack on top of the registry's English pack and
    never mutates the registry.
    """

    pack: PartialLanguagePack

    def __post_init__(self) -> None:
        if isinstance(self.pack, LanguagePack):
            return
        if not isinstance(self.pack, Mapping):
            msg = f"Inline locale must be a LanguagePack or mapping, got {type(self.pack).__name__}"
            raise LanguagePackError(msg)
        # Freeze a copy down to the template sets so later caller mutation
        # cannot leak in
        snapshot = {
            key: MappingProxyType(dict(value)) if isinstance(value, Mapping) else value
            for key, value in self.pack.items()
        }
        object.__setattr__(self, "pack", MappingProxyType(snapshot))

    def resolve(self, registry: LocaleRegistry) -> LanguagePack:
        return registry.get(DEFAULT_LOCALE).merged(self.pack)


type LocaleSelection = NamedLocale | InlineLocale
"""Resolved form of the locale option."""


def coerce_locale(value: object) -> LocaleSelection:
    """Convert a user-facing locale option into a LocaleSelection.

    Args:
        value: None (English), key string, NamedLocale, InlineLocale,
            LanguagePack, or partial-pack mapping

    Raises:
        LanguagePackError: If value has an unsupported type

    Examples:
        >>> coerce_locale("vi")
        NamedLocale(key='vi')
        >>> coerce_locale(None)
        NamedLocale(key='en')
    """
    match value:
        case None:
            return NamedLocale(DEFAULT_LOCALE)
        case NamedLocale() | InlineLocale():
            return value
        case str():
            return NamedLocale(value)
        case LanguagePack() | Mapping():
            return InlineLocale(value)
        case _:
            msg = (
                f"Unsupported locale option type {type(value).__name__}; "
                "expected a key string, LanguagePack or mapping"
            )
            raise LanguagePackError(msg)


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable options for a single format call.

    Attributes:
        locale: Language to render in. Accepts the same forms as
            coerce_locale() and stores the coerced LocaleSelection
            (default: English).
        reference: Instant the target is compared with (default: wall-clock
            time at call time). Converted when formatting, so invalid values
            raise InvalidInstantError from the format call.
        selection: The locale option as NamedLocale or InlineLocale.

    Example:
        >>> options = FormatOptions(locale="vi", reference="2023-10-27T10:00:00Z")
        >>> options.locale
        NamedLocale(key='vi')
    """

    locale: LocaleSelection | LocaleKey | PartialLanguagePack | None = None
    reference: Instant | None = None

    def __post_init__(self) -> None:
        """Coerce the locale option into a LocaleSelection.

        Raises:
            LanguagePackError: If locale has an unsupported type
        """
        object.__setattr__(self, "locale", coerce_locale(self.locale))

    @property
    def selection(self) -> LocaleSelection:
        """Locale option in its coerced form."""
        match self.locale:
            case NamedLocale() | InlineLocale() as selection:
                return selection
            case other:
                return coerce_locale(other)
