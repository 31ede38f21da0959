"""howlongago - localized relative time phrases.

Turns a target instant and a reference instant into a phrase such as
"3 days ago" or "In 1 hour", choosing the coarsest fitting unit and
rendering it from a language pack.

Public API:
    format_time_difference - Format one difference (English, now by default)
    RelativeTimeFormatter - Formatter bound to an explicit LocaleRegistry
    FormatOptions - Locale and reference instant for a format call
    TimeDifference - Structured result (text, unit, differences, direction)
    register_locale - Add or extend a language pack
    get_language_pack - Look up a language pack with English fallback
    LocaleRegistry - Explicit, copy-on-write registry of language packs

Exceptions:
    HowLongAgoError - Base exception class
    InvalidInstantError - Target or reference is not a valid point in time
    LanguagePackError - Malformed language pack or locale option

Submodules:
    howlongago.units - Unit thresholds and resolve_unit()
    howlongago.instants - Instant conversion (to_epoch_milliseconds)
    howlongago.localization - Language packs and the registry
"""

from .enums import TimeUnit
from .errors import HowLongAgoError, InvalidInstantError, LanguagePackError
from .formatter import RelativeTimeFormatter, TimeDifference, format_time_difference
from .instants import to_epoch_milliseconds
from .localization import (
    LanguagePack,
    LocaleRegistry,
    PluralTemplates,
    UnitTemplateSet,
    get_default_registry,
    get_language_pack,
    register_locale,
)
from .options import FormatOptions, InlineLocale, NamedLocale
from .units import resolve_unit

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("howlongago")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatOptions",
    "HowLongAgoError",
    "InlineLocale",
    "InvalidInstantError",
    "LanguagePack",
    "LanguagePackError",
    "LocaleRegistry",
    "NamedLocale",
    "PluralTemplates",
    "RelativeTimeFormatter",
    "TimeDifference",
    "TimeUnit",
    "UnitTemplateSet",
    "__version__",
    "format_time_difference",
    "get_default_registry",
    "get_language_pack",
    "register_locale",
    "resolve_unit",
    "to_epoch_milliseconds",
]
