"""Language packs and the locale registry.

Public API:
    LanguagePack - Phrases for one language (just now, past, future)
    UnitTemplateSet - Singular/plural templates for every TimeUnit
    PluralTemplates - Singular/plural template pair for one unit
    LocaleRegistry - Key to LanguagePack mapping with merge-on-register
    register_locale - Extend the default (or a given) registry
    get_language_pack - Look up a pack with English fallback
    get_default_registry - Process-wide registry

Python 3.13+.
"""

from .defaults import DEFAULT_PACKS
from .pack import LanguagePack, PluralTemplates, UnitTemplateSet
from .registry import LocaleRegistry, get_default_registry, get_language_pack, register_locale
from .types import LocaleKey, PartialLanguagePack, TemplateMapping

__all__ = [
    "DEFAULT_PACKS",
    "LanguagePack",
    "LocaleKey",
    "LocaleRegistry",
    "PartialLanguagePack",
    "PluralTemplates",
    "TemplateMapping",
    "UnitTemplateSet",
    "get_default_registry",
    "get_language_pack",
    "register_locale",
]
