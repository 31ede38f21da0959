"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating register_locale() call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pack import LanguagePack

__all__ = [
    "LocaleKey",
    "PartialLanguagePack",
    "TemplateMapping",
]

type LocaleKey = str
"""Registry key for a language pack (e.g., 'en', 'vi', 'pt-BR')."""

type TemplateMapping = Mapping[str, str]
"""Flat unit template mapping (e.g., {'minute': '{c} minute ago', 'minutes': ...})."""

type PartialLanguagePack = LanguagePack | Mapping[str, object]
"""Complete LanguagePack, or a mapping naming only the fields to override."""
