"""Language pack registry.

LocaleRegistry maps registry keys to LanguagePacks. It starts with the
shipped packs (English and Vietnamese) and grows through register(), which
merges partial packs instead of replacing them.

Thread Safety:
    Writes are serialized by an internal lock and publish a fresh read-only
    mapping (copy-on-write). Readers take the current mapping without
    locking and always see a complete snapshot. No ordering is guaranteed
    between a register() and a concurrent get() in another thread.

A process-wide default instance is available via get_default_registry().
Every API that consults a registry also accepts an explicit one.

Python 3.13+. Uses Babel for locale negotiation.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel.core import negotiate_locale

from howlongago.constants import DEFAULT_LOCALE
from howlongago.errors import LanguagePackError
from howlongago.locale_utils import normalize_locale

from .defaults import DEFAULT_PACKS
from .pack import LanguagePack

if TYPE_CHECKING:
    from .types import LocaleKey, PartialLanguagePack

__all__ = [
    "LocaleRegistry",
    "get_default_registry",
    "get_language_pack",
    "register_locale",
]

logger = logging.getLogger(__name__)


def _validate_key(key: object) -> None:
    if not isinstance(key, str) or not key:
        msg = f"Locale key must be a non-empty string, got {key!r}"
        raise LanguagePackError(msg)


class LocaleRegistry:
    """Mutable mapping from locale key to LanguagePack.

    The English pack is always present and serves as the fallback for
    unknown keys and the base for new ones.

    Examples:
        >>> registry = LocaleRegistry()
        >>> registry.get("vi").just_now
        'vừa xong'
        >>> registry.get("xx").just_now  # Unknown key falls back to English
        'Just now'
        >>> registry.register("fr", {"just_now": "À l'instant"})
        >>> registry.get("fr").past_templates.minute.singular  # Backfilled
        '{c} minute ago'
    """

    __slots__ = ("_lock", "_packs")

    def __init__(self, packs: Mapping[str, LanguagePack] | None = None) -> None:
        """Initialize registry.

        Args:
            packs: Initial packs by key (default: the shipped English and
                Vietnamese packs). The shipped English pack is added when
                the mapping has no "en" entry.

        Raises:
            LanguagePackError: If a key is not a non-empty string or a value
                is not a LanguagePack
        """
        initial: dict[str, LanguagePack] = dict(DEFAULT_PACKS if packs is None else packs)
        for key, pack in initial.items():
            _validate_key(key)
            if not isinstance(pack, LanguagePack):
                msg = f"Registry value for '{key}' must be a LanguagePack, got {type(pack).__name__}"
                raise LanguagePackError(msg)
        initial.setdefault(DEFAULT_LOCALE, DEFAULT_PACKS[DEFAULT_LOCALE])

        self._lock = threading.Lock()
        self._packs: Mapping[str, LanguagePack] = MappingProxyType(initial)

        logger.info("LocaleRegistry initialized with locales: %s", ", ".join(sorted(initial)))

    def get(self, key: LocaleKey) -> LanguagePack:
        """Return the pack for key, or the English pack if key is unknown.

        Never raises for unknown keys.
        """
        packs = self._packs
        pack = packs.get(key)
        if pack is None:
            logger.debug("Unknown locale '%s'. Falling back to %s", key, DEFAULT_LOCALE)
            return packs[DEFAULT_LOCALE]
        return pack

    def register(self, key: LocaleKey, partial_pack: PartialLanguagePack) -> None:
        """Merge partial_pack into the pack stored at key.

        The base is the existing pack at key, or the English pack when key is
        new. Template sets are merged unit key by unit key, so earlier
        customizations survive later partial registrations.

        Args:
            key: Registry key (any non-empty string, e.g. "fr", "pt-BR")
            partial_pack: LanguagePack or mapping with any of just_now,
                past_templates, future_templates

        Raises:
            LanguagePackError: If key is empty or the pack holds malformed
                values. The registry is left unchanged.

        Example:
            >>> registry.register("en", {"past_templates": {"minutes": "{c} mins ago"}})
            >>> registry.register("en", {"past_templates": {"hours": "{c} hrs ago"}})
            >>> registry.get("en").past_templates.minute.plural
            '{c} mins ago'
        """
        _validate_key(key)

        with self._lock:
            packs = self._packs
            base = packs.get(key)
            if base is None:
                base = packs[DEFAULT_LOCALE]
            merged = base.merged(partial_pack)

            updated = dict(packs)
            updated[key] = merged
            self._packs = MappingProxyType(updated)

        logger.debug("Registered locale '%s'", key)

    def negotiate(self, preferred: Iterable[str]) -> LocaleKey:
        """Pick the registered key that best matches a preference list.

        Each preferred code is tried in order: exact match first, then its
        language subtag ("vi-VN" matches "vi"). Matching ignores case and
        hyphen/underscore differences.

        Args:
            preferred: Locale codes in order of preference, e.g. parsed from
                an Accept-Language header

        Returns:
            Registry key of the best match, or "en" when nothing matches

        Example:
            >>> registry.negotiate(["de-DE", "vi-VN", "en"])
            'vi'
        """
        codes = list(preferred)
        candidates: dict[str, list[LocaleKey]] = {}
        for key in self._packs:
            candidates.setdefault(normalize_locale(key).lower(), []).append(key)

        match = negotiate_locale(
            [normalize_locale(code) for code in codes],
            candidates.keys(),
            sep="_",
            aliases=None,
        )
        if match is None:
            return DEFAULT_LOCALE

        # Keys that differ only in separator or case: a verbatim preference
        # wins, otherwise the first registered spelling
        keys = candidates[match.lower()]
        return next((code for code in codes if code in keys), keys[0])

    def copy(self) -> LocaleRegistry:
        """Independent registry holding the same packs."""
        return LocaleRegistry(self._packs)

    def locales(self) -> tuple[LocaleKey, ...]:
        """Registered keys, sorted."""
        return tuple(sorted(self._packs))

    def __contains__(self, key: object) -> bool:
        return key in self._packs

    def __iter__(self) -> Iterator[LocaleKey]:
        return iter(self.locales())

    def __len__(self) -> int:
        return len(self._packs)

    def __repr__(self) -> str:
        return f"LocaleRegistry(locales={list(self.locales())!r})"


# Module-level default registry. Initialized lazily on first access to avoid
# import-time side effects.
_DEFAULT_REGISTRY: LocaleRegistry | None = None
_DEFAULT_REGISTRY_LOCK = threading.Lock()


def get_default_registry() -> LocaleRegistry:
    """Get the process-wide default registry.

    Used by register_locale(), get_language_pack() and format_time_difference()
    when no explicit registry is given. Mutations are visible to every caller
    that relies on the default; pass a dedicated LocaleRegistry for isolation.
    """
    global _DEFAULT_REGISTRY  # noqa: PLW0603
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_REGISTRY_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = LocaleRegistry()
    return _DEFAULT_REGISTRY


def register_locale(
    key: LocaleKey,
    partial_pack: PartialLanguagePack,
    *,
    registry: LocaleRegistry | None = None,
) -> None:
    """Add or extend a locale.

    Partial packs are merged with the existing pack for key, or with English
    for a new key, so no template is ever missing.

    Args:
        key: Registry key (e.g. "fr", "ja")
        partial_pack: LanguagePack or mapping of the fields to set
        registry: Registry to mutate (default: the process-wide registry)

    Raises:
        LanguagePackError: If key is empty or the pack holds malformed values

    Example:
        >>> register_locale("fr", {
        ...     "just_now": "À l'instant",
        ...     "past_templates": {"minute": "il y a {c} minute", "minutes": "il y a {c} minutes"},
        ... })
    """
    target = registry if registry is not None else get_default_registry()
    target.register(key, partial_pack)


def get_language_pack(key: LocaleKey, *, registry: LocaleRegistry | None = None) -> LanguagePack:
    """Return the pack for key, falling back to English for unknown keys."""
    target = registry if registry is not None else get_default_registry()
    return target.get(key)
