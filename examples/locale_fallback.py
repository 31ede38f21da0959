"""Locale fallback and negotiation with an isolated registry.

Shows how unknown keys fall back to English, how partial registrations
accumulate, and how Accept-Language style preferences pick a pack.

Python 3.13+.
"""

from __future__ import annotations

import logging

from howlongago import FormatOptions, LocaleRegistry, RelativeTimeFormatter

REFERENCE_MS = 1_698_400_800_000
DAY_MS = 86_400_000


def example_1_unknown_key() -> None:
    """Example 1: Unknown keys render in English."""
    print("=" * 60)
    print("Example 1: Unknown Key Fallback")
    print("=" * 60)

    formatter = RelativeTimeFormatter(LocaleRegistry())
    options = FormatOptions(locale="sw", reference=REFERENCE_MS)
    print(formatter.format(REFERENCE_MS - 3 * DAY_MS, options).text)
    # Output: 3 days ago


def example_2_accumulating_registrations() -> None:
    """Example 2: Partial registrations merge key by key."""
    print("\n" + "=" * 60)
    print("Example 2: Accumulating Registrations")
    print("=" * 60)

    registry = LocaleRegistry()
    registry.register("de", {"past_templates": {"day": "vor {c} Tag", "days": "vor {c} Tagen"}})
    registry.register("de", {"futureTemplates": {"days": "in {c} Tagen"}})

    formatter = RelativeTimeFormatter(registry)
    options = FormatOptions(locale="de", reference=REFERENCE_MS)
    print(formatter.format(REFERENCE_MS - 3 * DAY_MS, options).text)
    # Output: vor 3 Tagen
    print(formatter.format(REFERENCE_MS + 3 * DAY_MS, options).text)
    # Output: in 3 Tagen
    print(registry)
    # Output: LocaleRegistry(locales=['de', 'en', 'vi'])


def example_3_negotiation() -> None:
    """Example 3: Picking a pack from a preference list."""
    print("\n" + "=" * 60)
    print("Example 3: Negotiation")
    print("=" * 60)

    registry = LocaleRegistry()
    formatter = RelativeTimeFormatter(registry)
    for preferred in (["vi-VN", "en"], ["de-DE", "fr"], ["EN-gb"]):
        key = registry.negotiate(preferred)
        text = formatter.format(
            REFERENCE_MS - DAY_MS, FormatOptions(locale=key, reference=REFERENCE_MS)
        ).text
        print(f"{preferred!r:20} -> {key}: {text}")
    # Output:
    # ['vi-VN', 'en']      -> vi: 1 ngày trước
    # ['de-DE', 'fr']      -> en: 1 day ago
    # ['EN-gb']            -> en: 1 day ago


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
    example_1_unknown_key()
    example_2_accumulating_registrations()
    example_3_negotiation()
