"""Shared constants for howlongago.

Placing constants here avoids circular imports between the unit resolver,
the language pack registry, and the formatter.

Constants are grouped by domain:
- Just now window: difference band rendered with the just-now phrase
- Templates: placeholder token substituted with the unit count
- Locales: default and fallback registry keys

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Just now window
    "JUST_NOW_WINDOW_MS",
    "JUST_NOW_UNIT",
    # Templates
    "COUNT_TOKEN",
    # Locales
    "DEFAULT_LOCALE",
]

# ============================================================================
# JUST NOW WINDOW
# ============================================================================

# Absolute differences up to and including this many milliseconds render the
# pack's just-now phrase. Fixed, not configurable.
JUST_NOW_WINDOW_MS: int = 5000

# Literal reported as TimeDifference.unit inside the just-now window.
# Not a TimeUnit member.
JUST_NOW_UNIT: str = "Just now"

# ============================================================================
# TEMPLATES
# ============================================================================

# Placeholder replaced (first occurrence only) with the decimal count.
COUNT_TOKEN: str = "{c}"

# ============================================================================
# LOCALES
# ============================================================================

# Universal fallback pack. Unknown keys and inline packs resolve against it.
DEFAULT_LOCALE: str = "en"
