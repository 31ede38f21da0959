"""Locale utilities for registry key handling.

Centralizes locale code normalization used by the registry and by locale
negotiation, so that "vi-VN" and "vi_VN" compare equal.

Python 3.13+.
"""

from __future__ import annotations

__all__ = [
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is preserved; registry keys are compared as given.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("vi")
        'vi'
    """
    return locale_code.replace("-", "_")
