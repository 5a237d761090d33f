"""
Locale helpers

Pure functions for the site's language codes:
- RTL (right-to-left) language detection
- Supported-language checks
- Language metadata lookup
"""

from __future__ import annotations

from collections.abc import Iterable

# ── Constants ─────────────────────────────────────────────────────────────────

SUPPORTED_LANGUAGES: tuple[str, ...] = ("fr", "en", "ar")
DEFAULT_LANGUAGE = "fr"

# Base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur"})

# Native names, as shown in the site's language switcher
LANGUAGE_NAMES: dict[str, str] = {
    "fr": "Français",
    "en": "English",
    "ar": "العربية",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given locale is right-to-left.

    Compares only the base language tag (before the first hyphen), so
    both "ar" and "ar-TN" are identified as RTL.
    """
    base = locale.split("-")[0].lower()
    return base in RTL_LOCALES


def normalize_language(language: str) -> str:
    """Lower-case a language code and strip any region suffix ("fr-TN" → "fr")."""
    return language.strip().split("-")[0].lower()


def is_supported_language(language: str, supported: Iterable[str] = SUPPORTED_LANGUAGES) -> bool:
    return language in tuple(supported)


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return a metadata dict describing the given locale.

    Returns:
        Dict with keys: ``code`` (str), ``name`` (str), ``is_rtl`` (bool).
    """
    return {
        "code": locale,
        "name": LANGUAGE_NAMES.get(locale, locale),
        "is_rtl": is_rtl_locale(locale),
    }
