"""
i18n (Internationalization) package

Language metadata, RTL detection and supported-language checks for the
French / English / Arabic content tables.
"""

from .locale import (
    DEFAULT_LANGUAGE,
    LANGUAGE_NAMES,
    RTL_LOCALES,
    SUPPORTED_LANGUAGES,
    get_language_info,
    is_rtl_locale,
    is_supported_language,
    normalize_language,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGE_NAMES",
    "RTL_LOCALES",
    "SUPPORTED_LANGUAGES",
    "get_language_info",
    "is_rtl_locale",
    "is_supported_language",
    "normalize_language",
]
