"""
Tests for locale helpers and the language metadata endpoint
"""

import pytest

from app.i18n.locale import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    get_language_info,
    is_rtl_locale,
    is_supported_language,
    normalize_language,
)


class TestLocaleHelpers:
    def test_supported_languages(self):
        assert SUPPORTED_LANGUAGES == ("fr", "en", "ar")
        assert DEFAULT_LANGUAGE == "fr"

    def test_is_rtl_arabic(self):
        assert is_rtl_locale("ar") is True
        assert is_rtl_locale("ar-TN") is True

    def test_is_rtl_latin_scripts(self):
        assert is_rtl_locale("fr") is False
        assert is_rtl_locale("en") is False

    @pytest.mark.parametrize(
        "raw, expected",
        [("FR", "fr"), ("fr-TN", "fr"), (" en ", "en"), ("ar", "ar")],
    )
    def test_normalize_language(self, raw, expected):
        assert normalize_language(raw) == expected

    def test_is_supported_language(self):
        assert is_supported_language("fr")
        assert not is_supported_language("de")
        assert is_supported_language("de", ["de"])

    def test_language_info(self):
        info = get_language_info("ar")
        assert info == {"code": "ar", "name": "العربية", "is_rtl": True}
        assert get_language_info("xx")["name"] == "xx"


class TestLanguagesRoute:
    def test_lists_supported_languages(self, client):
        response = client.get("/api/i18n/languages")
        assert response.status_code == 200
        data = response.json()
        assert data["default"] == "fr"
        assert [language["code"] for language in data["languages"]] == ["fr", "en", "ar"]
        assert [language["is_rtl"] for language in data["languages"]] == [False, False, True]
