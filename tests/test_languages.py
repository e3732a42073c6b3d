"""Test suite for the supported language registry."""
import pytest

from healthcare_translator.core.languages import LanguageRegistry, SupportedLanguage


class TestLanguageRegistry:
    """Test cases for language registry lookups."""

    def test_default_registry_order(self):
        """Test the registry keeps its declared order."""
        codes = [lang.code for lang in LanguageRegistry().list_languages()]

        assert len(codes) == 15
        assert codes[:3] == ["en", "es", "fr"]
        assert codes[-3:] == ["yo", "ig", "ha"]

    def test_list_is_stable(self):
        """Test repeated calls return the same sequence."""
        registry = LanguageRegistry()

        assert registry.list_languages() == registry.list_languages()

    def test_is_supported(self):
        """Test membership checks."""
        registry = LanguageRegistry()

        assert registry.is_supported("en")
        assert registry.is_supported("ha")
        assert not registry.is_supported("zz")
        assert not registry.is_supported("EN")

    def test_display_name(self):
        """Test display names with fallback to the code."""
        registry = LanguageRegistry()

        assert registry.display_name("es") == "Spanish"
        assert registry.display_name("zz") == "zz"

    def test_languages_are_immutable(self):
        """Test registry entries cannot be modified."""
        language = LanguageRegistry().get("en")

        with pytest.raises(Exception):
            language.name = "Changed"

    def test_duplicate_codes_rejected(self):
        """Test construction fails when codes repeat."""
        with pytest.raises(ValueError):
            LanguageRegistry([
                SupportedLanguage(code="en", name="English"),
                SupportedLanguage(code="en", name="Also English"),
            ])
