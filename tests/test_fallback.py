"""Test suite for the offline phrase-table translator."""
import pytest

from healthcare_translator.core.translation import FallbackTranslator, fallback_translate


class TestFallbackTranslator:
    """Test cases for deterministic offline translation."""

    def test_single_word(self):
        """Test a word present in the table."""
        assert fallback_translate("hello", "en", "es") == "hola"

    def test_whole_phrase_match(self):
        """Test that a full phrase entry wins over word-by-word lookup."""
        assert fallback_translate("how are you", "en", "es") == "¿cómo estás?"

    def test_unknown_words_are_bracketed(self):
        """Test that words missing from the table are marked."""
        assert fallback_translate("good morning", "en", "es") == "[good] [morning]"

    def test_mixed_known_and_unknown_words(self):
        """Test word-by-word translation with a partial hit."""
        assert fallback_translate("fever patient now", "en", "es") == "fiebre paciente [now]"

    def test_input_is_lowercased_and_trimmed(self):
        """Test normalization before lookup."""
        assert fallback_translate("  Headache ", "en", "es") == "dolor de cabeza"
        assert fallback_translate("Bonjour", "fr", "en") == "hello"

    def test_unsupported_pair_returns_diagnostic(self):
        """Test the last-resort message for pairs without a table."""
        result = fallback_translate("anything", "en", "zz")

        assert result == "(Offline) Translation for en to zz is not available."

    @pytest.mark.parametrize("source, target", [("en", "es"), ("es", "en"), ("en", "fr"), ("fr", "en")])
    def test_builtin_pairs_are_supported(self, source, target):
        """Test that every shipped table is reachable."""
        assert FallbackTranslator().supports(source, target)

    def test_reverse_spanish_table(self):
        """Test Spanish to English entries with accented text."""
        assert fallback_translate("médico", "es", "en") == "doctor"
        assert fallback_translate("¿Cómo estás?", "es", "en") == "how are you"

    def test_whitespace_runs_are_collapsed(self):
        """Test splitting on any whitespace."""
        assert fallback_translate("pain\t fever", "en", "es") == "dolor fiebre"

    def test_custom_tables(self):
        """Test that injected tables replace the defaults."""
        translator = FallbackTranslator({("en", "de"): {"pain": "Schmerz"}})

        assert translator.translate("pain", "en", "de") == "Schmerz"
        assert translator.translate("pain", "en", "es").startswith("(Offline)")
