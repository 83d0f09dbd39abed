"""
Tests for the multi-script TransliteratorSuite.
"""

import pytest

from glyph.app.exceptions import UnsupportedScriptError
from glyph.app.scripts import Script
from glyph.app.suite import TransliteratorSuite
from glyph.app.transliterator import Transliterator
from glyph.app.utils.config import Config


@pytest.fixture
def suite():
    return TransliteratorSuite(Config())


class TestDetection:

    def test_detect_scripts_in_fixed_order(self, suite):
        assert suite.detect_scripts("안녕 नमस्ते") == ["devanagari", "hangul"]

    def test_detect_nothing(self, suite):
        assert suite.detect_scripts("Hello") == []

    def test_supported_scripts(self, suite):
        assert suite.supported_scripts() == ["devanagari", "hangul"]
        assert suite.is_script_supported("hangul")
        assert not suite.is_script_supported("thai")


class TestAutoTransliterate:

    def test_mixed_scripts(self, suite):
        assert suite.auto_transliterate("नमस्ते and 안녕하세요") == "namaste and annyeonghaseyo"

    def test_foreign_text_unchanged(self, suite):
        assert suite.auto_transliterate("Hello  World") == "Hello  World"

    def test_transliterate_many(self, suite):
        assert suite.transliterate_many(["한국", "पानी"]) == ["hanguk", "paani"]


class TestSchemes:

    def test_transliterate_script_with_scheme(self, suite):
        assert suite.transliterate_script("शिव", "devanagari", scheme="harvard") == "ziva"
        assert suite.transliterators[Script.DEVANAGARI].scheme == "iast"

    def test_transliterate_unknown_script(self, suite):
        with pytest.raises(UnsupportedScriptError):
            suite.transliterate_script("x", "thai")

    def test_set_scheme(self, suite):
        assert suite.set_scheme("hangul", "yale") is True
        assert suite.transliterators[Script.HANGUL].scheme == "yale"

    def test_set_scheme_rejected(self, suite):
        assert suite.set_scheme("hangul", "iast") is False
        assert suite.set_scheme("thai", "rtgs") is False

    def test_available_schemes(self, suite):
        assert suite.available_schemes("devanagari") == ["iast", "harvard", "simplified"]
        assert suite.available_schemes("thai") == []

    def test_scheme_info(self, suite):
        assert suite.scheme_info("hangul").title == "Revised Romanization"
        suite.set_scheme("devanagari", "harvard")
        assert suite.scheme_info(Script.DEVANAGARI).name == "harvard"
        assert suite.scheme_info("thai") is None

    def test_schemes_from_config(self):
        suite = TransliteratorSuite(Config(hangul={"scheme": "mr"}))
        assert suite.transliterators[Script.HANGUL].scheme == "mr"


class TestIntrospection:

    def test_statistics(self, suite):
        stats = suite.statistics()
        assert stats["total_transliterators"] == 2
        assert stats["total_word_mappings"] > 100
        assert stats["scheme_support"]["hangul"]["current_scheme"] == "rr"
        assert stats["scheme_support"]["devanagari"]["schemes"] == ["iast", "harvard", "simplified"]

    def test_analyze_single_script(self, suite):
        analysis = suite.analyze_text("ok 한국")
        assert analysis["detected_scripts"] == ["hangul"]
        assert analysis["complexity"] == "single-script"
        assert analysis["script_ranges"]["hangul"][0].text == "한국"

    def test_analyze_mixed(self, suite):
        assert suite.analyze_text("한 न")["complexity"] == "mixed-script"

    def test_analyze_plain(self, suite):
        assert suite.analyze_text("plain")["complexity"] == "simple"

    def test_analyze_large(self, suite):
        assert suite.analyze_text("가" * 1001)["complexity"] == "large-text"

    def test_custom_transliterators(self):
        suite = TransliteratorSuite(transliterators={
            Script.HANGUL: Transliterator("hangul", dictionary={}),
        })
        assert suite.supported_scripts() == ["hangul"]
        assert suite.auto_transliterate("한국 नमस्ते") == "han-guk नमस्ते"
