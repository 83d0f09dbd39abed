"""
Tests for Hangul decomposition and romanization rules.
"""

import pytest

from glyph.app.scripts.base import Role
from glyph.app.scripts.hangul import (
    FINAL_COUNT,
    HANGUL_BASE,
    SYLLABLE_COUNT,
    VOWEL_COUNT,
    HangulTransliterator,
    Syllable,
    compose,
    convert_hanja_numbers,
    decompose,
    is_syllable_block,
)


class TestDecomposition:
    """Arithmetic decomposition of syllable blocks"""

    def test_decompose_with_final(self):
        assert decompose('한') == Syllable('ㅎ', 'ㅏ', 'ㄴ')

    def test_decompose_without_final(self):
        assert decompose('가') == Syllable('ㄱ', 'ㅏ', '')

    def test_first_and_last_blocks(self):
        assert decompose(chr(HANGUL_BASE)) == Syllable('ㄱ', 'ㅏ', '')
        assert decompose('힣') == Syllable('ㅎ', 'ㅣ', 'ㅎ')

    def test_out_of_range_is_not_decomposable(self):
        assert decompose(chr(HANGUL_BASE - 1)) is None
        assert decompose(chr(HANGUL_BASE + SYLLABLE_COUNT)) is None
        assert decompose('A') is None
        assert decompose('ㄱ') is None

    def test_every_block_round_trips(self):
        """Recombining the indices recovers every block's offset"""
        for offset in range(SYLLABLE_COUNT):
            char = chr(HANGUL_BASE + offset)
            syllable = decompose(char)
            assert syllable is not None
            initial, vowel, final = syllable.indices
            assert (initial * VOWEL_COUNT + vowel) * FINAL_COUNT + final == offset
            assert compose(syllable.initial, syllable.vowel, syllable.final) == char

    def test_compose_rejects_invalid_jamo(self):
        with pytest.raises(ValueError):
            compose('ㅏ', 'ㅏ')
        with pytest.raises(ValueError):
            compose('ㄱ', 'ㅏ', 'ㄸ')

    def test_is_syllable_block(self):
        assert is_syllable_block('국')
        assert not is_syllable_block('ㄱ')
        assert not is_syllable_block(chr(0xD7A4))


class TestRevisedRomanization:
    """Default scheme, rules only"""

    @pytest.fixture
    def engine(self):
        return HangulTransliterator()

    def test_default_scheme_is_rr(self, engine):
        assert engine.scheme == "rr"

    def test_greeting_without_dictionary(self, hangul_rules):
        assert hangul_rules.transliterate("안녕하세요") == "annyeonghaseyo"

    def test_palatalization_of_d(self, engine):
        assert engine.render("디") == "ji"
        assert engine.render("뎌") == "jyeo"
        assert engine.render("다") == "da"

    def test_palatalization_of_t(self, engine):
        assert engine.render("티") == "chi"
        assert engine.render("튜") == "chyu"
        assert engine.render("토") == "to"

    def test_voicing_before_null_initial(self, engine):
        assert engine.render("국어") == "gugeo"
        assert engine.render("밥이") == "babi"
        assert engine.render("옷을") == "odeul"

    def test_no_voicing_before_other_initials(self, engine):
        assert engine.render("국수") == "guksu"

    def test_voicing_looks_only_at_the_next_block(self, engine):
        assert engine.render("국 어") == "guk eo"

    def test_hyphen_between_n_and_g(self, hangul_rules):
        assert hangul_rules.transliterate("한국") == "han-guk"

    def test_hyphen_between_ng_and_vowel(self, hangul_rules):
        assert hangul_rules.transliterate("중앙") == "jung-ang"

    def test_syllable_units(self, engine):
        units = engine.apply_rules("한 A")
        assert [u.role for u in units] == [Role.SYLLABLE, Role.PASSTHROUGH, Role.PASSTHROUGH]
        assert units[0].phonetic == "han"
        assert units[2].phonetic == "A"


class TestOtherSchemes:
    """McCune-Reischauer and Yale skip the sound-change rules"""

    def test_mr_has_no_voicing(self):
        assert HangulTransliterator("mr").render("국어") == "kukŏ"

    def test_mr_has_no_palatalization(self):
        assert HangulTransliterator("mr").render("디") == "ti"

    def test_mr_aspirates(self):
        assert HangulTransliterator("mr").render("타") == "t'a"

    def test_yale(self):
        engine = HangulTransliterator("yale")
        assert engine.render("한국") == "hankwuk"
        assert engine.render("닭") == "talk"

    def test_schemes_disagree(self):
        outputs = {HangulTransliterator(s).render("어른") for s in ("rr", "mr", "yale")}
        assert len(outputs) == 3


class TestJamoAndPassthrough:

    @pytest.fixture
    def engine(self):
        return HangulTransliterator()

    def test_standalone_initial(self, engine):
        assert engine.render("ㄱ") == "g"

    def test_standalone_vowel(self, engine):
        assert engine.render("ㅏ") == "a"

    def test_standalone_ieung_reads_as_final(self, engine):
        assert engine.render("ㅇ") == "ng"

    def test_standalone_cluster_final(self, engine):
        assert engine.render("ㄳ") == "k"

    def test_conjoining_jamo_pass_through(self, hangul_rules):
        assert hangul_rules.transliterate("ᄀ") == "ᄀ"

    def test_unassigned_block_passes_through(self, hangul_rules):
        assert hangul_rules.transliterate("한" + chr(0xD7A4)) == "han" + chr(0xD7A4)


class TestHanjaNumbers:

    def test_convert(self):
        assert convert_hanja_numbers("三十五") == "삼십오"

    def test_other_characters_untouched(self):
        assert convert_hanja_numbers("漢 1") == "漢 1"
