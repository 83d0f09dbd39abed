"""
Hangul transliteration.

Each precomposed syllable block is decomposed arithmetically into its
initial consonant, vowel and optional final consonant, then romanized
under one of three schemes: Revised Romanization (rr), McCune-Reischauer
(mr) and Yale.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..utils.logger import get_logger
from .base import Role, SchemeInfo, Script, ScriptEngine, ScriptTable, Unit

logger = get_logger("scripts.hangul")

# Unicode Hangul syllable constants
HANGUL_BASE = 0xAC00
INITIAL_COUNT = 19
VOWEL_COUNT = 21
FINAL_COUNT = 28
SYLLABLE_COUNT = INITIAL_COUNT * VOWEL_COUNT * FINAL_COUNT

INITIALS = (
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ',
)
VOWELS = (
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ', 'ㅙ',
    'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ', 'ㅣ',
)
FINALS = (
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ',
    'ㄻ', 'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ',
)

_INITIAL_INDEX = {jamo: i for i, jamo in enumerate(INITIALS)}
_VOWEL_INDEX = {jamo: i for i, jamo in enumerate(VOWELS)}
_FINAL_INDEX = {jamo: i for i, jamo in enumerate(FINALS)}

NULL_INITIAL = 'ㅇ'


# Revised Romanization - official South Korean standard (2000)
_RR = {
    "initial": {
        'ㄱ': 'g', 'ㄲ': 'kk', 'ㄴ': 'n', 'ㄷ': 'd', 'ㄸ': 'tt',
        'ㄹ': 'r', 'ㅁ': 'm', 'ㅂ': 'b', 'ㅃ': 'pp', 'ㅅ': 's',
        'ㅆ': 'ss', 'ㅇ': '', 'ㅈ': 'j', 'ㅉ': 'jj', 'ㅊ': 'ch',
        'ㅋ': 'k', 'ㅌ': 't', 'ㅍ': 'p', 'ㅎ': 'h',
    },
    "vowel": {
        'ㅏ': 'a', 'ㅐ': 'ae', 'ㅑ': 'ya', 'ㅒ': 'yae', 'ㅓ': 'eo',
        'ㅔ': 'e', 'ㅕ': 'yeo', 'ㅖ': 'ye', 'ㅗ': 'o', 'ㅘ': 'wa',
        'ㅙ': 'wae', 'ㅚ': 'oe', 'ㅛ': 'yo', 'ㅜ': 'u', 'ㅝ': 'wo',
        'ㅞ': 'we', 'ㅟ': 'wi', 'ㅠ': 'yu', 'ㅡ': 'eu', 'ㅢ': 'ui',
        'ㅣ': 'i',
    },
    "final": {
        '': '', 'ㄱ': 'k', 'ㄲ': 'k', 'ㄳ': 'k', 'ㄴ': 'n',
        'ㄵ': 'n', 'ㄶ': 'n', 'ㄷ': 't', 'ㄹ': 'l', 'ㄺ': 'k',
        'ㄻ': 'm', 'ㄼ': 'l', 'ㄽ': 'l', 'ㄾ': 'l', 'ㄿ': 'p',
        'ㅀ': 'l', 'ㅁ': 'm', 'ㅂ': 'p', 'ㅄ': 'p', 'ㅅ': 't',
        'ㅆ': 't', 'ㅇ': 'ng', 'ㅈ': 't', 'ㅊ': 't', 'ㅋ': 'k',
        'ㅌ': 't', 'ㅍ': 'p', 'ㅎ': 't',
    },
}

# McCune-Reischauer
_MR = {
    "initial": {
        'ㄱ': 'k', 'ㄲ': 'kk', 'ㄴ': 'n', 'ㄷ': 't', 'ㄸ': 'tt',
        'ㄹ': 'r', 'ㅁ': 'm', 'ㅂ': 'p', 'ㅃ': 'pp', 'ㅅ': 's',
        'ㅆ': 'ss', 'ㅇ': '', 'ㅈ': 'ch', 'ㅉ': 'tch', 'ㅊ': "ch'",
        'ㅋ': "k'", 'ㅌ': "t'", 'ㅍ': "p'", 'ㅎ': 'h',
    },
    "vowel": {
        'ㅏ': 'a', 'ㅐ': 'ae', 'ㅑ': 'ya', 'ㅒ': 'yae', 'ㅓ': 'ŏ',
        'ㅔ': 'e', 'ㅕ': 'yŏ', 'ㅖ': 'ye', 'ㅗ': 'o', 'ㅘ': 'wa',
        'ㅙ': 'wae', 'ㅚ': 'oe', 'ㅛ': 'yo', 'ㅜ': 'u', 'ㅝ': 'wŏ',
        'ㅞ': 'we', 'ㅟ': 'wi', 'ㅠ': 'yu', 'ㅡ': 'ŭ', 'ㅢ': 'ŭi',
        'ㅣ': 'i',
    },
    "final": dict(_RR["final"]),
}

# Yale romanization
_YALE = {
    "initial": {
        'ㄱ': 'k', 'ㄲ': 'kk', 'ㄴ': 'n', 'ㄷ': 't', 'ㄸ': 'tt',
        'ㄹ': 'l', 'ㅁ': 'm', 'ㅂ': 'p', 'ㅃ': 'pp', 'ㅅ': 's',
        'ㅆ': 'ss', 'ㅇ': '', 'ㅈ': 'c', 'ㅉ': 'cc', 'ㅊ': 'ch',
        'ㅋ': 'kh', 'ㅌ': 'th', 'ㅍ': 'ph', 'ㅎ': 'h',
    },
    "vowel": {
        'ㅏ': 'a', 'ㅐ': 'ay', 'ㅑ': 'ya', 'ㅒ': 'yay', 'ㅓ': 'e',
        'ㅔ': 'ey', 'ㅕ': 'ye', 'ㅖ': 'yey', 'ㅗ': 'o', 'ㅘ': 'wa',
        'ㅙ': 'way', 'ㅚ': 'oy', 'ㅛ': 'yo', 'ㅜ': 'wu', 'ㅝ': 'we',
        'ㅞ': 'wey', 'ㅟ': 'wuy', 'ㅠ': 'yu', 'ㅡ': 'u', 'ㅢ': 'uy',
        'ㅣ': 'i',
    },
    "final": {
        '': '', 'ㄱ': 'k', 'ㄲ': 'k', 'ㄳ': 'ks', 'ㄴ': 'n',
        'ㄵ': 'nc', 'ㄶ': 'nh', 'ㄷ': 't', 'ㄹ': 'l', 'ㄺ': 'lk',
        'ㄻ': 'lm', 'ㄼ': 'lp', 'ㄽ': 'ls', 'ㄾ': 'lth', 'ㄿ': 'lph',
        'ㅀ': 'lh', 'ㅁ': 'm', 'ㅂ': 'p', 'ㅄ': 'ps', 'ㅅ': 's',
        'ㅆ': 'ss', 'ㅇ': 'ng', 'ㅈ': 'c', 'ㅊ': 'ch', 'ㅋ': 'kh',
        'ㅌ': 'th', 'ㅍ': 'ph', 'ㅎ': 'h',
    },
}

SCHEME_TABLES: Dict[str, Dict[str, Dict[str, str]]] = {
    "rr": _RR,
    "mr": _MR,
    "yale": _YALE,
}

SCHEME_INFO: Dict[str, SchemeInfo] = {
    "rr": SchemeInfo(
        name="rr",
        title="Revised Romanization",
        description="Official South Korean romanization standard (2000)",
        diacritics=False,
        official=True,
    ),
    "mr": SchemeInfo(
        name="mr",
        title="McCune-Reischauer",
        description="Traditional academic romanization system",
        diacritics=True,
    ),
    "yale": SchemeInfo(
        name="yale",
        title="Yale Romanization",
        description="Linguistic romanization system",
        diacritics=False,
    ),
}

# Vowels that palatalize a preceding ㄷ or ㅌ
PALATALIZING_VOWELS = frozenset(['ㅣ', 'ㅑ', 'ㅕ', 'ㅛ', 'ㅠ'])
PALATALIZATION = {
    'ㄷ': ('d', 'j'),
    'ㅌ': ('t', 'ch'),
}
VOICED_FINALS = {'k': 'g', 'p': 'b', 't': 'd'}

# Letters that can begin a romanized syllable with a null initial
_VOWEL_LETTERS = frozenset("aeiouwyŏŭ")

HANJA_NUMBERS = {
    '零': '영', '〇': '영', '一': '일', '二': '이', '三': '삼', '四': '사',
    '五': '오', '六': '육', '七': '칠', '八': '팔', '九': '구', '十': '십',
    '百': '백', '千': '천', '萬': '만',
}


@dataclass(frozen=True)
class Syllable:
    """Jamo components of one syllable block. `final` is '' when absent."""

    initial: str
    vowel: str
    final: str = ''

    @property
    def indices(self):
        return (
            _INITIAL_INDEX[self.initial],
            _VOWEL_INDEX[self.vowel],
            _FINAL_INDEX[self.final],
        )


def is_syllable_block(char: str) -> bool:
    return 0 <= ord(char) - HANGUL_BASE < SYLLABLE_COUNT


def decompose(char: str) -> Optional[Syllable]:
    """
    Split a precomposed syllable block into its jamo.

    Args:
        char: A single character

    Returns:
        The Syllable, or None if `char` is not a syllable block
    """
    offset = ord(char) - HANGUL_BASE
    if not 0 <= offset < SYLLABLE_COUNT:
        return None

    initial_index = offset // (VOWEL_COUNT * FINAL_COUNT)
    vowel_index = (offset // FINAL_COUNT) % VOWEL_COUNT
    final_index = offset % FINAL_COUNT

    return Syllable(INITIALS[initial_index], VOWELS[vowel_index], FINALS[final_index])


def compose(initial: str, vowel: str, final: str = '') -> str:
    """
    Build the syllable block for the given jamo.

    Raises:
        ValueError: if any component is not a valid jamo for its position
    """
    li = _INITIAL_INDEX.get(initial)
    vi = _VOWEL_INDEX.get(vowel)
    fi = _FINAL_INDEX.get(final)
    if li is None or vi is None or fi is None:
        raise ValueError(
            "Invalid jamo for compose: initial=%r vowel=%r final=%r" % (initial, vowel, final)
        )
    return chr(HANGUL_BASE + (li * VOWEL_COUNT + vi) * FINAL_COUNT + fi)


def convert_hanja_numbers(text: str) -> str:
    """Replace Hanja numerals with their Sino-Korean Hangul readings."""
    return "".join(HANJA_NUMBERS.get(char, char) for char in text)


class HangulTransliterator(ScriptEngine):
    """Romanizes Hangul under one scheme."""

    script = Script.HANGUL

    def __init__(self, scheme: Optional[str] = None):
        super().__init__(scheme)
        tables = SCHEME_TABLES[self.scheme]
        self.initials = ScriptTable(self.script, self.scheme, tables["initial"])
        self.vowels = ScriptTable(self.script, self.scheme, tables["vowel"])
        self.finals = ScriptTable(self.script, self.scheme, tables["final"])

    def info(self) -> SchemeInfo:
        return SCHEME_INFO[self.scheme]

    def romanize_syllable(self, syllable: Syllable, next_syllable: Optional[Syllable] = None) -> str:
        lead = self.initials.resolve(syllable.initial)
        vowel = self.vowels.resolve(syllable.vowel)
        final = self.finals.resolve(syllable.final)

        if self.scheme == "rr":
            lead, final = self.apply_sound_changes(lead, final, syllable, next_syllable)

        return lead + vowel + final

    def apply_sound_changes(self, lead: str, final: str, syllable: Syllable,
                            next_syllable: Optional[Syllable]):
        """
        Palatalization and intervocalic voicing for Revised Romanization.

        Returns:
            Tuple of (lead, final) romanizations
        """
        rewrite = PALATALIZATION.get(syllable.initial)
        if rewrite and syllable.vowel in PALATALIZING_VOWELS and lead == rewrite[0]:
            lead = rewrite[1]

        if next_syllable is not None and next_syllable.initial == NULL_INITIAL:
            final = VOICED_FINALS.get(final, final)

        return lead, final

    def _jamo_unit(self, char: str) -> Optional[Unit]:
        """Romanize a standalone compatibility jamo."""
        for table, role in ((self.initials, Role.CONSONANT),
                            (self.vowels, Role.VOWEL),
                            (self.finals, Role.CONSONANT)):
            value = table.get(char)
            if value:
                return Unit(char, value, role)
        return None

    def apply_rules(self, text: str) -> List[Unit]:
        units = []
        syllables = [decompose(char) for char in text]

        for i, char in enumerate(text):
            syllable = syllables[i]
            if syllable is not None:
                next_syllable = syllables[i + 1] if i + 1 < len(text) else None
                units.append(Unit(char, self.romanize_syllable(syllable, next_syllable), Role.SYLLABLE))
                continue

            unit = self._jamo_unit(char)
            if unit is None:
                unit = Unit(char, char, Role.PASSTHROUGH)
            units.append(unit)

        return units

    def render(self, text: str) -> str:
        """
        Join romanized units, hyphenating syllable boundaries that would
        otherwise read as a different split (han-guk, jung-ang).
        """
        parts = []
        previous = None

        for unit in self.apply_rules(text):
            if (
                previous is not None
                and previous.role is Role.SYLLABLE
                and unit.role is Role.SYLLABLE
                and _is_ambiguous(previous.phonetic, unit.phonetic)
            ):
                parts.append("-")
            parts.append(unit.phonetic)
            previous = unit

        rendered = "".join(parts)
        logger.debug(f"Rendered {text!r} as {rendered!r} ({self.scheme})")
        return rendered

    def post_process(self, text: str) -> str:
        return super().post_process(text).strip("-").strip()


def _is_ambiguous(left: str, right: str) -> bool:
    if not left or not right:
        return False
    if left.endswith("n") and right.startswith("g"):
        return True
    return left.endswith("ng") and right[0] in _VOWEL_LETTERS
