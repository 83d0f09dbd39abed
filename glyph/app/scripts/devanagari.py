"""
Devanagari transliteration.

Devanagari is an abugida: consonants carry an inherent "a" that is
replaced by a dependent vowel sign (matra) or cancelled by the virama.
Characters are classified by closed code point sets, and a left-to-right
scan applies the contextual rules in fixed precedence:

1. compound (conjunct) keys such as क्ष, longest first
2. virama + consonant, emitted without its inherent vowel
3. dependent vowel sign, emitted standalone
4. bare consonant, inherent vowel dropped before a virama or matra
5. anything else: table value, or the raw character
"""

from itertools import groupby
from typing import Dict, List, Optional, Tuple

from ..utils.logger import get_logger
from .base import (
    Role,
    SchemeInfo,
    Script,
    ScriptEngine,
    ScriptTable,
    Unit,
    strip_inherent,
)

logger = get_logger("scripts.devanagari")

VIRAMA = '्'
NUKTA = '़'

CONSONANT_RANGES = ((0x0915, 0x0939), (0x0958, 0x095F))
VOWEL_RANGES = ((0x0904, 0x0914), (0x0960, 0x0961))
NUMERAL_RANGE = (0x0966, 0x096F)

DEPENDENT_VOWELS = frozenset([
    'ा', 'ि', 'ी', 'ु', 'ू', 'ृ', 'ॄ', 'ॢ', 'ॣ', 'े', 'ै', 'ो', 'ौ', 'ॉ',
    'ॅ', 'ॆ', 'ॊ',
])
PUNCTUATION = frozenset(['।', '॥', '॰'])
MARKS = frozenset([
    'ँ',  # candrabindu
    'ं',  # anusvara
    'ः',  # visarga
    NUKTA,
    'ऽ',  # avagraha
    'ॐ',  # om
])

# Base consonant + nukta -> precomposed nukta consonant
NUKTA_FORMS = {
    'क': 'क़', 'ख': 'ख़', 'ग': 'ग़', 'ज': 'ज़',
    'ड': 'ड़', 'ढ': 'ढ़', 'फ': 'फ़', 'य': 'य़',
    'न': '\u0929', 'र': '\u0931', 'ळ': '\u0934',
}


def _in_ranges(code: int, ranges) -> bool:
    return any(low <= code <= high for low, high in ranges)


def classify(char: str) -> Role:
    """Role of a single Devanagari character."""
    if char == VIRAMA:
        return Role.SUPPRESSOR
    if char in DEPENDENT_VOWELS:
        return Role.DEPENDENT_VOWEL
    if char in MARKS:
        return Role.MARK
    if char in PUNCTUATION:
        return Role.PUNCTUATION

    code = ord(char)
    if _in_ranges(code, CONSONANT_RANGES):
        return Role.CONSONANT
    if _in_ranges(code, VOWEL_RANGES):
        return Role.VOWEL
    if NUMERAL_RANGE[0] <= code <= NUMERAL_RANGE[1]:
        return Role.NUMERAL
    return Role.PASSTHROUGH


_NUMERALS = {
    '०': '0', '१': '1', '२': '2', '३': '3', '४': '4',
    '५': '5', '६': '6', '७': '7', '८': '8', '९': '9',
}

# IAST (International Alphabet of Sanskrit Transliteration)
_IAST = {
    # Vowels
    'अ': 'a', 'आ': 'ā', 'इ': 'i', 'ई': 'ī', 'उ': 'u', 'ऊ': 'ū',
    'ऋ': 'ṛ', 'ॠ': 'ṝ', 'ऌ': 'ḷ', 'ॡ': 'ḹ', 'ए': 'e', 'ऐ': 'ai',
    'ओ': 'o', 'औ': 'au', 'ऑ': 'ô',
    'ऍ': 'ê', 'ऎ': 'ĕ', 'ऒ': 'ŏ',

    # Stops
    'क': 'ka', 'ख': 'kha', 'ग': 'ga', 'घ': 'gha', 'ङ': 'ṅa',
    'च': 'ca', 'छ': 'cha', 'ज': 'ja', 'झ': 'jha', 'ञ': 'ña',
    'ट': 'ṭa', 'ठ': 'ṭha', 'ड': 'ḍa', 'ढ': 'ḍha', 'ण': 'ṇa',
    'त': 'ta', 'थ': 'tha', 'द': 'da', 'ध': 'dha', 'न': 'na',
    'प': 'pa', 'फ': 'pha', 'ब': 'ba', 'भ': 'bha', 'म': 'ma',

    # Semivowels and sibilants
    'य': 'ya', 'र': 'ra', 'ल': 'la', 'व': 'va',
    'श': 'śa', 'ष': 'ṣa', 'स': 'sa', 'ह': 'ha',

    # Nukta consonants
    'क़': 'qa', 'ख़': 'ḵha', 'ग़': 'ġa', 'ज़': 'za',
    'ड़': 'ṛa', 'ढ़': 'ṛha', 'फ़': 'fa', 'य़': 'ẏa',

    # Conjuncts
    'क्ष': 'kṣa', 'त्र': 'tra', 'ज्ञ': 'jña',

    # Matras
    'ा': 'ā', 'ि': 'i', 'ी': 'ī', 'ु': 'u', 'ू': 'ū',
    'ृ': 'ṛ', 'ॄ': 'ṝ', 'ॢ': 'ḷ', 'ॣ': 'ḹ',
    'े': 'e', 'ै': 'ai', 'ो': 'o', 'ौ': 'au', 'ॉ': 'ô',
    'ॅ': 'ê', 'ॆ': 'ĕ', 'ॊ': 'ŏ',

    # Marks
    VIRAMA: '', 'ं': 'ṃ', 'ः': 'ḥ', 'ँ': '̃', NUKTA: '',
}

# Harvard-Kyoto
_HARVARD = {
    'अ': 'a', 'आ': 'A', 'इ': 'i', 'ई': 'I', 'उ': 'u', 'ऊ': 'U',
    'ऋ': 'R', 'ॠ': 'RR', 'ऌ': 'lR', 'ॡ': 'lRR', 'ए': 'e', 'ऐ': 'ai',
    'ओ': 'o', 'औ': 'au', 'ऑ': 'o',
    'ऍ': 'e', 'ऎ': 'e', 'ऒ': 'o',

    'क': 'ka', 'ख': 'kha', 'ग': 'ga', 'घ': 'gha', 'ङ': 'Ga',
    'च': 'ca', 'छ': 'cha', 'ज': 'ja', 'झ': 'jha', 'ञ': 'Ja',
    'ट': 'Ta', 'ठ': 'Tha', 'ड': 'Da', 'ढ': 'Dha', 'ण': 'Na',
    'त': 'ta', 'थ': 'tha', 'द': 'da', 'ध': 'dha', 'न': 'na',
    'प': 'pa', 'फ': 'pha', 'ब': 'ba', 'भ': 'bha', 'म': 'ma',
    'य': 'ya', 'र': 'ra', 'ल': 'la', 'व': 'va',
    'श': 'za', 'ष': 'Sa', 'स': 'sa', 'ह': 'ha',

    'क़': 'qa', 'ख़': 'Kha', 'ग़': 'Ga', 'ज़': 'za',
    'ड़': 'Ra', 'ढ़': 'Rha', 'फ़': 'fa', 'य़': 'Ya',

    'ा': 'A', 'ि': 'i', 'ी': 'I', 'ु': 'u', 'ू': 'U',
    'ृ': 'R', 'ॄ': 'RR', 'ॢ': 'lR', 'ॣ': 'lRR',
    'े': 'e', 'ै': 'ai', 'ो': 'o', 'ौ': 'au', 'ॉ': 'o',
    'ॅ': 'e', 'ॆ': 'e', 'ॊ': 'o',

    VIRAMA: '', 'ं': 'M', 'ः': 'H', 'ँ': '~', NUKTA: '',
}

# Easy-to-read phonetic spelling
_SIMPLIFIED = {
    'अ': 'a', 'आ': 'aa', 'इ': 'i', 'ई': 'ee', 'उ': 'u', 'ऊ': 'oo',
    'ऋ': 'ri', 'ॠ': 'ree', 'ऌ': 'li', 'ॡ': 'lee', 'ए': 'e', 'ऐ': 'ai',
    'ओ': 'o', 'औ': 'au', 'ऑ': 'o',
    'ऍ': 'e', 'ऎ': 'e', 'ऒ': 'o',

    'क': 'ka', 'ख': 'kha', 'ग': 'ga', 'घ': 'gha', 'ङ': 'nga',
    'च': 'cha', 'छ': 'chha', 'ज': 'ja', 'झ': 'jha', 'ञ': 'nya',
    'ट': 'ta', 'ठ': 'tha', 'ड': 'da', 'ढ': 'dha', 'ण': 'na',
    'त': 'ta', 'थ': 'tha', 'द': 'da', 'ध': 'dha', 'न': 'na',
    'प': 'pa', 'फ': 'pha', 'ब': 'ba', 'भ': 'bha', 'म': 'ma',
    'य': 'ya', 'र': 'ra', 'ल': 'la', 'व': 'va',
    'श': 'sha', 'ष': 'sha', 'स': 'sa', 'ह': 'ha',

    'क़': 'qa', 'ख़': 'kha', 'ग़': 'gha', 'ज़': 'za',
    'ड़': 'ra', 'ढ़': 'rha', 'फ़': 'fa', 'य़': 'ya',

    'क्ष': 'ksha', 'त्र': 'tra', 'ज्ञ': 'gya',

    'ा': 'aa', 'ि': 'i', 'ी': 'ee', 'ु': 'u', 'ू': 'oo',
    'ृ': 'ri', 'ॄ': 'ree', 'ॢ': 'li', 'ॣ': 'lee',
    'े': 'e', 'ै': 'ai', 'ो': 'o', 'ौ': 'au', 'ॉ': 'o',
    'ॅ': 'e', 'ॆ': 'e', 'ॊ': 'o',

    VIRAMA: '', 'ं': 'n', 'ः': 'h', 'ँ': 'n', NUKTA: '',
}

_BASE_TABLES = {
    "iast": _IAST,
    "harvard": _HARVARD,
    "simplified": _SIMPLIFIED,
}

SCHEME_INFO: Dict[str, SchemeInfo] = {
    "iast": SchemeInfo(
        name="iast",
        title="IAST",
        description="International Alphabet of Sanskrit Transliteration",
        diacritics=True,
    ),
    "harvard": SchemeInfo(
        name="harvard",
        title="Harvard-Kyoto",
        description="ASCII-compatible transliteration scheme",
        diacritics=False,
    ),
    "simplified": SchemeInfo(
        name="simplified",
        title="Simplified",
        description="Easy-to-read phonetic transliteration",
        diacritics=False,
    ),
}


def build_table(scheme: str) -> Dict[str, str]:
    """Scheme table plus regional letters, Vedic signs, numerals and punctuation."""
    base = _BASE_TABLES[scheme]
    extended = {
        'ळ': base['ल'],  # Marathi retroflex L
        'ऱ': base['र'],  # flapped R
        'ऩ': base['न'],
        'ऴ': base['ल'],
        'ॐ': 'om',
        'ऽ': "'",  # avagraha
        '।': '.', '॥': '..', '॰': '',
    }
    return {**base, **_NUMERALS, **extended}


class DevanagariTransliterator(ScriptEngine):
    """Romanizes Devanagari under one scheme."""

    script = Script.DEVANAGARI

    def __init__(self, scheme: Optional[str] = None):
        super().__init__(scheme)
        self.table = ScriptTable(self.script, self.scheme, build_table(self.scheme))

    def info(self) -> SchemeInfo:
        return SCHEME_INFO[self.scheme]

    def _consonant(self, text: str, pos: int) -> Tuple[str, str, int]:
        """
        Read the consonant at `pos`, folding in a following nukta.

        Returns:
            Tuple of (source, phonetic, end position)
        """
        char = text[pos]
        end = pos + 1
        key = char
        if end < len(text) and text[end] == NUKTA and char in NUKTA_FORMS:
            key = NUKTA_FORMS[char]
            end += 1
        return text[pos:end], self.table.resolve(key), end

    def _drops_inherent(self, text: str, pos: int) -> bool:
        """True if the character at `pos` replaces or cancels an inherent vowel."""
        if pos >= len(text):
            return False
        return classify(text[pos]) in (Role.SUPPRESSOR, Role.DEPENDENT_VOWEL)

    def apply_rules(self, text: str) -> List[Unit]:
        units = []
        i = 0
        n = len(text)

        while i < n:
            char = text[i]

            compound = self.table.match_compound(text, i)
            if compound:
                end = i + len(compound)
                value = self.table.resolve(compound)
                if classify(compound[-1]) is Role.CONSONANT and self._drops_inherent(text, end):
                    value = strip_inherent(value)
                units.append(Unit(compound, value, Role.CONSONANT))
                i = end
                continue

            role = classify(char)

            if role is Role.SUPPRESSOR and i + 1 < n and classify(text[i + 1]) is Role.CONSONANT:
                source, value, end = self._consonant(text, i + 1)
                units.append(Unit(char + source, strip_inherent(value), Role.CONSONANT))
                i = end
                continue

            if role is Role.DEPENDENT_VOWEL:
                units.append(Unit(char, self.table.resolve(char), role))
                i += 1
                continue

            if role is Role.CONSONANT:
                source, value, end = self._consonant(text, i)
                if self._drops_inherent(text, end):
                    value = strip_inherent(value)
                units.append(Unit(source, value, role))
                i = end
                continue

            if char in self.table:
                units.append(Unit(char, self.table.resolve(char), role))
            else:
                units.append(Unit(char, char, Role.PASSTHROUGH))
            i += 1

        return units

    def render(self, text: str) -> str:
        units = self.apply_rules(text)
        if self.scheme != "iast":
            rendered = "".join(unit.phonetic for unit in units)
        else:
            # Long a only within runs of script units, never in passthrough text
            rendered = "".join(
                "".join(unit.phonetic for unit in run) if passthrough
                else "".join(unit.phonetic for unit in run).replace("aa", "ā")
                for passthrough, run in groupby(units, key=lambda u: u.role is Role.PASSTHROUGH)
            )
        logger.debug(f"Rendered {text!r} as {rendered!r} ({self.scheme})")
        return rendered
