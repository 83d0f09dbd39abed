"""
Shared model for script transliterators.

Every script is handled by a ScriptEngine subclass bound to exactly one
romanization scheme. Engines are built once and never mutated, so one
engine can serve any number of concurrent calls; switching schemes means
picking a different engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..exceptions import UnsupportedSchemeError
from ..text import normalize_whitespace
from .detector import DETECTORS


class Script(Enum):
    """Scripts with a transliteration engine."""

    HANGUL = "hangul"
    DEVANAGARI = "devanagari"


# Closed scheme sets; the first entry is the default
SCHEMES: Dict[Script, Tuple[str, ...]] = {
    Script.HANGUL: ("rr", "mr", "yale"),
    Script.DEVANAGARI: ("iast", "harvard", "simplified"),
}


class Role(Enum):
    """Role of a decoded unit within its script."""

    CONSONANT = "consonant"
    VOWEL = "vowel"
    DEPENDENT_VOWEL = "dependent_vowel"
    SUPPRESSOR = "suppressor"
    NUMERAL = "numeral"
    PUNCTUATION = "punctuation"
    MARK = "mark"
    SYLLABLE = "syllable"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class Unit:
    """
    One decoded element of the source text.

    Attributes:
        source: The raw character(s) consumed
        phonetic: Rendering under the engine's scheme
        role: What the source character(s) are in the script
    """

    source: str
    phonetic: str
    role: Role


@dataclass(frozen=True)
class SchemeInfo:
    name: str
    title: str
    description: str
    diacritics: bool
    official: bool = False


@dataclass(frozen=True)
class ScriptTable:
    """
    Read-only mapping from source characters to phonetic strings.

    Keys longer than one character are compounds (conjuncts); they are
    kept in `compounds`, longest first, for greedy matching.
    """

    script: Script
    scheme: str
    entries: Mapping[str, str]
    compounds: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        compounds = sorted((k for k in self.entries if len(k) > 1), key=len, reverse=True)
        object.__setattr__(self, "compounds", tuple(compounds))

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.entries.get(key, default)

    def resolve(self, key: str) -> str:
        """Phonetic value for `key`, or `key` itself when the table has none."""
        return self.entries.get(key, key)

    def match_compound(self, text: str, pos: int) -> Optional[str]:
        """Longest compound key starting at `pos`, if any."""
        for key in self.compounds:
            if text.startswith(key, pos):
                return key
        return None


INHERENT_VOWEL = "a"


def strip_inherent(value: str, vowel: str = INHERENT_VOWEL) -> str:
    """Remove a consonant's trailing inherent vowel."""
    if value.endswith(vowel):
        return value[: -len(vowel)]
    return value


def resolve_scheme(script: Script, scheme: Optional[str]) -> str:
    """Return `scheme` (or the script default) if it is a known scheme."""
    if scheme is None:
        return SCHEMES[script][0]
    if scheme not in SCHEMES[script]:
        raise UnsupportedSchemeError(
            f"Unknown {script.value} scheme '{scheme}' "
            f"(expected one of: {', '.join(SCHEMES[script])})",
            code="scheme",
        )
    return scheme


class ScriptEngine:
    """
    Transliteration rules for one script under one scheme.

    Subclasses set `script` and implement `apply_rules`. `render` turns a
    span of source text into romanized text; `post_process` runs once over
    the assembled output of a whole call.
    """

    script: Script

    def __init__(self, scheme: Optional[str] = None):
        self.scheme = resolve_scheme(self.script, scheme)
        self.detector = DETECTORS[self.script.value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheme={self.scheme!r})"

    def detect(self, text: str) -> bool:
        return self.detector.contains(text)

    def apply_rules(self, text: str) -> List[Unit]:
        raise NotImplementedError

    def render(self, text: str) -> str:
        return "".join(unit.phonetic for unit in self.apply_rules(text))

    def post_process(self, text: str) -> str:
        return normalize_whitespace(text)

    def info(self) -> SchemeInfo:
        raise NotImplementedError
