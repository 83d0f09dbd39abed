"""
Transliteration façade.

A Transliterator owns one prebuilt, immutable engine per scheme of its
script and an active-scheme selector. Each call runs:

    detect -> dictionary scan -> rules on unmatched spans -> post-process

and returns the input unchanged when it holds no characters of the script.
"""

import threading
import unicodedata
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .dictionary import HINDI_WORDS, KOREAN_WORDS, DictionaryOverlay, merge_dictionaries
from .exceptions import UnsupportedScriptError
from .scripts import ENGINES, SCHEMES, SchemeInfo, Script, ScriptEngine
from .scripts.base import resolve_scheme
from .scripts.hangul import convert_hanja_numbers
from .utils.config import Config, get_config
from .utils.logger import get_logger

logger = get_logger("transliterator")

DEFAULT_DICTIONARIES: Dict[Script, Mapping[str, str]] = {
    Script.HANGUL: KOREAN_WORDS,
    Script.DEVANAGARI: HINDI_WORDS,
}


def parse_script(script) -> Script:
    """Accept a Script or its name."""
    if isinstance(script, Script):
        return script
    try:
        return Script(str(script).lower())
    except ValueError:
        raise UnsupportedScriptError(
            f"Unsupported script: {script} (expected one of: "
            f"{', '.join(s.value for s in Script)})",
            code="script",
        ) from None


class Transliterator:
    """Romanizes text in one script under a switchable scheme."""

    def __init__(self, script, scheme: Optional[str] = None,
                 dictionary: Optional[Mapping[str, str]] = None,
                 whole_words: bool = False,
                 convert_hanja_numbers: bool = False):
        """
        Args:
            script: Script or script name ("hangul", "devanagari")
            scheme: Initial scheme; defaults to the script's first scheme
            dictionary: Word map consulted before the rules. None selects
                the built-in map; pass {} to disable the overlay
            whole_words: Only match dictionary words not flanked by script letters
            convert_hanja_numbers: Rewrite Hanja numerals to Hangul first (Hangul only)

        Raises:
            UnsupportedScriptError: unknown script
            UnsupportedSchemeError: unknown initial scheme
        """
        self.script = parse_script(script)
        scheme = resolve_scheme(self.script, scheme)

        engine_class = ENGINES[self.script]
        self._engines: Dict[str, ScriptEngine] = {
            name: engine_class(name) for name in SCHEMES[self.script]
        }
        self._engine = self._engines[scheme]
        self._lock = threading.Lock()

        if dictionary is None:
            dictionary = DEFAULT_DICTIONARIES[self.script]
        self.dictionary = DictionaryOverlay(
            dictionary,
            whole_words=whole_words,
            is_letter=self._engine.detector.is_script_char,
        )
        self.convert_hanja_numbers = convert_hanja_numbers and self.script is Script.HANGUL

    @classmethod
    def from_config(cls, script, config: Optional[Config] = None) -> "Transliterator":
        config = config or get_config()
        script = parse_script(script)

        if script is Script.HANGUL:
            scheme = config.hangul.scheme
            extra_files = config.dictionary.hangul_files
            hanja = config.hangul.convert_hanja_numbers
        else:
            scheme = config.devanagari.scheme
            extra_files = config.dictionary.devanagari_files
            hanja = False

        if config.dictionary.enabled:
            dictionary = merge_dictionaries(dict(DEFAULT_DICTIONARIES[script]), extra_files)
        else:
            dictionary = {}

        return cls(
            script,
            scheme=scheme,
            dictionary=dictionary,
            whole_words=config.dictionary.whole_words,
            convert_hanja_numbers=hanja,
        )

    def __repr__(self) -> str:
        return f"Transliterator(script={self.script.value!r}, scheme={self.scheme!r})"

    @property
    def scheme(self) -> str:
        return self._engine.scheme

    def available_schemes(self) -> Tuple[str, ...]:
        return SCHEMES[self.script]

    def scheme_info(self, scheme: Optional[str] = None) -> SchemeInfo:
        engine = self._engines.get(scheme, self._engine) if scheme else self._engine
        return engine.info()

    def set_scheme(self, name: str) -> bool:
        """
        Switch the active scheme.

        Returns:
            True on success; False if `name` is not one of available_schemes(),
            in which case the active scheme is unchanged
        """
        engine = self._engines.get(name)
        if engine is None:
            logger.warning(f"Rejected unknown {self.script.value} scheme: {name!r}")
            return False

        with self._lock:
            previous = self._engine.scheme
            self._engine = engine

        if previous != name:
            logger.info(f"{self.script.value} scheme changed: {previous} -> {name}")
        return True

    def is_script(self, text: str) -> bool:
        return self._engine.detect(text)

    def transliterate(self, text: str, scheme: Optional[str] = None) -> str:
        """
        Romanize `text`.

        Never fails. Text without characters of the script is returned
        unchanged. An unknown `scheme` is ignored and the active scheme used.
        """
        engine = self._engine
        if scheme is not None and scheme != engine.scheme:
            if scheme in self._engines:
                engine = self._engines[scheme]
            else:
                logger.warning(f"Ignoring unknown {self.script.value} scheme: {scheme!r}")

        # Conjoining jamo and nukta sequences are matched in composed form
        source = unicodedata.normalize("NFC", text)
        if self.convert_hanja_numbers:
            source = convert_hanja_numbers(source)

        if not engine.detect(source):
            return text

        parts = []
        for segment in self.dictionary.scan(source):
            if segment.matched:
                parts.append(segment.rendering)
            else:
                parts.append(engine.render(segment.text))

        return engine.post_process("".join(parts))

    def transliterate_many(self, texts: Iterable[str], scheme: Optional[str] = None) -> List[str]:
        return [self.transliterate(text, scheme=scheme) for text in texts]
