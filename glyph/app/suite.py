"""
Multi-script transliteration.

Holds one Transliterator per supported script and routes text to every
script detected in it.
"""

from typing import Any, Dict, List, Optional

from .exceptions import UnsupportedScriptError
from .scripts import DETECTORS, SchemeInfo, Script
from .transliterator import Transliterator, parse_script
from .utils.config import Config, get_config
from .utils.logger import get_logger

logger = get_logger("suite")

# Order in which detected scripts are transliterated
SCRIPT_ORDER = (Script.DEVANAGARI, Script.HANGUL)

LARGE_TEXT_THRESHOLD = 1000


class TransliteratorSuite:
    """Auto-detecting front end over the per-script transliterators."""

    def __init__(self, config: Optional[Config] = None,
                 transliterators: Optional[Dict[Script, Transliterator]] = None):
        if transliterators is None:
            config = config or get_config()
            transliterators = {
                script: Transliterator.from_config(script, config) for script in SCRIPT_ORDER
            }
        self.transliterators = transliterators
        logger.info(f"Transliterator suite ready: {', '.join(self.supported_scripts())}")

    def _get(self, script) -> Transliterator:
        script = parse_script(script)
        transliterator = self.transliterators.get(script)
        if transliterator is None:
            raise UnsupportedScriptError(
                f"Transliterator for script '{script.value}' not found", code="script"
            )
        return transliterator

    def supported_scripts(self) -> List[str]:
        return [script.value for script in SCRIPT_ORDER if script in self.transliterators]

    def is_script_supported(self, script) -> bool:
        try:
            self._get(script)
        except UnsupportedScriptError:
            return False
        return True

    def detect_scripts(self, text: str) -> List[str]:
        return [
            name for name in self.supported_scripts()
            if DETECTORS[name].contains(text)
        ]

    def auto_transliterate(self, text: str) -> str:
        detected = self.detect_scripts(text)
        if not detected:
            return text

        result = text
        for name in detected:
            result = self.transliterators[Script(name)].transliterate(result)
        return result

    def transliterate_script(self, text: str, script, scheme: Optional[str] = None) -> str:
        """
        Transliterate with a specific script, optionally under another scheme
        for this call only.

        Raises:
            UnsupportedScriptError: no transliterator for `script`
        """
        return self._get(script).transliterate(text, scheme=scheme)

    def transliterate_many(self, texts: List[str]) -> List[str]:
        return [self.auto_transliterate(text) for text in texts]

    def set_scheme(self, script, scheme: str) -> bool:
        try:
            transliterator = self._get(script)
        except UnsupportedScriptError:
            return False
        return transliterator.set_scheme(scheme)

    def available_schemes(self, script) -> List[str]:
        try:
            return list(self._get(script).available_schemes())
        except UnsupportedScriptError:
            return []

    def scheme_info(self, script) -> Optional[SchemeInfo]:
        """Active scheme of `script`, or None if the script is not supported."""
        try:
            return self._get(script).scheme_info()
        except UnsupportedScriptError:
            return None

    def statistics(self) -> Dict[str, Any]:
        stats = {
            "total_transliterators": len(self.transliterators),
            "supported_scripts": self.supported_scripts(),
            "total_word_mappings": sum(len(t.dictionary) for t in self.transliterators.values()),
            "scheme_support": {},
        }

        for name in self.supported_scripts():
            transliterator = self.transliterators[Script(name)]
            stats["scheme_support"][name] = {
                "schemes": list(transliterator.available_schemes()),
                "current_scheme": transliterator.scheme,
                "info": transliterator.scheme_info(),
            }

        return stats

    def analyze_text(self, text: str) -> Dict[str, Any]:
        detected = self.detect_scripts(text)
        analysis = {
            "length": len(text),
            "detected_scripts": detected,
            "script_ranges": {name: DETECTORS[name].script_ranges(text) for name in detected},
            "complexity": "simple",
        }

        if len(detected) > 1:
            analysis["complexity"] = "mixed-script"
        elif len(text) > LARGE_TEXT_THRESHOLD:
            analysis["complexity"] = "large-text"
        elif len(detected) == 1:
            analysis["complexity"] = "single-script"

        return analysis
