"""
Unicode range detection for supported scripts.

Ranges are closed constants; nothing here depends on locale or regex
character classes.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class ScriptRange:
    """A contiguous run of script characters found in a text."""

    start: int
    end: int  # inclusive
    text: str


class ScriptDetector:
    """Membership test over a fixed list of code point ranges."""

    def __init__(self, name: str, ranges: Tuple[Tuple[int, int], ...]):
        self.name = name
        self.ranges = ranges

    def __repr__(self) -> str:
        spans = ", ".join(f"U+{lo:04X}-U+{hi:04X}" for lo, hi in self.ranges)
        return f"ScriptDetector({self.name}: {spans})"

    def is_script_char(self, char: str) -> bool:
        code = ord(char)
        for low, high in self.ranges:
            if low <= code <= high:
                return True
        return False

    def contains(self, text: str) -> bool:
        """True if any character of `text` belongs to the script."""
        return any(self.is_script_char(char) for char in text)

    def script_ranges(self, text: str) -> List[ScriptRange]:
        ranges = []
        start = -1

        for i, char in enumerate(text):
            if self.is_script_char(char):
                if start == -1:
                    start = i
            elif start != -1:
                ranges.append(ScriptRange(start, i - 1, text[start:i]))
                start = -1

        if start != -1:
            ranges.append(ScriptRange(start, len(text) - 1, text[start:]))

        return ranges


HANGUL_RANGES = (
    (0xAC00, 0xD7AF),  # Hangul syllables
    (0x1100, 0x11FF),  # Hangul jamo
    (0x3130, 0x318F),  # Hangul compatibility jamo
)

DEVANAGARI_RANGES = (
    (0x0900, 0x097F),
)

DETECTORS: Dict[str, ScriptDetector] = {
    "hangul": ScriptDetector("hangul", HANGUL_RANGES),
    "devanagari": ScriptDetector("devanagari", DEVANAGARI_RANGES),
}
