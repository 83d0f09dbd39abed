"""
Whole word and phrase lookup ahead of unit-level transliteration.
"""

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Tuple

from ..utils.logger import get_logger

logger = get_logger("dictionary.overlay")


@dataclass(frozen=True)
class Segment:
    """
    A span of the input after the dictionary scan.

    Attributes:
        text: The source span
        rendering: Dictionary rendering, or None if the span was not matched
    """

    text: str
    rendering: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.rendering is not None


class DictionaryOverlay:
    """
    Longest-match-first dictionary of known words and phrases.

    Matching is exact. When `whole_words` is set, a match must not be
    preceded or followed by a character for which `is_letter` is true.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None,
                 whole_words: bool = False,
                 is_letter: Optional[Callable[[str], bool]] = None):
        self.entries = MappingProxyType({
            unicodedata.normalize("NFC", k): v for k, v in (entries or {}).items() if k
        })
        self.whole_words = whole_words
        self.is_letter = is_letter or str.isalpha
        self.max_length = max((len(key) for key in self.entries), default=0)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: str) -> bool:
        return word in self.entries

    def get(self, word: str) -> Optional[str]:
        return self.entries.get(word)

    def _at_boundary(self, text: str, start: int, end: int) -> bool:
        if start > 0 and self.is_letter(text[start - 1]):
            return False
        if end < len(text) and self.is_letter(text[end]):
            return False
        return True

    def match_at(self, text: str, pos: int) -> Optional[Tuple[str, str]]:
        """
        Find the longest entry starting at `pos`.

        Returns:
            Tuple of (matched source, rendering), or None
        """
        longest = min(self.max_length, len(text) - pos)
        for length in range(longest, 0, -1):
            candidate = text[pos:pos + length]
            rendering = self.entries.get(candidate)
            if rendering is None:
                continue
            if self.whole_words and not self._at_boundary(text, pos, pos + length):
                continue
            return candidate, rendering
        return None

    def scan(self, text: str) -> List[Segment]:
        """Split `text` into dictionary matches and unmatched spans."""
        if not self.entries:
            return [Segment(text)] if text else []

        segments = []
        pending_start = 0
        pos = 0

        while pos < len(text):
            match = self.match_at(text, pos)
            if match is None:
                pos += 1
                continue

            if pending_start < pos:
                segments.append(Segment(text[pending_start:pos]))
            word, rendering = match
            segments.append(Segment(word, rendering))
            pos += len(word)
            pending_start = pos

        if pending_start < len(text):
            segments.append(Segment(text[pending_start:]))

        logger.debug(f"Dictionary scan: {sum(s.matched for s in segments)} matches in {len(text)} chars")
        return segments
