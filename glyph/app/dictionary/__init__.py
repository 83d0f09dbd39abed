"""
Dictionary overlay: known words and phrases matched before unit-level rules.
"""

from .data import HINDI_WORDS, KOREAN_WORDS
from .loader import load_dictionary, merge_dictionaries
from .overlay import DictionaryOverlay, Segment

__all__ = [
    'DictionaryOverlay',
    'Segment',
    'HINDI_WORDS',
    'KOREAN_WORDS',
    'load_dictionary',
    'merge_dictionaries',
]
