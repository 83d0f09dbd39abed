"""
Text clean-up helpers applied before transliteration.
"""
import re

_INVISIBLES = re.compile(r'[\u200C\u200D\uFEFF]')
_CONTROL = re.compile(r'[\u0000-\u0008\u000B\u000C\u000E-\u001F\u007F-\u009F]')
_WHITESPACE = re.compile(r'\s+')

NO_BREAK_SPACE = '\u00a0'


def clean_text(text: str) -> str:
    """Remove zero-width joiners, byte order marks and control characters."""
    text = _INVISIBLES.sub('', text)
    return _CONTROL.sub('', text).strip()


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including no-break space) to one space."""
    return _WHITESPACE.sub(' ', text.replace(NO_BREAK_SPACE, ' ')).strip()
