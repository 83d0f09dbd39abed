"""
Script engines.

One ScriptEngine subclass per script; each instance is bound to a single
romanization scheme.
"""

from .base import SCHEMES, Role, SchemeInfo, Script, ScriptEngine, ScriptTable, Unit
from .detector import DETECTORS, ScriptDetector, ScriptRange
from .devanagari import DevanagariTransliterator
from .hangul import HangulTransliterator

ENGINES = {
    Script.HANGUL: HangulTransliterator,
    Script.DEVANAGARI: DevanagariTransliterator,
}

__all__ = [
    'DETECTORS',
    'ENGINES',
    'SCHEMES',
    'DevanagariTransliterator',
    'HangulTransliterator',
    'Role',
    'SchemeInfo',
    'Script',
    'ScriptDetector',
    'ScriptEngine',
    'ScriptRange',
    'ScriptTable',
    'Unit',
]
