"""
Shared fixtures for the Glyph test suite.
"""

import logging

import pytest

from glyph.app.transliterator import Transliterator
from glyph.app.utils import config as config_module


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from config files and GLYPH_* variables."""
    monkeypatch.delenv("GLYPH_CONFIG", raising=False)
    for name in ("GLYPH_HANGUL__SCHEME", "GLYPH_DEVANAGARI__SCHEME", "GLYPH_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GLYPH_CONFIG", "does-not-exist.toml")
    config_module.reset_config()
    yield
    config_module.reset_config()
    logger = logging.getLogger("glyph")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def korean_fixture_words():
    return {
        '서울': 'seoul',
        '서울역': 'seoullyeok',
        '안녕': 'annyeong',
    }


@pytest.fixture
def hindi_fixture_words():
    return {
        'भारत': 'bharat',
        'भारतवर्ष': 'bharatvarsh',
    }


@pytest.fixture
def hangul():
    """Hangul transliterator with the built-in dictionary."""
    return Transliterator("hangul")


@pytest.fixture
def hangul_rules():
    """Hangul transliterator without a dictionary, exercising only the rules."""
    return Transliterator("hangul", dictionary={})


@pytest.fixture
def devanagari():
    return Transliterator("devanagari")


@pytest.fixture
def devanagari_rules():
    return Transliterator("devanagari", dictionary={})
