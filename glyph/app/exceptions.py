"""
Custom exception hierarchy for Glyph.

Transliteration itself never raises: unknown characters pass through and
unknown per-call schemes are ignored. These exceptions cover configuration
and data provisioning mistakes.
"""


class GlyphException(Exception):
    """Base exception for all Glyph errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(GlyphException):
    """Configuration validation errors (invalid settings, missing values)."""

    pass


class UnsupportedSchemeError(GlyphException):
    """Romanization scheme is not in the script's closed scheme set."""

    pass


class UnsupportedScriptError(GlyphException):
    """No transliterator is registered for the requested script."""

    pass


class DictionaryError(GlyphException):
    """Dictionary data could not be read or has the wrong shape."""

    pass
