import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError


def _check_scheme(script_name: str, scheme: str) -> str:
    from ..scripts.base import SCHEMES, Script

    allowed = SCHEMES[Script(script_name)]
    if scheme not in allowed:
        raise ConfigurationError(
            f"Unknown {script_name} scheme '{scheme}' (expected one of: {', '.join(allowed)})"
        )
    return scheme


class HangulConfig(BaseModel):
    """Hangul transliterator settings."""

    scheme: str = "rr"
    convert_hanja_numbers: bool = False

    @field_validator('scheme')
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        return _check_scheme("hangul", v)


class DevanagariConfig(BaseModel):
    """Devanagari transliterator settings."""

    scheme: str = "iast"

    @field_validator('scheme')
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        return _check_scheme("devanagari", v)


class DictionaryConfig(BaseModel):
    enabled: bool = True
    whole_words: bool = False
    hangul_files: list[str] = Field(default_factory=list)
    devanagari_files: list[str] = Field(default_factory=list)


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Unknown log level: {v}")
        return level


class Config(BaseSettings):
    hangul: HangulConfig = Field(default_factory=HangulConfig)
    devanagari: DevanagariConfig = Field(default_factory=DevanagariConfig)
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="GLYPH_",
        env_nested_delimiter="__",
    )

    @classmethod
    def from_toml(cls, path: str | Path) -> "Config":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)

        return cls(**data)


_config: Optional[Config] = None


def load_config(path: Optional[str | Path] = None) -> Config:
    global _config
    if _config is None:
        if path is None:
            path = os.environ.get("GLYPH_CONFIG", "glyph.toml")

        config_path = Path(path)
        if config_path.exists():
            _config = Config.from_toml(config_path)
        else:
            _config = Config()

    return _config


def get_config() -> Config:
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration so the next access reloads it."""
    global _config
    _config = None
