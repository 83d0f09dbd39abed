"""
Tests for configuration loading and validation.
"""

import pytest

from glyph.app.exceptions import ConfigurationError
from glyph.app.utils import config as config_module
from glyph.app.utils.config import Config, get_config, load_config


class TestConfigDefaults:

    def test_defaults(self):
        config = Config()
        assert config.hangul.scheme == "rr"
        assert config.hangul.convert_hanja_numbers is False
        assert config.devanagari.scheme == "iast"
        assert config.dictionary.enabled is True
        assert config.dictionary.whole_words is False
        assert config.logging.level == "WARNING"
        assert config.logging.file_path is None


class TestConfigValidation:

    def test_unknown_hangul_scheme(self):
        with pytest.raises(ConfigurationError):
            Config(hangul={"scheme": "iast"})

    def test_unknown_devanagari_scheme(self):
        with pytest.raises(ConfigurationError):
            Config(devanagari={"scheme": "rr"})

    def test_log_level_normalized(self):
        assert Config(logging={"level": "debug"}).logging.level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationError):
            Config(logging={"level": "chatty"})


class TestConfigSources:

    def test_from_toml(self, tmp_path):
        path = tmp_path / "glyph.toml"
        path.write_text(
            '[hangul]\nscheme = "yale"\n\n[dictionary]\nwhole_words = true\n',
            encoding="utf-8",
        )
        config = Config.from_toml(path)
        assert config.hangul.scheme == "yale"
        assert config.dictionary.whole_words is True
        assert config.devanagari.scheme == "iast"

    def test_from_toml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_toml(tmp_path / "missing.toml")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("GLYPH_DEVANAGARI__SCHEME", "simplified")
        assert Config().devanagari.scheme == "simplified"

    def test_load_config_falls_back_to_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.toml")
        assert config.hangul.scheme == "rr"

    def test_load_config_is_cached(self, tmp_path):
        path = tmp_path / "glyph.toml"
        path.write_text('[hangul]\nscheme = "mr"\n', encoding="utf-8")
        first = load_config(path)
        assert get_config() is first
        assert load_config(tmp_path / "other.toml") is first

    def test_reset_config(self, tmp_path):
        path = tmp_path / "glyph.toml"
        path.write_text('[hangul]\nscheme = "mr"\n', encoding="utf-8")
        load_config(path)
        config_module.reset_config()
        assert get_config().hangul.scheme == "rr"

    def test_config_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "env.toml"
        path.write_text('[devanagari]\nscheme = "harvard"\n', encoding="utf-8")
        monkeypatch.setenv("GLYPH_CONFIG", str(path))
        assert load_config().devanagari.scheme == "harvard"
