"""Tests for svg_markup2tspan.config (YAML loading and env overrides)."""

from pathlib import Path
from textwrap import dedent

import pytest

from svg_markup2tspan.config import Config
from svg_markup2tspan.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the user's config file and M2T_* variables."""
    for var in ("M2T_CONFIG", "M2T_FONT_FAMILY", "M2T_FONT_SIZE", "M2T_LENGTH_UNIT", "M2T_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


class TestConfigDefaults:
    def test_defaults(self) -> None:
        config = Config()
        assert config.font_family == "sans-serif"
        assert config.font_size == 12.0
        assert config.length_unit == "mm"
        assert config.escape_text is False
        assert config.log_level == "WARNING"

    def test_load_without_file_gives_defaults(self) -> None:
        assert Config.load() == Config()


class TestConfigLoad:
    """Tests for Config.load()."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            dedent("""
            font_family: "Helvetica, Arial, sans"
            font_size: 9
            length_unit: pt
            escape_text: true
            log_level: debug
        """)
        )
        config = Config.load(config_file)
        assert config.font_family == "Helvetica, Arial, sans"
        assert config.font_size == 9.0
        assert config.length_unit == "pt"
        assert config.escape_text is True
        assert config.log_level == "DEBUG"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert Config.load(config_file) == Config()

    def test_env_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "env.yaml"
        config_file.write_text("font_size: 20\n")
        monkeypatch.setenv("M2T_CONFIG", str(config_file))
        assert Config.load().font_size == 20.0

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("font_size: 20\nlength_unit: pt\n")
        monkeypatch.setenv("M2T_FONT_SIZE", "7.5")
        monkeypatch.setenv("M2T_FONT_FAMILY", "serif")
        config = Config.load(config_file)
        assert config.font_size == 7.5
        assert config.font_family == "serif"
        assert config.length_unit == "pt"

    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            Config.load(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("font_size: [1, 2\n")
        with pytest.raises(ConfigError, match="Failed to read"):
            Config.load(config_file)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            Config.load(config_file)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "extra.yaml"
        config_file.write_text("colour: red\n")
        with pytest.raises(ConfigError, match="Unknown config keys: colour"):
            Config.load(config_file)


class TestConfigValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"font_size": "big"},
            {"font_size": 0},
            {"length_unit": "em"},
            {"log_level": "LOUD"},
            {"escape_text": "yes"},
        ],
    )
    def test_invalid_values_raise(self, kwargs: dict) -> None:
        with pytest.raises(ConfigError):
            Config(**kwargs)
