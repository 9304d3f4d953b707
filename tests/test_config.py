"""Tests for wasmerjs.config module."""

import pytest

from wasmerjs.config import (
    DEFAULTS,
    MAX_CONFIG_SIZE_BYTES,
    Settings,
    _convert_env_value,
    get_config_file_path,
)
from wasmerjs.exceptions import ConfigError

pytestmark = pytest.mark.unit


class TestConvertEnvValue:
    """Tests for environment value conversion."""

    @pytest.mark.parametrize("value", ["null", "None", ""])
    def test_null_values(self, value):
        assert _convert_env_value(value) is None

    def test_booleans(self):
        assert _convert_env_value("true") is True
        assert _convert_env_value("FALSE") is False

    def test_numbers(self):
        assert _convert_env_value("42") == 42
        assert _convert_env_value("1.5") == 1.5

    def test_comma_separated_list(self):
        assert _convert_env_value("--dir=., --net") == ["--dir=.", "--net"]

    def test_plain_string(self):
        assert _convert_env_value("debug") == "debug"


class TestSettings:
    """Tests for Settings lookups and layering."""

    def test_defaults(self):
        settings = Settings()
        assert settings.get("runtime.binary") == "wasmer"
        assert settings.get("logging.level") == "warning"
        assert settings.get("runtime.args") == []

    def test_defaults_not_shared(self):
        settings = Settings()
        settings.get("runtime.args").append("--net")
        assert DEFAULTS["runtime"]["args"] == []

    def test_override_merges_sections(self):
        settings = Settings({"runtime": {"binary": "/opt/wasmer"}})
        assert settings.get("runtime.binary") == "/opt/wasmer"
        assert settings.get("runtime.args") == []

    def test_missing_key_returns_default(self):
        settings = Settings()
        assert settings.get("runtime.missing") is None
        assert settings.get("nope.nothing", "fallback") == "fallback"
        assert settings.get("runtime.binary.deeper") is None

    def test_section_is_a_copy(self):
        settings = Settings()
        settings.section("logging")["level"] = "debug"
        assert settings.get("logging.level") == "warning"

    def test_section_unknown(self):
        assert Settings().section("nope") == {}

    def test_as_dict(self):
        assert Settings().as_dict() == DEFAULTS


class TestEnvOverrides:
    """Tests for WASMERJS_* environment overrides."""

    def test_section_key(self):
        settings = Settings.load(environ={"WASMERJS_LOGGING_LEVEL": "debug"})
        assert settings.get("logging.level") == "debug"

    def test_key_with_underscore(self):
        settings = Settings.load(environ={"WASMERJS_RUNTIME_EXTRA_FLAG": "true"})
        assert settings.get("runtime.extra_flag") is True

    def test_list_value(self):
        settings = Settings.load(environ={"WASMERJS_RUNTIME_ARGS": "--dir=.,--net"})
        assert settings.get("runtime.args") == ["--dir=.", "--net"]

    def test_ignores_unrelated_and_malformed(self):
        settings = Settings.load(
            environ={"HOME": "/root", "WASMERJS_": "x", "WASMERJS_LOGGING": "x"}
        )
        assert settings.as_dict() == DEFAULTS

    def test_env_wins_over_file(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("logging:\n  level: info\n")
        settings = Settings.load(path, environ={"WASMERJS_LOGGING_LEVEL": "error"})
        assert settings.get("logging.level") == "error"


class TestConfigFile:
    """Tests for loading the YAML config file."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("runtime:\n  binary: custom-wasmer\n")
        settings = Settings.load(path, environ={})
        assert settings.get("runtime.binary") == "custom-wasmer"
        assert settings.source == path

    def test_env_var_path(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("logging:\n  colors: false\n")
        settings = Settings.load(environ={"WASMERJS_CONFIG": str(path)})
        assert settings.get("logging.colors") is False

    def test_default_file_in_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "wasmerjs.yaml").write_text("runtime:\n  args: [--net]\n")
        settings = Settings.load(environ={})
        assert settings.get("runtime.args") == ["--net"]

    def test_no_file_anywhere(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert get_config_file_path({}) is None
        assert Settings.load(environ={}).source is None

    def test_env_var_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="config file not found"):
            get_config_file_path({"WASMERJS_CONFIG": str(tmp_path / "missing.yaml")})

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="config file not found"):
            Settings.load(tmp_path / "missing.yaml", environ={})

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Settings.load(path, environ={}).as_dict() == DEFAULTS

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("runtime: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            Settings.load(path, environ={})

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            Settings.load(path, environ={})

    def test_too_large(self, tmp_path):
        path = tmp_path / "huge.yaml"
        path.write_text("#" * (MAX_CONFIG_SIZE_BYTES + 1))
        with pytest.raises(ConfigError, match="exceeds maximum size"):
            Settings.load(path, environ={})
