"""
Configuration for the wasmer-js tool.

Settings are layered, later layers winning:

1. Built-in defaults (DEFAULTS)
2. A YAML file: $WASMERJS_CONFIG if set, else ./wasmerjs.yaml if present
3. Environment overrides: WASMERJS_<SECTION>_<KEY>=value

Examples:
    WASMERJS_LOGGING_LEVEL=debug
    WASMERJS_RUNTIME_BINARY=/opt/wasmer/bin/wasmer
    WASMERJS_RUNTIME_ARGS=--enable-threads,--dir=.
"""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

ENV_PREFIX = "WASMERJS_"
CONFIG_ENV_VAR = "WASMERJS_CONFIG"
DEFAULT_CONFIG_FILENAME = "wasmerjs.yaml"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

DEFAULTS: dict[str, Any] = {
    "logging": {"level": "warning", "colors": True},
    "runtime": {"binary": "wasmer", "args": []},
}


def _convert_env_value(value: str) -> bool | int | float | str | list | None:
    """
    Convert an environment variable string to the appropriate type.

    Args:
        value: Environment variable value as string

    Returns:
        None for null/none/empty, bool for true/false, a list for
        comma-separated values, a number when it parses as one, else the string
    """
    if value.lower() in ("null", "none", ""):
        return None

    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    if "," in value:
        return [_convert_env_value(v.strip()) for v in value.split(",")]

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    return value


def _set_nested_value(data: dict, path: list[str], value: Any) -> None:
    current = data
    for part in path[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[path[-1]] = value


def _merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base, returning base."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _load_yaml(path: Path) -> dict[str, Any]:
    """
    Load a YAML config file.

    Raises:
        ConfigError: If the file is too large, malformed, or not a mapping
    """
    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "config file exceeds maximum size",
            path=str(path),
            size=size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )

    try:
        with path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in config file: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("config file must contain a mapping", path=str(path))
    return data


def get_config_file_path(environ: dict[str, str] | None = None) -> Path | None:
    """
    Locate the config file, if any.

    An explicit $WASMERJS_CONFIG must exist; the implicit ./wasmerjs.yaml is
    optional.

    Raises:
        ConfigError: If $WASMERJS_CONFIG points at a missing file
    """
    env = os.environ if environ is None else environ
    explicit = env.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ConfigError("config file not found", path=str(path))
        return path

    default = Path.cwd() / DEFAULT_CONFIG_FILENAME
    return default if default.is_file() else None


class Settings:
    """
    Layered tool settings with dotted-key access.

    Example:
        settings = Settings.load()
        binary = settings.get("runtime.binary")
    """

    def __init__(self, data: dict[str, Any] | None = None):
        self._data = _merge(copy.deepcopy(DEFAULTS), data or {})
        self.source: Path | None = None

    @classmethod
    def load(
        cls, path: str | Path | None = None, environ: dict[str, str] | None = None
    ) -> "Settings":
        """
        Build settings from defaults, the config file and the environment.

        Args:
            path: Explicit config file; looked up from the environment if None
            environ: Environment mapping (defaults to os.environ)

        Raises:
            ConfigError: If the config file is missing, malformed, or not a mapping
        """
        env = dict(os.environ) if environ is None else environ
        file_path = Path(path) if path is not None else get_config_file_path(env)

        data: dict[str, Any] = {}
        if file_path is not None:
            if not file_path.is_file():
                raise ConfigError("config file not found", path=str(file_path))
            data = _load_yaml(file_path)

        settings = cls(data)
        settings.source = file_path
        settings.apply_env_overrides(env)
        return settings

    def apply_env_overrides(self, environ: dict[str, str]) -> None:
        """Apply WASMERJS_<SECTION>_<KEY> overrides from the given mapping."""
        for key, value in environ.items():
            if not key.startswith(ENV_PREFIX) or key == CONFIG_ENV_VAR:
                continue
            path = key[len(ENV_PREFIX) :].lower().split("_", 1)
            if len(path) < 2 or not all(path):
                continue
            _set_nested_value(self._data, path, _convert_env_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as "runtime.binary"."""
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def section(self, name: str) -> dict[str, Any]:
        value = self._data.get(name)
        return dict(value) if isinstance(value, dict) else {}

    def as_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)
