from importlib.metadata import PackageNotFoundError, version

from .command import Command, CommandDescriptor
from .exceptions import (
    CommandError,
    CommandRegistrationError,
    ConfigError,
    DuplicateCommandError,
    ModuleError,
    WasmerJsError,
)
from .registry import CommandRegistry

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("wasmer-js")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "Command",
    "CommandDescriptor",
    "CommandRegistry",
    "WasmerJsError",
    "ConfigError",
    "CommandError",
    "CommandRegistrationError",
    "DuplicateCommandError",
    "ModuleError",
]
