"""
Exception hierarchy for the wasmer-js command-line tool.

Every error raised by the tool derives from WasmerJsError, so the entry point
can turn any of them into an error message and a non-zero exit code with a
single except clause.
"""

from typing import Any


class WasmerJsError(Exception):
    """
    Base exception for all wasmer-js errors.

    Example:
        try:
            command.run(args)
        except WasmerJsError as e:
            lg.error(f"command failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(WasmerJsError):
    """
    Configuration-related errors.

    Examples:
        - Config file is not valid YAML
        - Config document is not a mapping
    """

    pass


class CommandError(WasmerJsError):
    """Raised when a command cannot be executed."""

    pass


class CommandRegistrationError(WasmerJsError):
    """Raised when a command cannot be added to the registry."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Failed to register command '{name}': {reason}", name=name)
        self.name = name
        self.reason = reason


class DuplicateCommandError(CommandRegistrationError):
    """Raised when a command name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "name is already registered")


class ModuleError(WasmerJsError):
    """
    WebAssembly module errors.

    Examples:
        - Module file does not exist
        - File does not start with the wasm preamble
    """

    pass
