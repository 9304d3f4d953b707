"""
Command registration and lookup.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .exceptions import CommandRegistrationError, DuplicateCommandError

if TYPE_CHECKING:
    from .command import CommandDescriptor

MAX_COMMAND_NAME_LENGTH = 32

_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")


def _validate_command_name(name: str) -> None:
    if not name:
        raise CommandRegistrationError("", "command must have a name")

    if len(name) > MAX_COMMAND_NAME_LENGTH:
        raise CommandRegistrationError(
            name,
            f"name exceeds maximum length of {MAX_COMMAND_NAME_LENGTH} characters",
        )

    if not _NAME_PATTERN.match(name):
        raise CommandRegistrationError(
            name,
            "name must start with a lowercase letter and contain only "
            "lowercase letters, numbers, underscores, and hyphens",
        )


class CommandRegistry:
    """Registered subcommands, kept in registration order."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandDescriptor] = {}

    def register(self, command: CommandDescriptor) -> CommandDescriptor:
        """
        Register a command.

        Args:
            command: Command to register

        Returns:
            The registered command, for chaining

        Raises:
            CommandRegistrationError: If the name is empty, too long or malformed
            DuplicateCommandError: If the name is already registered
        """
        _validate_command_name(command.name)

        if command.name in self._commands:
            raise DuplicateCommandError(command.name)

        self._commands[command.name] = command
        return command

    def get(self, name: str) -> CommandDescriptor | None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return list(self._commands)

    def commands(self) -> list[CommandDescriptor]:
        return list(self._commands.values())

    def is_registered(self, name: str) -> bool:
        return name in self._commands

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(list(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)
