#!/usr/bin/env python3
"""
wasmer-js command-line entry point.

Usage:
    wasmer-js help [SUBCOMMAND]
    wasmer-js run [FILE] [ARGS...]
    wasmer-js version
"""

import logging
import sys
from collections.abc import Sequence

from wasmerjs.commands import HelpCommand, RunCommand, VersionCommand
from wasmerjs.config import Settings
from wasmerjs.exceptions import CommandError, ConfigError, WasmerJsError
from wasmerjs.log import LoggingBuilder
from wasmerjs.output import ErrorOutput, OutputWriter
from wasmerjs.registry import CommandRegistry

_VERSION_FLAGS = ("-v", "--version")
_HELP_FLAGS = ("-h", "--help")


def build_registry(
    settings: Settings | None = None, output: OutputWriter | None = None
) -> CommandRegistry:
    """Build the registry of the tool's commands, help first."""
    registry = CommandRegistry()
    registry.register(HelpCommand(registry, output=output))
    registry.register(RunCommand(settings, output=output))
    registry.register(VersionCommand(output=output))
    return registry


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configure the tool's logger from the "logging" config section.

    Raises:
        ConfigError: If the configured level is not a logging level
    """
    try:
        builder = LoggingBuilder("wasmerjs").with_config(settings.section("logging"))
        return builder.build()
    except ValueError as e:
        raise ConfigError(str(e), key="logging.level") from e


def dispatch(registry: CommandRegistry, args: Sequence[str]) -> int:
    """
    Route args to a command and return its exit code.

    No arguments shows the help command's usage. An unknown first token is
    reported by the help command and exits with 1.

    Raises:
        CommandError: If the registry has no help command
    """
    help_command = registry.get("help")
    if not isinstance(help_command, HelpCommand):
        raise CommandError("help command is not registered")

    if len(args) == 0 or args[0] in _HELP_FLAGS:
        return help_command.run([])

    if args[0] in _VERSION_FLAGS:
        return registry.get("version").run([])  # type: ignore[union-attr]

    command = registry.get(args[0])
    if command is None:
        help_command.run_help(args[:1])
        return 1

    return command.run(args[1:])


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the wasmer-js CLI."""
    args = list(sys.argv[1:] if argv is None else argv)
    errors = ErrorOutput()

    try:
        settings = Settings.load()
        lg = setup_logging(settings)
    except ConfigError as e:
        errors.write(f"error: {e}")
        return 1

    lg.debug("starting", extra={"argv": " ".join(args)})
    registry = build_registry(settings)

    try:
        return dispatch(registry, args)
    except WasmerJsError as e:
        lg.debug("command failed", extra={"error": type(e).__name__})
        errors.write(f"error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
