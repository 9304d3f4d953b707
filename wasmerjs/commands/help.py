"""The help command: prints usage for the tool or for one of its subcommands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..command import Command, CommandDescriptor
from ..log import get_logger
from ..output import OutputWriter
from ..registry import CommandRegistry

HELP_NAME = "help"
HELP_DESCRIPTION = "Show the usage of the passed subcommand"

# Built line by line: the trailing space after "for" and the four-space line
# are part of the published output.
_USAGE_HEAD = "\n".join(
    (
        "USAGE:",
        "",
        "$ wasmer-js help [SUBCOMMAND]",
        "",
        "ARGUMENTS:",
        "",
        "[SUBCOMMAND] - The subcommand we want to see the help message for ",
        "    ",
        "    The available subcommands (other than help) are:",
    )
)

lg = get_logger(HELP_NAME)


class HelpCommand(Command):
    """
    Dispatches ``wasmer-js help [SUBCOMMAND]``.

    The other subcommands are injected rather than imported. They are read
    each time help is rendered, so the usage text always shows their current
    names and descriptions. Passing a CommandRegistry also picks up commands
    registered after this one; any other iterable is copied once, so a
    generator can be passed too.
    """

    def __init__(
        self,
        commands: Iterable[CommandDescriptor],
        output: OutputWriter | None = None,
    ) -> None:
        super().__init__(
            name=HELP_NAME,
            description=HELP_DESCRIPTION,
            run_callback=self.run_help,
            get_help_body=self.help_body,
            output=output,
        )
        self._commands: CommandRegistry | tuple[CommandDescriptor, ...]
        if isinstance(commands, CommandRegistry):
            self._commands = commands
        else:
            self._commands = tuple(commands)

    def subcommands(self) -> list[CommandDescriptor]:
        """Known subcommands other than help, in the order they were given."""
        return [c for c in self._commands if c.name != self.name]

    def help_body(self) -> str:
        lines = [_USAGE_HEAD]
        for command in self.subcommands():
            lines.append(f"    {command.name} - {command.description}")
        return "\n".join(lines)

    def find(self, name: str) -> CommandDescriptor | None:
        for command in self.subcommands():
            if command.name == name:
                return command
        return None

    def run_help(self, args: Sequence[str]) -> None:
        """
        Print the usage text matching args.

        No arguments or "help" prints this command's usage. The name of a
        known subcommand prints that subcommand's usage. Anything else is
        reported as unrecognized, followed by this command's usage. Never
        raises for unknown names.

        Args:
            args: Arguments following "help" on the command line
        """
        if len(args) == 0 or args[0] == self.name:
            self.help()
            return

        command = self.find(args[0])
        if command is not None:
            lg.debug("showing subcommand help", extra={"subcommand": command.name})
            command.help()
            return

        lg.debug("unrecognized subcommand", extra={"subcommand": args[0]})
        self.output.write(f"Unrecognized subcommand: {args[0]}")
        self.help()
