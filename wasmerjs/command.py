"""
Command interface and the generic command implementation.

Every subcommand of the tool is a CommandDescriptor: it has a name, a
one-line description, can print its own help and can run against the
arguments that follow its name on the command line.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from .output import ConsoleOutput, OutputWriter

RunCallback = Callable[[list[str]], int | None]
HelpBodyGenerator = Callable[[], str]


class CommandDescriptor(ABC):
    """
    Abstract base class defining the interface for subcommands.

    Lets the help command and the entry point treat every subcommand the same
    way, whatever it does when run.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Get the command name.

        Returns:
            str: Name used on the command line, unique per tool
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """
        Get the one-line description.

        Returns:
            str: Human-readable description
        """
        pass

    @abstractmethod
    def help(self) -> None:
        """Print the command's usage text."""
        pass

    @abstractmethod
    def run(self, args: Sequence[str]) -> int:
        """
        Run the command.

        Args:
            args: Arguments following the command name

        Returns:
            int: Exit code
        """
        pass


class Command(CommandDescriptor):
    """
    Command assembled from a run callback and a help-body generator.

    The help body is generated every time help() is called, so it can read
    values that change after the command is created.

    Example:
        hello = Command(
            name="hello",
            description="Say hello",
            run_callback=lambda args: print("hello"),
            get_help_body=lambda: "USAGE:\\n\\n$ wasmer-js hello",
        )
    """

    def __init__(
        self,
        name: str,
        description: str,
        run_callback: RunCallback,
        get_help_body: HelpBodyGenerator,
        output: OutputWriter | None = None,
    ) -> None:
        self._name = name
        self._description = description
        self._run_callback = run_callback
        self._get_help_body = get_help_body
        self.output: OutputWriter = output if output is not None else ConsoleOutput()

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = value

    def help(self) -> None:
        self.output.write(self._get_help_body())

    def run(self, args: Sequence[str]) -> int:
        result = self._run_callback(list(args))
        return int(result) if result is not None else 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
