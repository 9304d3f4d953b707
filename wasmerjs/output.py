"""
Output writers for commands.

Commands never call print() directly; they write through an OutputWriter so
tests can capture exactly what a user would see on the terminal.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for command output."""

    def write(self, text: str = "") -> None:
        """Write text followed by a newline."""
        ...


class ConsoleOutput:
    """
    Writes command output to a stream, stdout unless told otherwise.

    The stream is resolved on every write so that a redirected sys.stdout
    (pytest's capsys, contextlib.redirect_stdout) is honored.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stream)


class ErrorOutput(ConsoleOutput):
    """Console writer bound to stderr, for error messages."""

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr


class NullOutput:
    """Output writer that discards everything."""

    def write(self, text: str = "") -> None:
        pass


class BufferedOutput:
    """
    Output writer that keeps everything written to it.

    Example:
        out = BufferedOutput()
        out.write("USAGE:")
        assert out.text == "USAGE:\\n"
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str = "") -> None:
        self._parts.append(text + "\n")

    @property
    def text(self) -> str:
        """All output as written, newlines included."""
        return "".join(self._parts)

    @property
    def writes(self) -> int:
        """Number of write() calls so far."""
        return len(self._parts)

    def clear(self) -> None:
        self._parts.clear()
