"""
Subcommands of the wasmer-js tool.
"""

from .help import HelpCommand
from .run import RunCommand
from .version import VersionCommand

__all__ = ["HelpCommand", "RunCommand", "VersionCommand"]
