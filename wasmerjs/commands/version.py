"""The version command."""

from __future__ import annotations

import importlib
from collections.abc import Sequence
from typing import Any

import wasmerjs

from ..command import Command
from ..output import OutputWriter

VERSION_NAME = "version"
VERSION_DESCRIPTION = "Print the version of wasmer-js"


def get_build_info() -> dict[str, Any]:
    """Get build info written into the package at install time."""
    try:
        _build_info = importlib.import_module("wasmerjs._build_info")

        return {
            "commit": getattr(_build_info, "COMMIT_SHORT", "") or None,
            "time": getattr(_build_info, "BUILD_TIME", "") or None,
            "modified": getattr(_build_info, "MODIFIED", None),
        }
    except ImportError:
        return {"commit": None, "time": None, "modified": None}


def format_version(semver: str, build: dict[str, Any]) -> str:
    """Human-readable version string, with commit and dirty marker if known."""
    commit = build.get("commit")
    if not commit:
        return f"wasmer-js {semver}"
    dirty = "*" if build.get("modified") else ""
    return f"wasmer-js {semver} ({commit}{dirty})"


class VersionCommand(Command):
    """Display the tool's version."""

    def __init__(self, output: OutputWriter | None = None) -> None:
        super().__init__(
            name=VERSION_NAME,
            description=VERSION_DESCRIPTION,
            run_callback=self.run_version,
            get_help_body=self.help_body,
            output=output,
        )

    def help_body(self) -> str:
        return "\n".join(
            (
                "USAGE:",
                "",
                "$ wasmer-js version",
                "",
                f"{self.description}.",
            )
        )

    def run_version(self, args: Sequence[str]) -> int:
        self.output.write(format_version(wasmerjs.__version__, get_build_info()))
        return 0
