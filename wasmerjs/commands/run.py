"""
The run command: runs a WebAssembly module.

The module is checked locally, then handed to an external WebAssembly
runtime (``wasmer`` unless configured otherwise) as::

    <binary> run [runtime args...] <FILE> -- [ARGS...]
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..command import Command
from ..config import Settings
from ..exceptions import ModuleError
from ..log import get_logger
from ..output import ErrorOutput, OutputWriter

RUN_NAME = "run"
RUN_DESCRIPTION = "Run a WebAssembly module with the WASI runtime"

# "\0asm" followed by binary format version 1 (little-endian u32)
WASM_MAGIC = b"\x00asm"
WASM_VERSION = b"\x01\x00\x00\x00"
WASM_PREAMBLE_SIZE = len(WASM_MAGIC) + len(WASM_VERSION)

EXIT_USAGE = 1
EXIT_RUNTIME_NOT_FOUND = 127

lg = get_logger(RUN_NAME)


def check_module(path: str | Path) -> Path:
    """
    Check that path is a readable WebAssembly binary.

    Args:
        path: Path of the module file

    Returns:
        Path: The resolved module path

    Raises:
        ModuleError: If the file is missing or lacks the wasm preamble
    """
    module = Path(path).expanduser()
    if not module.is_file():
        raise ModuleError("module file not found", path=str(module))

    try:
        with module.open("rb") as fh:
            preamble = fh.read(WASM_PREAMBLE_SIZE)
    except OSError as e:
        raise ModuleError(f"cannot read module: {e}", path=str(module)) from e

    if preamble[: len(WASM_MAGIC)] != WASM_MAGIC:
        raise ModuleError("not a WebAssembly binary", path=str(module))
    if preamble[len(WASM_MAGIC) :] != WASM_VERSION:
        raise ModuleError(
            "unsupported WebAssembly binary version",
            path=str(module),
            version=preamble[len(WASM_MAGIC) :].hex() or "missing",
        )
    return module.resolve()


def _runtime_args(settings: Settings) -> list[str]:
    value = settings.get("runtime.args")
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


class RunCommand(Command):
    """Check a module and run it through the configured runtime."""

    def __init__(
        self,
        settings: Settings | None = None,
        output: OutputWriter | None = None,
        errors: OutputWriter | None = None,
    ) -> None:
        super().__init__(
            name=RUN_NAME,
            description=RUN_DESCRIPTION,
            run_callback=self.run_module,
            get_help_body=self.help_body,
            output=output,
        )
        self.settings = settings if settings is not None else Settings()
        self.errors: OutputWriter = errors if errors is not None else ErrorOutput()

    def help_body(self) -> str:
        return "\n".join(
            (
                "USAGE:",
                "",
                "$ wasmer-js run [FILE] [ARGS...]",
                "",
                "ARGUMENTS:",
                "",
                "[FILE] - The path to the WebAssembly module (.wasm) to run",
                "[ARGS...] - Arguments passed to the module's WASI command line",
            )
        )

    def build_command(self, module: Path, args: Sequence[str]) -> list[str]:
        binary = str(self.settings.get("runtime.binary") or "wasmer")
        return [binary, "run", *_runtime_args(self.settings), str(module), "--", *args]

    def run_module(self, args: Sequence[str]) -> int:
        """
        Run the module named by args[0] with the remaining args.

        Returns:
            int: The runtime's exit code, 1 when no module is given, or 127
            when the runtime binary cannot be found

        Raises:
            ModuleError: If the module file is missing or not a wasm binary
        """
        if len(args) == 0:
            self.errors.write("error: no WebAssembly module given")
            self.help()
            return EXIT_USAGE

        module = check_module(args[0])
        cmd = self.build_command(module, args[1:])
        if shutil.which(cmd[0]) is None:
            self.errors.write(f"error: WebAssembly runtime not found: {cmd[0]}")
            return EXIT_RUNTIME_NOT_FOUND

        lg.debug("starting runtime", extra={"path": str(module), "runtime": cmd[0]})
        completed = subprocess.run(cmd, check=False)
        lg.debug("runtime exited", extra={"returncode": completed.returncode})
        return completed.returncode
