"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the wasmer-js test suite.
"""

from collections.abc import Generator, Sequence
from pathlib import Path

import pytest

from wasmerjs.command import CommandDescriptor
from wasmerjs.output import BufferedOutput

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use filesystem, subprocesses)"
    )


# =============================================================================
# Test Doubles
# =============================================================================


class FakeCommand(CommandDescriptor):
    """Command double that records help() and run() calls."""

    def __init__(self, name: str, description: str, output: BufferedOutput):
        self._name = name
        self.description_text = description
        self.output = output
        self.help_calls = 0
        self.run_calls: list[list[str]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self.description_text

    def help(self) -> None:
        self.help_calls += 1
        self.output.write(f"<{self._name} help>")

    def run(self, args: Sequence[str]) -> int:
        self.run_calls.append(list(args))
        return 0


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def out() -> BufferedOutput:
    """Buffered output writer for asserting command output."""
    return BufferedOutput()


@pytest.fixture
def make_command(out: BufferedOutput):
    """Factory for extra command doubles sharing the buffered output."""

    def _make(name: str, description: str = "") -> FakeCommand:
        return FakeCommand(name, description, out)

    return _make


@pytest.fixture
def fake_run(out: BufferedOutput) -> FakeCommand:
    return FakeCommand("run", "Run a WebAssembly module with the WASI runtime", out)


@pytest.fixture
def fake_version(out: BufferedOutput) -> FakeCommand:
    return FakeCommand("version", "Print the version of wasmer-js", out)


@pytest.fixture
def clean_env(monkeypatch) -> Generator[None, None, None]:
    """Remove WASMERJS_* variables so the host environment cannot leak in."""
    import os

    for key in list(os.environ):
        if key.startswith("WASMERJS_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def wasm_module(tmp_path: Path) -> Path:
    """A minimal valid WebAssembly binary (preamble only)."""
    path = tmp_path / "hello.wasm"
    path.write_bytes(b"\x00asm\x01\x00\x00\x00")
    return path
