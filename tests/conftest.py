"""Pytest configuration and fixtures for opener-registry tests."""

from collections.abc import Sequence
from pathlib import Path

import pytest

from opener_registry.config.paths import XdgPaths
from opener_registry.core.binder import SystemBinder
from opener_registry.core.executor import CommandResult
from opener_registry.core.options import EntryMetadata, RegistrationOptions
from opener_registry.core.registrar import ProtocolRegistrar
from opener_registry.logger import clear_logger_state


class FakeExecutor:
    """CommandExecutor that records calls instead of running tools."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.returncodes: dict[str, int] = {}
        self.stderr: dict[str, str] = {}

    def run(self, name: str, args: Sequence[str]) -> CommandResult:
        self.calls.append((name, list(args)))
        return CommandResult(
            returncode=self.returncodes.get(name, 0),
            stderr=self.stderr.get(name, ""),
        )

    def fail(self, name: str, returncode: int = 1, stderr: str = "") -> None:
        self.returncodes[name] = returncode
        self.stderr[name] = stderr


@pytest.fixture(autouse=True)
def isolate_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep log files out of the real home and reset handlers per test."""
    monkeypatch.setenv("OPENER_REGISTRY_LOG_DIR", str(tmp_path / "logs"))
    yield
    clear_logger_state()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Return an empty home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def paths(home: Path) -> XdgPaths:
    """Return the path layout rooted at the temporary home."""
    return XdgPaths(home=home)


@pytest.fixture
def executor() -> FakeExecutor:
    """Return a recording executor where every tool succeeds."""
    return FakeExecutor()


@pytest.fixture
def binder(executor: FakeExecutor) -> SystemBinder:
    """Return a binder using the fake executor."""
    return SystemBinder(executor)


@pytest.fixture
def registrar(paths: XdgPaths, binder: SystemBinder) -> ProtocolRegistrar:
    """Return a registrar wired to the temporary home and fake tools."""
    return ProtocolRegistrar(paths, binder)


@pytest.fixture
def options() -> RegistrationOptions:
    """Return options registering one protocol."""
    return RegistrationOptions(
        exec="run %u",
        protocols=("custom.scheme",),
        metadata=EntryMetadata(name="App"),
    )


@pytest.fixture
def write_mimeapps(paths: XdgPaths):
    """Return a helper writing mimeapps.list under the temporary home."""

    def _write(content: str) -> Path:
        mimeapps = paths.mimeapps_list
        mimeapps.parent.mkdir(parents=True, exist_ok=True)
        mimeapps.write_text(content, encoding="utf-8")
        return mimeapps

    return _write
