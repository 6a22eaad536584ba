# ghquick Test Fixtures
# Pytest fixtures for ghquick tests

import tempfile
from collections.abc import Callable, Generator
from io import StringIO
from pathlib import Path
from typing import Optional, Sequence

import pytest
from rich.console import Console as RichConsole

from ghquick.git.errors import CommandError
from ghquick.git.operations import RepoOperations
from ghquick.git.runner import CommandResult
from ghquick.logger import RepoLogger


class FakeRunner:
    """Command runner that records invocations and replays scripted results."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.timeouts: list[Optional[float]] = []
        self.cwds: list[Optional[Path]] = []
        self._responses: dict[tuple[str, ...], CommandResult | CommandError] = {}
        self._effects: dict[tuple[str, ...], Callable[[], None]] = {}

    def ok(self, *args: str, stdout: str = "") -> None:
        """Script a successful result."""
        self._responses[args] = CommandResult(argv=["git", *args], stdout=stdout)

    def fail(self, *args: str, output: str = "", returncode: int = 1) -> None:
        """Script a failure."""
        self._responses[args] = CommandError(
            f"Command failed: git {' '.join(args)}",
            returncode=returncode,
            output=output,
            argv=["git", *args],
        )

    def effect(self, *args: str, action: Callable[[], None]) -> None:
        """Run a side effect whenever the command is invoked."""
        self._effects[args] = action

    def run(
        self,
        program: str,
        args: Sequence[str],
        *,
        cwd: Optional[Path] = None,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        key = tuple(args)
        self.calls.append(key)
        self.cwds.append(cwd)
        self.timeouts.append(timeout)

        if key in self._effects:
            self._effects[key]()

        response = self._responses.get(key)
        if isinstance(response, CommandError):
            raise response
        if response is None:
            return CommandResult(argv=[program, *key])
        return response


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GHQUICK_CONFIG", raising=False)
    monkeypatch.delenv("GITHUB_USERNAME", raising=False)
    return home


@pytest.fixture
def work_dir(temp_dir: Path) -> Path:
    """Create an empty project directory."""
    path = temp_dir / "demo"
    path.mkdir()
    return path


@pytest.fixture
def git_dir(work_dir: Path) -> Path:
    """Create repository metadata in the project directory."""
    path = work_dir / ".git"
    path.mkdir()
    return path


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create a fake command runner."""
    return FakeRunner()


@pytest.fixture
def log_console() -> RichConsole:
    """Rich console writing to a buffer."""
    return RichConsole(file=StringIO(), no_color=True, width=200)


@pytest.fixture
def operations(work_dir: Path, fake_runner: FakeRunner, log_console: RichConsole) -> RepoOperations:
    """Repository operations wired to the fake runner."""
    return RepoOperations(
        work_dir,
        account="octocat",
        debug=True,
        runner=fake_runner,
        logger=RepoLogger(log_console, debug=True),
    )


@pytest.fixture
def log_output(log_console: RichConsole) -> Callable[[], str]:
    """Return a reader for everything logged so far."""

    def read() -> str:
        log_console.file.seek(0)
        return log_console.file.read()

    return read
