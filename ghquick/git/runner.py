# ghquick Command Runner
# External command execution behind a narrow interface

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence

from ghquick.git.errors import CommandError


@dataclass
class CommandResult:
    """Captured outcome of one external command."""

    argv: list[str]
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""

    @property
    def output(self) -> str:
        """Combined stdout and stderr."""
        return "".join(part for part in (self.stdout, self.stderr) if part)

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Anything that can run a program and capture its output."""

    def run(
        self,
        program: str,
        args: Sequence[str],
        *,
        cwd: Optional[Path] = None,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        ...


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`."""

    def run(
        self,
        program: str,
        args: Sequence[str],
        *,
        cwd: Optional[Path] = None,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        """
        Run a command to completion.

        Args:
            program: Executable name or path.
            args: Command arguments.
            cwd: Working directory.
            timeout: Seconds before the command is killed (None = no limit).

        Returns:
            CommandResult with captured output.

        Raises:
            CommandError: On non-zero exit, missing executable, or timeout.
        """
        argv = [program, *args]
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                check=False,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except FileNotFoundError:
            raise CommandError(f"{program} command not found. Is {program} installed?", returncode=127, argv=argv)
        except subprocess.TimeoutExpired as e:
            output = _decode(e.stdout) + _decode(e.stderr)
            raise CommandError(
                f"Command timed out after {timeout}s: {' '.join(argv)}",
                returncode=124,
                output=output,
                argv=argv,
            )

        result = CommandResult(
            argv=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if not result.ok:
            raise CommandError(
                f"Command failed: {' '.join(argv)}",
                returncode=result.returncode,
                output=result.output,
                argv=argv,
            )
        return result


def _decode(data: Optional[str | bytes]) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data
