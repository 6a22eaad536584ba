# ghquick Git Errors
# Exception types for command execution and repository operations

from typing import Optional


class CommandError(Exception):
    """Exception raised when an external command fails."""

    def __init__(
        self,
        message: str,
        returncode: int = 1,
        output: str = "",
        argv: Optional[list[str]] = None,
    ):
        self.message = message
        self.returncode = returncode
        self.output = output
        self.argv = argv or []
        super().__init__(message)


class RepoError(Exception):
    """Base class for repository operation errors."""

    def __init__(self, message: str, output: str = ""):
        self.message = message
        self.output = output
        super().__init__(message)

    @classmethod
    def from_command(cls, message: str, error: CommandError) -> "RepoError":
        """Build an operation error carrying a failed command's output."""
        detail = error.output.strip()
        text = f"{message}: {detail.splitlines()[-1]}" if detail else f"{message}: {error.message}"
        return cls(text, output=error.output)


class SetupError(RepoError):
    """Repository initialization, identity or remote configuration failed."""


class DiffError(RepoError):
    """Pending changes could not be read."""


class StageError(RepoError):
    """Changes could not be staged or verified."""


class NoChangesError(RepoError):
    """Nothing to commit after staging."""


class CommitError(RepoError):
    """Commit failed."""


class PushError(RepoError):
    """Push to the remote failed."""


class LockCleanupError(RepoError):
    """A stale lock file could not be removed."""


class WorkflowAborted(RepoError):
    """The user declined to continue."""
