# ghquick Git Module
# Git command orchestration for the quick commit-and-push workflow

from ghquick.git.errors import (
    CommandError,
    CommitError,
    DiffError,
    LockCleanupError,
    NoChangesError,
    PushError,
    RepoError,
    SetupError,
    StageError,
    WorkflowAborted,
)
from ghquick.git.locks import cleanup_stale_locks, find_stale_locks
from ghquick.git.operations import RepoOperations, WorkflowResult
from ghquick.git.runner import CommandResult, CommandRunner, SubprocessRunner

__all__ = [
    # Operations
    "RepoOperations",
    "WorkflowResult",
    # Runner
    "CommandRunner",
    "CommandResult",
    "SubprocessRunner",
    # Locks
    "find_stale_locks",
    "cleanup_stale_locks",
    # Errors
    "CommandError",
    "RepoError",
    "SetupError",
    "DiffError",
    "StageError",
    "NoChangesError",
    "CommitError",
    "PushError",
    "LockCleanupError",
    "WorkflowAborted",
]
