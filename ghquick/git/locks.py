# ghquick Stale Lock Cleanup
# Removal of lock files left behind by interrupted git processes

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ghquick.git.errors import LockCleanupError

if TYPE_CHECKING:
    from ghquick.logger import RepoLogger

LOCK_FILES = ("index.lock", "HEAD.lock")


def find_stale_locks(workdir: Path) -> list[Path]:
    """
    List lock marker files present in a repository.

    Args:
        workdir: Repository working directory.

    Returns:
        Existing lock file paths.
    """
    git_dir = workdir / ".git"
    return [git_dir / name for name in LOCK_FILES if (git_dir / name).exists()]


def cleanup_stale_locks(workdir: Path, logger: Optional["RepoLogger"] = None) -> list[Path]:
    """
    Remove lock files left by a previous interrupted run.

    Assumes no other git process is working on the repository.

    Args:
        workdir: Repository working directory.
        logger: Optional progress logger.

    Returns:
        Paths that were removed.

    Raises:
        LockCleanupError: If a lock file cannot be removed.
    """
    removed: list[Path] = []
    for lock_file in find_stale_locks(workdir):
        if logger:
            logger.warning(f"Found stale lock file: {lock_file}")
        try:
            lock_file.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            if logger:
                logger.error(f"Failed to remove lock file: {lock_file}")
            raise LockCleanupError(f"Failed to remove lock file {lock_file}: {e}") from e
        if logger:
            logger.success(f"Removed stale lock file: {lock_file}")
        removed.append(lock_file)
    return removed
