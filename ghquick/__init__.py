"""ghquick - quick commit and push.

Initializes a repository if needed, links it to a GitHub remote,
then stages, commits and pushes all changes in one command.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "RepoOperations",
    "WorkflowResult",
    "RepoError",
    "GhQuickConfig",
    "load_config",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("RepoOperations", "WorkflowResult", "RepoError"):
        from ghquick import git

        return getattr(git, name)
    if name in ("GhQuickConfig", "load_config"):
        from ghquick import config

        return getattr(config, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
