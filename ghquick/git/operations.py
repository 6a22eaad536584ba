# ghquick Repository Operations
# Sequenced git commands for the quick commit-and-push workflow

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ghquick.git.errors import (
    CommandError,
    CommitError,
    DiffError,
    NoChangesError,
    PushError,
    SetupError,
    StageError,
    WorkflowAborted,
)
from ghquick.git.locks import cleanup_stale_locks
from ghquick.git.runner import CommandResult, CommandRunner, SubprocessRunner
from ghquick.logger import RepoLogger

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "main"
DEFAULT_URL_TEMPLATE = "https://github.com/{account}/{repo}.git"

# Subcommands that write to the repository
MUTATING_COMMANDS = frozenset({"init", "add", "commit", "push", "remote"})


@dataclass
class WorkflowResult:
    """Result of a full commit-and-push run."""

    diff: str
    remote: str
    branch: str


class RepoOperations:
    """
    Orchestrates git commands against one working directory.

    All settings are fixed at construction time.
    """

    def __init__(
        self,
        workdir: Path,
        *,
        account: str = "",
        user_name: str = "",
        debug: bool = False,
        url_template: str = DEFAULT_URL_TEMPLATE,
        executable: str = "git",
        timeout: Optional[float] = None,
        runner: Optional[CommandRunner] = None,
        logger: Optional[RepoLogger] = None,
    ):
        """
        Initialize operations.

        Args:
            workdir: Repository working directory.
            account: Account name used to build the remote URL.
            user_name: Committer name (defaults to account).
            debug: Enable debug output.
            url_template: Remote URL template with {account} and {repo} fields.
            executable: Git executable.
            timeout: Per-command timeout in seconds (None = no limit).
            runner: Command runner (defaults to SubprocessRunner).
            logger: Progress logger.
        """
        self.workdir = Path(workdir)
        self.account = account
        self.user_name = user_name or account
        self.debug = debug
        self.url_template = url_template
        self.executable = executable
        self.timeout = timeout
        self.runner = runner or SubprocessRunner()
        self.logger = logger or RepoLogger(debug=debug)

    def _git(self, *args: str) -> CommandResult:
        """Run a git command in the working directory."""
        if args and args[0] in MUTATING_COMMANDS and not _is_read_only(args):
            cleanup_stale_locks(self.workdir, self.logger)

        self.logger.command(self.executable, args)
        try:
            return self.runner.run(self.executable, args, cwd=self.workdir, timeout=self.timeout)
        except CommandError as e:
            if e.output:
                self.logger.debug(f"Command output: {e.output.strip()}")
            raise

    def remote_url(self, repo_name: str) -> str:
        """
        Build the remote URL for a repository name.

        Raises:
            SetupError: If the template has fields other than {account} and {repo}.
        """
        try:
            return self.url_template.format(account=self.account, repo=repo_name)
        except (KeyError, IndexError, ValueError) as e:
            raise SetupError(f"Invalid remote URL template {self.url_template!r}: {e}") from e

    def is_initialized(self) -> bool:
        """Check whether repository metadata exists."""
        return (self.workdir / ".git").exists()

    def ensure_setup(self, repo_name: str) -> None:
        """
        Make sure the repository exists, has an identity and an origin remote.

        Args:
            repo_name: Repository name used for the remote URL.

        Raises:
            SetupError: If any setup command fails.
        """
        if not self.is_initialized():
            self.logger.step("Initializing git repository...")
            try:
                self._git("init")
            except CommandError as e:
                self.logger.error("Failed to initialize git repository")
                raise SetupError.from_command("Failed to initialize git repository", e) from e
            self.logger.success("Git repository initialized")
        else:
            self.logger.info("Git repository already initialized")

        self._configure_user()

        self.logger.step("Checking remote configuration...")
        try:
            self._git("remote", "get-url", DEFAULT_REMOTE)
        except CommandError:
            self._add_origin(repo_name)
        else:
            self.logger.info("Remote origin already configured")

    def _configure_user(self) -> None:
        self.logger.step("Configuring git user...")
        if not self.user_name:
            self.logger.error("Failed to set git username")
            raise SetupError("No git user name configured")
        try:
            self._git("config", "--global", "user.name", self.user_name)
        except CommandError as e:
            self.logger.error("Failed to set git username")
            raise SetupError.from_command("Failed to set git user.name", e) from e
        self.logger.success("Git user configured")

    def _add_origin(self, repo_name: str) -> None:
        if not self.account:
            self.logger.error("Failed to add remote origin")
            raise SetupError("No account configured for remote URL")
        if not repo_name:
            self.logger.error("Failed to add remote origin")
            raise SetupError("No repository name given for remote URL")

        url = self.remote_url(repo_name)
        self.logger.step(f"Adding remote origin: {url}")
        try:
            self._git("remote", "add", DEFAULT_REMOTE, url)
        except CommandError as e:
            self.logger.error("Failed to add remote origin")
            raise SetupError.from_command("Failed to add remote origin", e) from e
        self.logger.success("Remote origin added")

    def get_changes(self) -> str:
        """
        Get the diff of pending changes.

        Staged changes win; the unstaged diff is used only when nothing is staged.

        Returns:
            Diff text, empty if nothing differs.

        Raises:
            DiffError: If the unstaged diff cannot be read.
        """
        self.logger.step("Getting changes...")
        diff = ""
        try:
            diff = self._git("diff", "--cached").stdout
        except CommandError:
            self.logger.debug("Could not read staged changes")

        if not diff:
            self.logger.debug("No staged changes, checking unstaged changes...")
            try:
                diff = self._git("diff").stdout
            except CommandError as e:
                self.logger.error("Failed to get changes")
                raise DiffError.from_command("Failed to get diff", e) from e

        if diff:
            self.logger.success("Changes detected")
        else:
            self.logger.warning("No changes detected")
        return diff

    def stage_all(self) -> str:
        """
        Stage every change in the working directory.

        Returns:
            Porcelain status of the staged changes.

        Raises:
            StageError: If staging or the status check fails.
            NoChangesError: If nothing is left to commit.
        """
        self.logger.step("Staging all changes...")
        try:
            self._git("add", "-A")
        except CommandError:
            self.logger.warning("Failed to stage with -A flag, trying alternative method...")
            try:
                self._git("add", str(self.workdir))
            except CommandError as e:
                self.logger.error("Failed to stage changes")
                raise StageError.from_command("Failed to stage files", e) from e

        try:
            status = self._git("status", "--porcelain").stdout
        except CommandError as e:
            self.logger.error("Failed to check git status")
            raise StageError.from_command("Failed to check git status", e) from e

        if not status.strip():
            self.logger.warning("No changes to stage")
            raise NoChangesError("No changes to commit")

        self.logger.success("Changes staged")
        self.logger.debug(f"Staged files:\n{status.rstrip()}")
        return status

    def commit(self, message: str) -> None:
        """
        Commit staged changes.

        Args:
            message: Commit message.

        Raises:
            CommitError: If the message is blank or git rejects the commit.
        """
        self.logger.step("Committing changes...")
        if not message or not message.strip():
            self.logger.error("Failed to commit changes")
            raise CommitError("Commit message must not be empty")
        try:
            self._git("commit", "-m", message)
        except CommandError as e:
            self.logger.error("Failed to commit changes")
            raise CommitError.from_command("Failed to commit", e) from e
        self.logger.success("Changes committed")

    def push(self, remote: str = "", branch: str = "") -> tuple[str, str]:
        """
        Push to a remote branch and set upstream tracking.

        Args:
            remote: Remote name (empty = origin).
            branch: Branch name (empty = main).

        Returns:
            Tuple of (remote, branch) actually used.

        Raises:
            PushError: If the push fails.
        """
        remote = remote or DEFAULT_REMOTE
        branch = branch or DEFAULT_BRANCH

        self.logger.step(f"Pushing to {remote}/{branch}...")
        try:
            self._git("push", "-u", remote, branch)
        except CommandError as e:
            self.logger.error("Failed to push changes")
            raise PushError.from_command("Failed to push", e) from e
        self.logger.success("Changes pushed successfully")
        return remote, branch

    def run_workflow(
        self,
        repo_name: str,
        message: str,
        *,
        remote: str = "",
        branch: str = "",
        confirm: Optional[Callable[[str], bool]] = None,
    ) -> WorkflowResult:
        """
        Set up, diff, stage, commit and push in one go.

        Args:
            repo_name: Repository name for the remote URL.
            message: Commit message.
            remote: Remote name (empty = origin).
            branch: Branch name (empty = main).
            confirm: Called with the diff text; returning False aborts before staging.

        Returns:
            WorkflowResult with the diff and push target.

        Raises:
            RepoError: Any operation error; later steps are not run.
        """
        self.ensure_setup(repo_name)
        diff = self.get_changes()

        if confirm is not None and not confirm(diff):
            raise WorkflowAborted("Aborted by user")

        self.stage_all()
        self.commit(message)
        remote, branch = self.push(remote, branch)
        return WorkflowResult(diff=diff, remote=remote, branch=branch)


def _is_read_only(args: tuple[str, ...]) -> bool:
    """Subcommand forms that only read repository state."""
    return args[:2] == ("remote", "get-url")
