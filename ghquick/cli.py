"""Click-based CLI for ghquick - quick commit and push."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from ghquick import __version__
from ghquick.config import (
    ACCOUNT_ENV,
    ConfigError,
    GhQuickConfig,
    get_config_path,
    load_config,
    write_default_config,
)
from ghquick.git import RepoError, RepoOperations
from ghquick.logger import RepoLogger
from ghquick.output import Console, create_console

workdir_option = click.option(
    "--dir",
    "-d",
    "workdir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Repository working directory",
)
debug_option = click.option("--debug", is_flag=True, help="Show debug output and failed command output")


@click.group()
@click.version_option(version=__version__, prog_name="ghquick")
def cli() -> None:
    """ghquick - commit and push in one command.

    \b
    Workflow:
      1. git init (if needed), set user.name, add origin
      2. show pending changes
      3. git add -A
      4. git commit -m MESSAGE
      5. git push -u REMOTE BRANCH

    The GitHub account is read from GITHUB_USERNAME or the config file.
    """
    pass


@cli.command()
@workdir_option
@click.option("--repo", "-r", "repo_name", help="Repository name for the remote URL (default: directory name)")
@click.option("--message", "-m", help="Commit message (prompted if omitted)")
@click.option("--remote", help="Remote to push to (default: origin)")
@click.option("--branch", "-b", help="Branch to push (default: main)")
@click.option("--yes", "-y", is_flag=True, help="Skip the diff preview and confirmation")
@debug_option
def push(
    workdir: Path,
    repo_name: Optional[str],
    message: Optional[str],
    remote: Optional[str],
    branch: Optional[str],
    yes: bool,
    debug: bool,
) -> None:
    """Set up the repository, then stage, commit and push all changes.

    \b
    Examples:
        ghquick push -m "Fix typo"
        ghquick push -d ~/src/demo -r demo -m "Initial commit" -y
        ghquick push --remote upstream --branch dev -m "WIP"
    """
    config_obj, console = _load(debug)
    workdir = workdir.resolve()
    repo_name = repo_name or workdir.name

    if not message:
        message = click.prompt("Commit message")

    def confirm(diff: str) -> bool:
        console.show_diff(diff)
        return console.confirm("Commit and push these changes?", default=True)

    operations = _build_operations(workdir, config_obj, console)
    try:
        result = operations.run_workflow(
            repo_name,
            message,
            remote=remote or config_obj.remote.name,
            branch=branch or config_obj.remote.branch,
            confirm=None if yes else confirm,
        )
    except RepoError as e:
        console.print_error(e.message, e.output)
        sys.exit(1)

    console.print_success(f"Pushed to {result.remote}/{result.branch}")


@cli.command("diff")
@workdir_option
@debug_option
def show_diff(workdir: Path, debug: bool) -> None:
    """Show pending changes (staged, else unstaged)."""
    config_obj, console = _load(debug)
    operations = _build_operations(workdir.resolve(), config_obj, console)
    try:
        diff = operations.get_changes()
    except RepoError as e:
        console.print_error(e.message, e.output)
        sys.exit(1)

    console.show_diff(diff)


@cli.command()
@workdir_option
@click.option("--repo", "-r", "repo_name", help="Repository name for the remote URL (default: directory name)")
@debug_option
def setup(workdir: Path, repo_name: Optional[str], debug: bool) -> None:
    """Initialize the repository, set user.name and add the origin remote."""
    config_obj, console = _load(debug)
    workdir = workdir.resolve()
    operations = _build_operations(workdir, config_obj, console)
    try:
        operations.ensure_setup(repo_name or workdir.name)
    except RepoError as e:
        console.print_error(e.message, e.output)
        sys.exit(1)

    console.print_success("Repository ready")


@cli.group()
def config() -> None:
    """Configuration file commands.

    \b
    Location: ~/.config/ghquick/config.yaml
    Override with the GHQUICK_CONFIG environment variable.
    """
    pass


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
def config_init(force: bool) -> None:
    """Write a default configuration file."""
    console = create_console()
    path, written = write_default_config(account=os.environ.get(ACCOUNT_ENV, ""), force=force)
    if written:
        console.print_success(f"Created config: {path}")
    else:
        console.print(f"[yellow]Config already exists:[/yellow] {path} [dim](use --force to overwrite)[/dim]")


@config.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    config_obj, console = _load(False)
    console.print_config(config_obj, str(get_config_path()))


@config.command("path")
def config_path() -> None:
    """Print the configuration file path."""
    click.echo(str(get_config_path()))


def _load(debug: bool) -> tuple[GhQuickConfig, Console]:
    """Load configuration and create the console, exiting on config errors."""
    try:
        config_obj = load_config()
    except ConfigError as e:
        create_console(debug=debug).print_error(str(e))
        sys.exit(1)

    console = create_console(
        debug=debug or config_obj.output.debug,
        colored=config_obj.output.colored,
    )
    return config_obj, console


def _build_operations(workdir: Path, config_obj: GhQuickConfig, console: Console) -> RepoOperations:
    """Create repository operations from configuration."""
    return RepoOperations(
        workdir,
        account=config_obj.identity.account,
        user_name=config_obj.identity.get_user_name(),
        debug=console.debug,
        url_template=config_obj.remote.url_template,
        executable=config_obj.git.executable,
        timeout=config_obj.git.timeout,
        logger=RepoLogger(console.rich, debug=console.debug),
    )


if __name__ == "__main__":
    cli()
