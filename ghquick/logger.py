"""Rich console progress output for repository operations."""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape


class RepoLogger:
    """Rich console output for git workflow steps."""

    def __init__(self, console: Optional[Console] = None, debug: bool = False):
        """Initialize logger.

        Args:
            console: Rich Console instance
            debug: Show debug messages
        """
        self.console = console or Console()
        self.debug_enabled = debug

    def step(self, message: str) -> None:
        """Cyan step marker."""
        self.console.print(f"[cyan]→[/cyan] {escape(message)}")

    def info(self, message: str) -> None:
        """Blue info message."""
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        """Green success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        """Yellow warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Red error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def command(self, program: str, args: Sequence[str]) -> None:
        """Echo the literal command being run."""
        line = " ".join([program, *(_quote(a) for a in args)])
        self.console.print(f"[dim]$ {escape(line)}[/dim]")

    def debug(self, message: str) -> None:
        """Dim debug message, shown only in debug mode."""
        if self.debug_enabled:
            self.console.print(f"[dim]… {escape(message)}[/dim]")


def _quote(arg: str) -> str:
    if not arg or any(c.isspace() for c in arg):
        return f'"{arg}"'
    return arg
