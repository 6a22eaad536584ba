# ghquick Console Output
# Rich-based console output for user-friendly display

from typing import Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ghquick.config.schema import GhQuickConfig

# Diffs longer than this are truncated in the preview
MAX_DIFF_LINES = 400


class Console:
    """
    Console output manager using Rich.

    Normal output goes to stdout, errors go to stderr.
    """

    def __init__(self, *, debug: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            debug: Enable debug output.
            colored: Enable colored output.
        """
        self.debug = debug
        self._console = RichConsole(no_color=not colored)
        self._err_console = RichConsole(stderr=True, no_color=not colored)

    @property
    def rich(self) -> RichConsole:
        """Underlying stdout console."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str, output: str = "") -> None:
        """Print a single-line error to stderr, plus command output in debug mode."""
        self._err_console.print(f"[red]Error:[/red] {escape(message)}")
        if self.debug and output.strip():
            self._err_console.print(f"[dim]{escape(output.rstrip())}[/dim]")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def show_diff(self, diff: str, *, max_lines: int = MAX_DIFF_LINES) -> None:
        """
        Display diff text with syntax highlighting.

        Args:
            diff: Unified diff text.
            max_lines: Lines shown before truncating.
        """
        if not diff:
            self._console.print("[dim]No changes[/dim]")
            return

        lines = diff.splitlines()
        shown = "\n".join(lines[:max_lines])
        self._console.print(
            Panel(
                Syntax(shown, "diff", theme="ansi_dark", word_wrap=True),
                title="Pending Changes",
                border_style="blue",
            )
        )
        if len(lines) > max_lines:
            self._console.print(f"[dim]... {len(lines) - max_lines} more lines not shown[/dim]")

    def confirm(self, message: str, default: bool = False) -> bool:
        """
        Ask for confirmation.

        Args:
            message: Confirmation message.
            default: Default value if user just presses enter.

        Returns:
            True if confirmed.
        """
        suffix = " [Y/n]" if default else " [y/N]"
        response = self._console.input(escape(f"{message}{suffix}: ")).strip().lower()

        if not response:
            return default

        return response in ("y", "yes")

    def print_config(self, config: GhQuickConfig, config_path: str) -> None:
        """Print effective configuration as a table."""
        table = Table(title=f"ghquick Configuration ({config_path})", show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        for section, values in config.model_dump(mode="json").items():
            for key, value in values.items():
                shown = "[dim]unset[/dim]" if value in ("", None) else escape(str(value))
                table.add_row(f"{section}.{key}", shown)

        self._console.print(table)


def create_console(*, debug: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        debug: Enable debug output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(debug=debug, colored=colored)
