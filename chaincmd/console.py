"""Output sinks and console utilities for rich output."""

import io
import os
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# Global console instance
_console: Optional[Console] = None


def get_console() -> Console:
    """Get or create the global console instance."""
    global _console
    if _console is None:
        quiet = os.environ.get("CHAINCMD_QUIET", "0") == "1"
        _console = Console(quiet=quiet)
    return _console


def print_error(message: str, title: str = "Error", console: Optional[Console] = None):
    """Print an error message."""
    console = console or Console(stderr=True)
    console.print(Panel(
        f"[bold red]{escape(message)}[/bold red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red"
    ))


def create_table(title: str, columns: list[str]) -> Table:
    """Create a formatted table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col)
    return table


class Output:
    """Output sink shared by a command and every command it triggers.

    Plain lines go through :meth:`Console.out`, so they are never wrapped,
    highlighted or interpreted as markup.
    """

    def __init__(self, console: Console, error_console: Optional[Console] = None):
        self.console = console
        self.error_console = error_console or console

    def writeln(self, message: str = "") -> None:
        """Write a single line."""
        self.console.out(message, highlight=False)

    def render(self, renderable: Any) -> None:
        """Render a rich object such as a table."""
        self.console.print(renderable)

    def write_error(self, message: str, title: str = "Error") -> None:
        """Render an error panel on the error console."""
        print_error(message, title=title, console=self.error_console)


class ConsoleOutput(Output):
    """Output writing to stdout, with errors on stderr."""

    def __init__(self):
        super().__init__(get_console(), Console(stderr=True))


class BufferedOutput(Output):
    """Output collected in memory, used by tests and nested invocations."""

    def __init__(self, width: int = 120):
        self._buffer = io.StringIO()
        console = Console(
            file=self._buffer,
            force_terminal=False,
            color_system=None,
            width=width,
        )
        super().__init__(console)

    def fetch(self) -> str:
        """Return everything written so far and empty the buffer."""
        content = self._buffer.getvalue()
        self._buffer.seek(0)
        self._buffer.truncate(0)
        return content

    def getvalue(self) -> str:
        """Return everything written so far without clearing it."""
        return self._buffer.getvalue()
