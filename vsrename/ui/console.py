"""Console UI wrapper using Rich library."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Centralizes console output so report lines, warnings and errors
    share one style.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize with a Rich Console (a new one by default)."""
        self.console = console if console is not None else Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def print_line(self, markup: str) -> None:
        """
        Print one report line holding file names.

        Emoji codes are left as typed and the line is never wrapped, so
        names appear exactly as on disk.
        """
        self.console.print(markup, emoji=False, soft_wrap=True)

    def print_warning(self, message: str) -> None:
        """Print a warning message with yellow styling."""
        self.console.print(f"[yellow]⚠️  {message}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        self.console.print(f"[red]❌ {message}[/red]", emoji=False, soft_wrap=True)

    def print_panel(
        self,
        content: str,
        title: str = "",
        border_style: str = "blue"
    ) -> None:
        """
        Print content in a bordered panel.

        Args:
            content: Panel content.
            title: Panel title.
            border_style: Border color/style.
        """
        panel = Panel(content, title=title, border_style=border_style)
        self.console.print(panel)


# Global console instance
console = ConsoleUI()
