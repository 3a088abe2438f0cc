"""Rich console used by the catalog driver and display functions."""

from typing import Iterable, List, Optional

from rich.console import Console
from rich.table import Table


class ConsoleUI:
    """
    Thin layer over a Rich Console.

    The driver reports problems through print_warning and print_error;
    trees and tables from ui.display go through print and print_table.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def print(self, *args, **kwargs) -> None:
        self.console.print(*args, **kwargs)

    def rule(self, title: str = "", **kwargs) -> None:
        self.console.rule(title, **kwargs)

    def print_warning(self, message: str) -> None:
        """Print a message in yellow, e.g. for a query missing from the catalog."""
        self.console.print(f"[yellow]⚠️  {message}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print a message in red, e.g. for an unusable collection root."""
        self.console.print(f"[red]❌ {message}[/red]")

    def create_table(
        self,
        title: str,
        columns: Optional[List[str]] = None,
        numeric: Iterable[str] = ()
    ) -> Table:
        """
        Create a Rich Table with a header row.

        Args:
            title: Table title.
            columns: Column headers, in order.
            numeric: Headers of columns holding counts; these are right-aligned.

        Returns:
            Rich Table instance.
        """
        right_aligned = set(numeric)
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for header in columns or []:
            table.add_column(header, justify="right" if header in right_aligned else "left")
        return table

    def print_table(self, table: Table) -> None:
        self.console.print(table)


console = ConsoleUI()
