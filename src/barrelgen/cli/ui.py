"""
UI components module for barrelgen.

Provides styled terminal output using the Rich library for success,
error and per-file summaries.
"""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from barrelgen.core.barrel import BarrelFile


def render_error(message: str, console: Console) -> None:
    """
    Render an error message in a visually distinct red panel.

    Args:
        message: Error message to display.
        console: Rich Console instance for output.
    """
    error_text = Text()
    error_text.append("Error: ", style="bold red")
    error_text.append(message, style="red")

    console.print(
        Panel(
            error_text,
            border_style="red",
            title="[bold red]Error on generating the file[/bold red]",
            expand=False,
        )
    )


def render_success(message: str, console: Console) -> None:
    """
    Render a success message in a green panel.

    Args:
        message: Success message to display.
        console: Rich Console instance for output.
    """
    success_text = Text(message, style="green")

    console.print(
        Panel(
            success_text,
            border_style="green",
            expand=False,
        )
    )


def render_info(message: str, console: Console) -> None:
    """Render an informational message."""
    console.print(f"[blue]Info:[/blue] {message}")


def render_written_files(files: list[BarrelFile], root: Path, console: Console) -> None:
    """
    Render a table of written barrel files.

    Args:
        files: Barrel files in write order.
        root: Directory the paths are shown relative to.
        console: Rich Console instance for output.
    """
    table = Table(
        title="Barrel Files",
        title_style="bold cyan",
        border_style="blue",
        show_header=True,
        header_style="bold white",
    )

    table.add_column("File", style="green", no_wrap=True)
    table.add_column("Exports", justify="right")

    for barrel in files:
        try:
            display = barrel.path.relative_to(root).as_posix()
        except ValueError:
            display = str(barrel.path)
        table.add_row(display, str(len(barrel.entries)))

    console.print(table)
