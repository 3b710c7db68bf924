"""Rich console output helpers for the CLI.

Drawing output (SVG, JSON) is written to stdout by the app itself; the
helpers here print human-readable tables and messages. Errors go to stderr
so they never end up inside a redirected SVG file.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from roughsketch.domain import Drawable
from roughsketch.utils import GenerationStats

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]roughsketch[/bold] v{version}")
    console.print("─" * 44)


def print_fill_styles(styles: list[tuple[str, str]]) -> None:
    """Print the available fill styles.

    Args:
        styles: (name, description) pairs in display order
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Style", style="cyan", no_wrap=True)
    table.add_column("Pattern")
    for name, description in styles:
        table.add_row(name, description)
    console.print(table)


def print_summary(drawable: Drawable, stats: GenerationStats) -> None:
    """Print a per-set breakdown of a drawable.

    Args:
        drawable: Generated drawable
        stats: Statistics collected while generating it
    """
    console.print(f"\n{SYM_STEP} [bold]{drawable.shape}[/bold]")

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Ops", justify="right")
    for index, op_set in enumerate(drawable.sets):
        table.add_row(str(index), op_set.type.value, str(len(op_set)))
    console.print(table)

    line = Text("  ")
    line.append(f"{len(drawable.sets)} sets {SYM_DOT} {drawable.op_count} ops ")
    line.append(f"{SYM_DOT} seed {drawable.options.seed}")
    console.print(line)

    if stats.degenerate:
        console.print(f"  [yellow]{stats.degenerate} degenerate shape(s)[/yellow]")
    else:
        console.print(f"  [green]{SYM_OK} geometry ok[/green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")
