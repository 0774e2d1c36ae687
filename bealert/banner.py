"""
Banner and UI components for the BE-Alert converter
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from core._version import __version__

# Global console instance
console = Console()


TAGLINE = "Member spreadsheet -> BE-Alert BIN import CSV"


def show_banner():
    """Display title banner"""
    panel = Panel(
        f"[bold cyan]BE-ALERT CONVERTER[/bold cyan]\n\n[dim]{TAGLINE}[/dim]\n[dim]v{__version__}[/dim]",
        border_style="cyan",
        padding=(1, 3),
    )
    console.print(panel)


def show_step(step: int, title: str, description: str = ""):
    """Show a step header"""
    console.print()
    header = f"[bold cyan]Step {step}: {title}[/bold cyan]"
    if description:
        console.print(f"{header}\n[dim]{description}[/dim]")
    else:
        console.print(header)


def show_success(message: str):
    """Show success message"""
    console.print(f"☉ [green]{message}[/green]")


def show_error(message: str):
    """Show error message"""
    console.print(f"☿ [red]{message}[/red]")


def show_warning(message: str):
    """Show warning message"""
    console.print(f"▲ [yellow]{message}[/yellow]")


def show_info(message: str):
    """Show info message"""
    console.print(f"◈ [blue]{message}[/blue]")


def show_preview_table(records: list, columns: list, limit: int = 5):
    """Display the first converted rows, restricted to the given columns"""
    table = Table(show_header=True, header_style="bold cyan")

    for column in columns:
        table.add_column(column[:20], overflow="fold")

    for record in records[:limit]:
        row = [str(record[c])[:30] for c in columns]
        table.add_row(*row)

    console.print(table)


def show_skipped_rows(diagnostics: list):
    """List every skipped row with its reason"""
    table = Table(show_header=True, header_style="bold yellow", title="Skipped rows")
    table.add_column("Row", justify="right")
    table.add_column("Problem", style="yellow")
    table.add_column("Column")
    table.add_column("Details", overflow="fold")

    for diagnostic in diagnostics:
        table.add_row(
            str(diagnostic.row_number),
            diagnostic.kind,
            diagnostic.field,
            diagnostic.message,
        )

    console.print(table)


def show_conversion_summary(result, output_path: str = ""):
    """Show end-of-run summary"""
    style = "green" if result.ok else "yellow"
    title = "Conversion Complete!" if result.ok else "Conversion Finished With Skipped Rows"
    output_line = f"Output: [cyan]{output_path}[/cyan]" if output_path else "Output: [dim](dry run, nothing written)[/dim]"

    panel = Panel(
        f"[bold {style}]{title}[/bold {style}]\n\n"
        f"Rows read: [white]{result.total_rows}[/white]\n"
        f"☉ Converted: [green]{result.converted}[/green]\n"
        f"▲ Skipped: [yellow]{result.skipped}[/yellow]\n"
        f"Blank rows ignored: [white]{result.blank_rows}[/white]\n"
        f"{output_line}",
        border_style=style,
        padding=(1, 2)
    )
    console.print(panel)


def show_config_status(status: dict):
    """Show configuration as a table"""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Section", style="cyan")
    table.add_column("Setting")
    table.add_column("Value")

    for section, values in status.items():
        for key, value in values.items():
            table.add_row(section, key, repr(value) if key == 'delimiter' else str(value))

    console.print(table)
