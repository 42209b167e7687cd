"""CLI entry point for calpick."""

import typer

from calpick.commands.admin import init_command
from calpick.commands.calendar import select_command, show_command
from calpick.commands.disabled import disable_command, enable_command, list_disabled_command
from calpick.log import configure_logging

app = typer.Typer(
    name="calpick",
    help="calpick - Drag-select date ranges around disabled dates",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs of each selection step"),
) -> None:
    """calpick - Drag-select date ranges around disabled dates."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize the calpick configuration."""
    init_command(force)


@app.command()
def show(
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM, default: current month)"),
) -> None:
    """Show a month grid with your disabled dates."""
    show_command(month)


@app.command()
def select(
    start: str = typer.Argument(..., help="Day the drag starts on (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="Day the drag ends on (YYYY-MM-DD)"),
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM, default: month of START)"),
) -> None:
    """Drag a selection from START to END, one day at a time."""
    select_command(start, end, month)


@app.command()
def disable(
    day: str = typer.Argument(..., help="Day to disable (YYYY-MM-DD)"),
    until: str = typer.Option(None, "--until", help="Disable an inclusive range ending on this day (YYYY-MM-DD)"),
) -> None:
    """Disable a date or a range of dates."""
    disable_command(day, until)


@app.command()
def enable(
    index: int = typer.Argument(..., help="Number of the entry, as listed by 'calpick disabled'"),
) -> None:
    """Remove a disabled date or range."""
    enable_command(index)


@app.command(name="disabled")
def list_disabled() -> None:
    """List your disabled dates and ranges."""
    list_disabled_command()


if __name__ == "__main__":
    app()
