"""Show and select commands for the month grid."""

import logging
import sys

from rich.console import Console
from rich.table import Table

from calpick.calendar import Calendar
from calpick.config import load_disabled_entries
from calpick.dates import WEEKDAY_HEADERS, parse_month
from calpick.domain.errors import ConfigError
from calpick.domain.models import CalendarDate, DisabledEntry
from calpick.domain.view import CellVariant, DayCell

console = Console()
logger = logging.getLogger(__name__)


def format_cell(cell: DayCell) -> str:
    """Format one day for the grid, with rich markup for its variant."""
    text = f"{cell.date.day:>2}"
    if cell.variant is CellVariant.DISABLED:
        return f"[dim strike]{text}[/dim strike]"
    if cell.variant is CellVariant.SELECTED:
        return f"[reverse green]{text}[/reverse green]"
    if not cell.in_month:
        return f"[dim]{text}[/dim]"
    return f"[bold]{text}[/bold]"


def render_month(calendar: Calendar) -> Table:
    """Build a rich table with six weeks of the calendar's month."""
    table = Table(title=calendar.label, show_lines=False)
    for header in WEEKDAY_HEADERS:
        table.add_column(header, justify="right")

    cells = calendar.cells
    for row_start in range(0, len(cells), len(WEEKDAY_HEADERS)):
        row = cells[row_start : row_start + len(WEEKDAY_HEADERS)]
        table.add_row(*(format_cell(cell) for cell in row))
    return table


def load_entries_or_exit() -> list[DisabledEntry]:
    try:
        return load_disabled_entries()
    except ConfigError as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        sys.exit(1)


def parse_day_or_exit(text: str) -> CalendarDate:
    try:
        return CalendarDate.parse(text)
    except ValueError:
        console.print(f"[red]Invalid date '{text}'. Use YYYY-MM-DD.[/red]", style="bold")
        sys.exit(1)


def parse_month_or_exit(text: str) -> CalendarDate:
    try:
        return parse_month(text)
    except ValueError:
        console.print(f"[red]Invalid month '{text}'. Use YYYY-MM.[/red]", style="bold")
        sys.exit(1)


def show_command(month: str | None = None) -> None:
    """Render a month with its disabled days."""
    target = parse_month_or_exit(month) if month else None
    calendar = Calendar(load_entries_or_exit(), month=target)
    console.print(render_month(calendar))


def select_command(start: str, end: str, month: str | None = None) -> None:
    """Drag a selection from start to end and show the result."""
    start_day = parse_day_or_exit(start)
    end_day = parse_day_or_exit(end)
    target = parse_month_or_exit(month) if month else start_day

    calendar = Calendar(
        load_entries_or_exit(),
        month=target,
        on_change=lambda change: logger.info("Selection changed: %s..%s", change.start_date, change.end_date),
    )
    selection = calendar.sweep(start_day, end_day)

    if selection.is_empty:
        console.print("[yellow]Selection rejected[/yellow] [dim](disabled date in the way)[/dim]")
    elif selection.end_date is None:
        console.print(f"[green]Selected:[/green] {selection.start_date}")
    else:
        days = (selection.end_date.to_date() - selection.start_date.to_date()).days + 1
        console.print(f"[green]Selected:[/green] {selection.start_date} → {selection.end_date} [dim]({days} days)[/dim]")

    console.print(render_month(calendar))
