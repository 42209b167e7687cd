"""Commands for managing disabled dates in the config file."""

import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from calpick.commands.calendar import parse_day_or_exit
from calpick.config import get_config_path, load_config, parse_disabled_entries, save_config, serialize_disabled_entries
from calpick.domain.errors import ConfigError
from calpick.domain.models import DateRange, DisabledEntry, RangeEntry, SingleDate

console = Console()


def load_config_or_exit(config_path: Path) -> tuple[dict[str, Any], list[DisabledEntry]]:
    """Load config and its disabled entries, exiting with a message on failure."""
    try:
        config = load_config(config_path)
        return config, parse_disabled_entries(config)
    except FileNotFoundError:
        console.print("[red]Config not found. Run 'calpick init' first.[/red]", style="bold")
        sys.exit(1)
    except ConfigError as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        sys.exit(1)


def describe_entry(entry: DisabledEntry) -> str:
    if isinstance(entry, SingleDate):
        return str(entry.date)
    return str(entry.range)


def disable_command(day: str, until: str | None = None) -> None:
    """Add a disabled date, or an inclusive range when until is given."""
    config_path = get_config_path()
    config, entries = load_config_or_exit(config_path)

    start = parse_day_or_exit(day)
    entry: DisabledEntry
    if until:
        end = parse_day_or_exit(until)
        if end < start:
            console.print(f"[red]Range end {end} is before start {start}[/red]", style="bold")
            sys.exit(1)
        entry = RangeEntry(DateRange(start, end))
    else:
        entry = SingleDate(start)

    if entry in entries:
        console.print(f"[yellow]{describe_entry(entry)} is already disabled[/yellow]")
        return

    entries.append(entry)
    config["disabled"] = serialize_disabled_entries(entries)
    save_config(config, config_path)
    console.print(f"[green]✓[/green] Disabled {describe_entry(entry)}")


def enable_command(index: int) -> None:
    """Remove the disabled entry at a 1-based index."""
    config_path = get_config_path()
    config, entries = load_config_or_exit(config_path)

    if not 1 <= index <= len(entries):
        console.print(f"[red]No disabled entry #{index}[/red]", style="bold")
        sys.exit(1)

    entry = entries.pop(index - 1)
    config["disabled"] = serialize_disabled_entries(entries)
    save_config(config, config_path)
    console.print(f"[green]✓[/green] Enabled {describe_entry(entry)}")


def list_disabled_command() -> None:
    """List disabled entries."""
    _, entries = load_config_or_exit(get_config_path())

    if not entries:
        console.print("[dim]No disabled dates[/dim]")
        return

    table = Table(title="Disabled Dates")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Dates")

    for idx, entry in enumerate(entries, 1):
        kind = "date" if isinstance(entry, SingleDate) else "range"
        table.add_row(str(idx), kind, describe_entry(entry))

    console.print(table)
