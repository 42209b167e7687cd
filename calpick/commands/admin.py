"""Admin command for creating the config file."""

import sys

from rich.console import Console

from calpick.config import create_default_config, get_config_path

console = Console()


def init_command(force: bool = False) -> None:
    """Create the calpick config file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite it[/dim]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Could not write config: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Config created at: {config_path}")
