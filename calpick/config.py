"""Configuration file management for calpick."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from calpick.domain.errors import ConfigError
from calpick.domain.models import CalendarDate, DateRange, DisabledEntry, RangeEntry, SingleDate


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "calpick" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "disabled": [],
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)


def _parse_day(raw: Any, index: int, key: str) -> CalendarDate:
    if not isinstance(raw, str):
        raise ConfigError(f"disabled[{index}].{key} must be a YYYY-MM-DD string")
    try:
        return CalendarDate.parse(raw)
    except ValueError as e:
        raise ConfigError(f"disabled[{index}].{key}: {e}") from e


def parse_disabled_entries(config: dict[str, Any]) -> list[DisabledEntry]:
    """Read the [[disabled]] tables of a config.

    Each table has either `date`, or `start` and `end`.

    Args:
        config: Configuration dictionary.

    Returns:
        Disabled entries in file order.

    Raises:
        ConfigError: If an entry is malformed or a range is reversed.
    """
    entries: list[DisabledEntry] = []
    for index, raw in enumerate(config.get("disabled", [])):
        if not isinstance(raw, dict):
            raise ConfigError(f"disabled[{index}] must be a table")

        if "date" in raw:
            entries.append(SingleDate(_parse_day(raw["date"], index, "date")))
        elif "start" in raw and "end" in raw:
            start = _parse_day(raw["start"], index, "start")
            end = _parse_day(raw["end"], index, "end")
            if start > end:
                raise ConfigError(f"disabled[{index}]: start {start} is after end {end}")
            entries.append(RangeEntry(DateRange(start, end)))
        else:
            raise ConfigError(f"disabled[{index}] needs either 'date' or 'start' and 'end'")
    return entries


def serialize_disabled_entries(entries: list[DisabledEntry]) -> list[dict[str, str]]:
    """Convert disabled entries to TOML tables."""
    tables: list[dict[str, str]] = []
    for entry in entries:
        if isinstance(entry, SingleDate):
            tables.append({"date": entry.date.isoformat()})
        else:
            tables.append({"start": entry.start_date.isoformat(), "end": entry.end_date.isoformat()})
    return tables


def load_disabled_entries(config_path: Path | None = None) -> list[DisabledEntry]:
    """Load disabled entries, or none if there is no config file yet."""
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return []
    return parse_disabled_entries(config)
