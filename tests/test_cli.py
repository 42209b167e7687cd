"""Tests for the calpick command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from calpick.cli import app
from calpick.config import load_disabled_entries
from calpick.domain.models import CalendarDate, DateRange, RangeEntry, SingleDate

runner = CliRunner()


@pytest.fixture
def config_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("CALPICK_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def initialized(config_home: Path) -> Path:
    """Config home with a fresh config file."""
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    return config_home / "calpick" / "config.toml"


class TestInit:
    """Tests for the init command."""

    def test_creates_config(self, config_home: Path) -> None:
        """Should create the config file."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert (config_home / "calpick" / "config.toml").exists()

    def test_refuses_to_overwrite(self, initialized: Path) -> None:
        """Should exit with an error when the config exists."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_force_overwrites(self, initialized: Path) -> None:
        """Should overwrite with --force."""
        runner.invoke(app, ["disable", "2024-03-12"])

        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0
        assert load_disabled_entries(initialized) == []


class TestDisabledCommands:
    """Tests for disable, enable and disabled."""

    def test_disable_single_date(self, initialized: Path) -> None:
        """Should store a single disabled date."""
        result = runner.invoke(app, ["disable", "2024-03-12"])

        assert result.exit_code == 0
        assert load_disabled_entries(initialized) == [SingleDate(CalendarDate(2024, 3, 12))]

    def test_disable_range(self, initialized: Path) -> None:
        """Should store a disabled range with --until."""
        result = runner.invoke(app, ["disable", "2024-03-20", "--until", "2024-03-22"])

        assert result.exit_code == 0
        assert load_disabled_entries(initialized) == [
            RangeEntry(DateRange(CalendarDate(2024, 3, 20), CalendarDate(2024, 3, 22)))
        ]

    def test_disable_reversed_range_fails(self, initialized: Path) -> None:
        """Should reject a range that ends before it starts."""
        result = runner.invoke(app, ["disable", "2024-03-22", "--until", "2024-03-20"])

        assert result.exit_code == 1
        assert load_disabled_entries(initialized) == []

    def test_disable_twice_keeps_one_entry(self, initialized: Path) -> None:
        """Should not duplicate an existing entry."""
        runner.invoke(app, ["disable", "2024-03-12"])
        result = runner.invoke(app, ["disable", "2024-03-12"])

        assert result.exit_code == 0
        assert "already disabled" in result.output
        assert len(load_disabled_entries(initialized)) == 1

    def test_disable_without_config_fails(self, config_home: Path) -> None:
        """Should ask for init when there is no config."""
        result = runner.invoke(app, ["disable", "2024-03-12"])

        assert result.exit_code == 1
        assert "calpick init" in result.output

    def test_disable_invalid_date_fails(self, initialized: Path) -> None:
        """Should reject a malformed date."""
        result = runner.invoke(app, ["disable", "not-a-date"])

        assert result.exit_code == 1
        assert "Invalid date" in result.output

    def test_list_and_enable(self, initialized: Path) -> None:
        """Should list entries and remove one by number."""
        runner.invoke(app, ["disable", "2024-03-12"])
        runner.invoke(app, ["disable", "2024-03-20", "--until", "2024-03-22"])

        listing = runner.invoke(app, ["disabled"])
        assert listing.exit_code == 0
        assert "2024-03-12" in listing.output
        assert "2024-03-20" in listing.output

        result = runner.invoke(app, ["enable", "1"])
        assert result.exit_code == 0
        assert load_disabled_entries(initialized) == [
            RangeEntry(DateRange(CalendarDate(2024, 3, 20), CalendarDate(2024, 3, 22)))
        ]

    def test_enable_unknown_index_fails(self, initialized: Path) -> None:
        """Should exit with an error for an index out of range."""
        result = runner.invoke(app, ["enable", "3"])

        assert result.exit_code == 1

    def test_list_empty(self, initialized: Path) -> None:
        """Should say there are no disabled dates."""
        result = runner.invoke(app, ["disabled"])

        assert result.exit_code == 0
        assert "No disabled dates" in result.output


class TestCalendarCommands:
    """Tests for show and select."""

    def test_show_month(self, config_home: Path) -> None:
        """Should render the requested month."""
        result = runner.invoke(app, ["show", "--month", "2024-03"])

        assert result.exit_code == 0
        assert "March 2024" in result.output
        assert "Mon" in result.output

    def test_show_invalid_month_fails(self, config_home: Path) -> None:
        """Should reject a malformed month."""
        result = runner.invoke(app, ["show", "--month", "2024-13"])

        assert result.exit_code == 1
        assert "Invalid month" in result.output

    def test_select_range(self, config_home: Path) -> None:
        """Should print the selected range."""
        result = runner.invoke(app, ["select", "2024-03-10", "2024-03-15"])

        assert result.exit_code == 0
        assert "Selected:" in result.output
        assert "2024-03-10" in result.output
        assert "2024-03-15" in result.output
        assert "6 days" in result.output

    def test_select_backward_range(self, config_home: Path) -> None:
        """Should normalize a backward drag."""
        result = runner.invoke(app, ["select", "2024-03-15", "2024-03-10"])

        assert result.exit_code == 0
        assert "2024-03-10 → 2024-03-15" in result.output

    def test_select_across_disabled_date_is_rejected(self, initialized: Path) -> None:
        """Should report a rejected gesture."""
        runner.invoke(app, ["disable", "2024-03-12"])

        result = runner.invoke(app, ["select", "2024-03-10", "2024-03-15"])

        assert result.exit_code == 0
        assert "Selection rejected" in result.output

    def test_verbose_flag(self, config_home: Path) -> None:
        """Should accept --verbose before a command."""
        result = runner.invoke(app, ["--verbose", "select", "2024-03-10", "2024-03-11"])

        assert result.exit_code == 0
        assert "Selected:" in result.output
