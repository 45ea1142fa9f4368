"""CLI tests driven through typer's CliRunner."""

import json
import re
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from guestbook import __version__
from guestbook.main import app
from guestbook.repository.guest_repository import InMemoryGuestRepository

runner = CliRunner()

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(result) -> str:
    return _ANSI.sub("", result.output)


def _broken_repository() -> InMemoryGuestRepository:
    repository = InMemoryGuestRepository()
    repository.get_all = AsyncMock(side_effect=OSError("disk gone"))
    repository.count = AsyncMock(side_effect=OSError("disk gone"))
    return repository


class TestGlobalOptions:
    """Tests for the app callback and version."""

    def test_help(self) -> None:
        """No arguments prints help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "guest book" in _plain(result)

    def test_version(self) -> None:
        """version prints the package version."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"guestbook version {__version__}" in result.output

    def test_verbose_and_quiet_conflict(self) -> None:
        """--verbose and --quiet cannot be combined."""
        result = runner.invoke(app, ["--verbose", "--quiet", "version"])
        assert result.exit_code == 1
        assert "mutually exclusive" in result.output


class TestList:
    """Tests for guestbook list."""

    def test_lists_all_guests(self) -> None:
        """Every seeded guest is listed by name."""
        result = runner.invoke(app, ["list"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "Arjun Gerhold" in output
        assert "Wunderlich" in output
        assert "Showing 10 of 10 guests" in output
        assert output.index("Arjun Gerhold") < output.index("Wunderlich")

    def test_sort_descending(self) -> None:
        """--sort lifetimeSpend --desc puts the biggest spender first."""
        result = runner.invoke(app, ["list", "--sort", "lifetimeSpend", "--desc"])
        output = _plain(result)

        assert result.exit_code == 0
        assert output.index("James Chen") < output.index("Gino Yost")
        assert output.index("Gino Yost") < output.index("Lia Thomas")

    def test_allergies_filter(self) -> None:
        """--allergies narrows to the four allergy guests."""
        result = runner.invoke(app, ["list", "--allergies"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "Showing 4 of 10 guests" in output
        assert "James Chen" not in output

    def test_tag_filter(self) -> None:
        """--tag matches any of the given tags."""
        result = runner.invoke(app, ["list", "--tag", "VIP"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "Showing 3 of 10 guests" in output

    def test_no_matches(self) -> None:
        """An empty result prints a notice."""
        result = runner.invoke(app, ["list", "--tag", "Nobody"])
        assert result.exit_code == 0
        assert "No guests found" in _plain(result)

    def test_data_failure(self) -> None:
        """Repository failures exit 1 with the user-facing message."""
        with patch(
            "guestbook.commands.guests.create_repository",
            return_value=_broken_repository(),
        ):
            result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "Unable to load guest data" in _plain(result)


class TestSearch:
    """Tests for guestbook search."""

    def test_search_by_name(self) -> None:
        """A name fragment finds the guest."""
        result = runner.invoke(app, ["search", "chen"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "James Chen" in output
        assert "Showing 1 of 10 guests" in output

    def test_search_by_email(self) -> None:
        """Email fragments match too."""
        result = runner.invoke(app, ["search", "@user.com"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "Showing 3 of 10 guests" in output

    def test_blank_search_lists_everyone(self) -> None:
        """A blank query clears the search."""
        result = runner.invoke(app, ["search", "  "])
        assert result.exit_code == 0
        assert "Showing 10 of 10 guests" in _plain(result)


class TestShow:
    """Tests for guestbook show."""

    def test_show_table(self) -> None:
        """The profile table includes spend and category."""
        result = runner.invoke(app, ["show", "10"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "James Chen" in output
        assert "$2,520.00 (High Value)" in output

    def test_show_json(self) -> None:
        """--json emits the camelCase dict."""
        result = runner.invoke(app, ["show", "10", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["name"] == "James Chen"
        assert data["lifetimeSpend"] == 2520.0
        assert data["lastVisit"] == "2024-11-12T00:00:00"

    def test_unknown_guest(self) -> None:
        """Unknown ids exit 1."""
        result = runner.invoke(app, ["show", "999"])
        assert result.exit_code == 1
        assert "Guest with ID 999 not found" in _plain(result)


class TestTopAndStats:
    """Tests for guestbook top and stats."""

    def test_top(self) -> None:
        """top ranks by lifetime spend."""
        result = runner.invoke(app, ["top", "--limit", "3"])
        output = _plain(result)

        assert result.exit_code == 0
        assert output.index("James Chen") < output.index("Gino Yost")
        assert output.index("Gino Yost") < output.index("Wunderlich")
        assert "Lia Thomas" not in output

    @pytest.mark.parametrize("limit", ["0", "-2"])
    def test_top_invalid_limit(self, limit) -> None:
        """Non-positive limits exit 1."""
        result = runner.invoke(app, ["top", f"--limit={limit}"])
        assert result.exit_code == 1
        assert "Limit must be greater than 0" in _plain(result)

    def test_stats(self) -> None:
        """stats prints totals."""
        result = runner.invoke(app, ["stats"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "$8,084.90" in output
        assert "$808.49" in output

    def test_stats_failure(self) -> None:
        """A failing aggregate exits 1."""
        with patch(
            "guestbook.commands.guests.create_repository",
            return_value=_broken_repository(),
        ):
            result = runner.invoke(app, ["stats"])

        assert result.exit_code == 1
        assert "Failed to get total guest count" in _plain(result)


class TestConfigCommands:
    """Tests for guestbook config."""

    def test_show_defaults(self) -> None:
        """config show lists every key."""
        result = runner.invoke(app, ["config", "show"])
        output = _plain(result)

        assert result.exit_code == 0
        assert "search_debounce_ms" in output
        assert "panel_animation_steps" in output

    def test_set_then_show(self) -> None:
        """config set persists the value."""
        result = runner.invoke(app, ["config", "set", "search_debounce_ms", "150"])
        assert result.exit_code == 0
        assert "Set search_debounce_ms = 150" in _plain(result)

        result = runner.invoke(app, ["config", "show"])
        assert "150" in _plain(result)

    def test_set_unknown_key(self) -> None:
        """Unknown keys exit 1."""
        result = runner.invoke(app, ["config", "set", "colour", "1"])
        assert result.exit_code == 1
        assert "Unknown UI config key: colour" in _plain(result)
