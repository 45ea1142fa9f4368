"""Tests for the Textual guest book shell."""

from unittest.mock import AsyncMock

import pytest
from textual.widgets import DataTable, Input

from guestbook.repository.guest_repository import InMemoryGuestRepository
from guestbook.ui.app import GuestBookApp
from guestbook.ui.viewmodels import GuestListError, GuestListLoaded


def _app(repository=None) -> GuestBookApp:
    return GuestBookApp(
        repository=repository or InMemoryGuestRepository(),
        search_debounce=0,
        animation_duration=0,
    )


async def _settle(app: GuestBookApp, pilot) -> None:
    await pilot.pause()
    await app.workers.wait_for_complete()
    await app.guest_list.wait_for_pending()
    await pilot.pause()


class TestMount:
    """Tests for the initial screen."""

    @pytest.mark.asyncio
    async def test_loads_guests_into_table(self) -> None:
        """All seeded guests appear in the table after mount."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert isinstance(app.guest_list.state, GuestListLoaded)
            assert app.query_one("#guest-table", DataTable).row_count == 10

    @pytest.mark.asyncio
    async def test_wide_screen_expands_panel(self) -> None:
        """120 columns is past the expand breakpoint."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert app.panel.is_expanded
            assert app.panel.panel_width == 350
            assert app.query_one("#master-panel").display is True

    @pytest.mark.asyncio
    async def test_narrow_screen_collapses_panel(self) -> None:
        """60 columns starts collapsed."""
        app = _app()
        async with app.run_test(size=(60, 30)) as pilot:
            await _settle(app, pilot)

            assert app.panel.is_collapsed
            assert app.query_one("#master-panel").display is False

    @pytest.mark.asyncio
    async def test_first_tab_selected(self) -> None:
        """Tabs start on Profile."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)
            assert app.tabs.selected_label == "Profile"

    @pytest.mark.asyncio
    async def test_load_failure_shows_error(self) -> None:
        """A failing repository leaves the list in the error state."""
        repository = InMemoryGuestRepository()
        repository.get_all = AsyncMock(side_effect=OSError("disk gone"))
        app = _app(repository)
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert isinstance(app.guest_list.state, GuestListError)
            assert app.guest_list.state.can_retry is True
            assert app.query_one("#guest-table", DataTable).row_count == 0


class TestInteraction:
    """Tests for user intents."""

    @pytest.mark.asyncio
    async def test_typing_searches(self) -> None:
        """Input changes run a search and shrink the table."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            app.query_one("#search-input", Input).value = "chen"
            await _settle(app, pilot)

            assert app.guest_list.state.search_query == "chen"
            assert app.query_one("#guest-table", DataTable).row_count == 1

    @pytest.mark.asyncio
    async def test_clear_search_action(self) -> None:
        """Escape action restores the full list."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)
            app.query_one("#search-input", Input).value = "chen"
            await _settle(app, pilot)

            await app.run_action("clear_search")
            await _settle(app, pilot)

            assert app.guest_list.state.search_query is None
            assert app.query_one("#guest-table", DataTable).row_count == 10

    @pytest.mark.asyncio
    async def test_select_guest(self) -> None:
        """Selecting through the coordinator updates the selection."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert await app.guest_list.select("10") is True
            await pilot.pause()

            assert app.guest_list.selected_guest.name == "James Chen"

    @pytest.mark.asyncio
    async def test_toggle_panel(self) -> None:
        """The toggle action collapses an expanded panel."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            await app.run_action("toggle_panel")
            await _settle(app, pilot)

            assert app.panel.is_collapsed
            assert app.query_one("#master-panel").display is False

    @pytest.mark.asyncio
    async def test_tab_cycling(self) -> None:
        """Next and previous tab wrap around."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            await app.run_action("next_tab")
            assert app.tabs.selected_label == "Reservation"

            await app.run_action("previous_tab")
            await app.run_action("previous_tab")
            assert app.tabs.selected_label == "Order History"

    @pytest.mark.asyncio
    async def test_refresh_reloads(self) -> None:
        """Refresh ends back in the loaded state."""
        app = _app()
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            await app.run_action("refresh")
            await _settle(app, pilot)

            assert isinstance(app.guest_list.state, GuestListLoaded)
            assert app.query_one("#guest-table", DataTable).row_count == 10
