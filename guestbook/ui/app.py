"""
Interactive guest book.

Master panel (search box + guest table) on the left, detail panel (tab strip +
guest profile) on the right. All state lives in the coordinators; this module
only forwards user intents to them and re-renders on every emitted state.
"""

from __future__ import annotations

from typing import Optional

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Footer, Input, Static

from guestbook.config.constants import NAVIGATION_TABS, TERMINAL_CELL_PX
from guestbook.config.ui_config import (
    get_default_tab,
    get_panel_animation_duration,
    get_panel_animation_steps,
    get_repository_latency,
    get_search_debounce,
)
from guestbook.models.guest import Guest
from guestbook.repository.guest_repository import GuestRepository, InMemoryGuestRepository
from guestbook.services.guest_query_service import GuestQueryService
from guestbook.ui.coordinators import GuestListCoordinator, PanelCoordinator, TabCoordinator
from guestbook.ui.formatting import GUEST_ROW_HEADERS, guest_row, render_guest_tab
from guestbook.ui.layout import panel_width_for_screen, should_expand_by_default
from guestbook.ui.viewmodels import (
    GuestListError,
    GuestListLoaded,
    GuestListLoading,
    GuestListRefreshing,
    GuestListSearching,
    GuestListState,
    PanelState,
    TabState,
    resolve_width,
)
from guestbook.utils.logging_utils import get_logger

logger = get_logger(__name__)


class GuestBookApp(App[None]):
    """Master/detail guest book."""

    TITLE = "Guest Book"

    BINDINGS = [
        ("ctrl+b", "toggle_panel", "Panel"),
        ("ctrl+r", "refresh", "Refresh"),
        ("ctrl+t", "next_tab", "Next tab"),
        ("ctrl+y", "previous_tab", "Prev tab"),
        ("escape", "clear_search", "Clear search"),
    ]

    CSS = """
    #master-panel {
        width: 35;
        border-right: solid $primary;
    }

    #search-input {
        margin: 0 0 1 0;
    }

    #guest-table {
        height: 1fr;
    }

    #detail-panel {
        width: 1fr;
        padding: 0 1;
    }

    #tab-strip {
        height: 1;
        margin: 0 0 1 0;
    }

    #status-bar {
        height: 1;
        background: $surface;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        repository: Optional[GuestRepository] = None,
        search_debounce: Optional[float] = None,
        animation_duration: Optional[float] = None,
    ):
        super().__init__()
        repository = repository or InMemoryGuestRepository(latency=get_repository_latency())

        self.guest_list = GuestListCoordinator(
            GuestQueryService(repository),
            on_state_update=self._on_guest_list_state,
            search_debounce=(
                get_search_debounce() if search_debounce is None else search_debounce
            ),
        )
        self.panel = PanelCoordinator(
            on_state_update=self._on_panel_state,
            animation_duration=(
                get_panel_animation_duration()
                if animation_duration is None
                else animation_duration
            ),
            animation_steps=get_panel_animation_steps(),
        )
        self.tabs = TabCoordinator(
            on_state_update=self._on_tab_state, default_index=get_default_tab()
        )
        self._shown_guests: tuple[Guest, ...] = ()

    def compose(self) -> ComposeResult:
        with Horizontal():
            with Vertical(id="master-panel"):
                yield Input(placeholder="Search guests", id="search-input")
                yield DataTable(id="guest-table", cursor_type="row", zebra_stripes=True)
            with Vertical(id="detail-panel"):
                yield Static("", id="tab-strip")
                yield Static("Select a guest", id="guest-detail")
        yield Static("", id="status-bar")
        yield Footer()

    async def on_mount(self) -> None:
        table = self.query_one("#guest-table", DataTable)
        table.add_columns(*GUEST_ROW_HEADERS[:2])

        await self.tabs.initialize()

        screen_px = self.size.width * TERMINAL_CELL_PX
        self.panel.update_panel_width(panel_width_for_screen(screen_px))
        self.run_worker(
            self.panel.initialize(should_expand_by_default(screen_px)),
            group="panel",
        )
        self.run_worker(self.guest_list.load(), group="guest-list")

    async def on_unmount(self) -> None:
        await self.guest_list.close()
        await self.panel.close()
        await self.tabs.close()

    # ------------------------------------------------------------------
    # State rendering
    # ------------------------------------------------------------------

    async def _on_guest_list_state(self, state: GuestListState) -> None:
        status = self.query_one("#status-bar", Static)

        if isinstance(state, GuestListLoading):
            status.update(state.message)
        elif isinstance(state, GuestListSearching):
            status.update(f"Searching '{state.query}'...")
        elif isinstance(state, GuestListRefreshing):
            status.update("Refreshing guests...")
            self._show_guests(state.current_guests)
        elif isinstance(state, GuestListError):
            hint = " (ctrl+r to retry)" if state.can_retry else ""
            status.update(f"[red]{state.message}{hint}[/red]")
            if state.previous_guests is not None:
                self._show_guests(state.previous_guests)
        elif isinstance(state, GuestListLoaded):
            self._show_guests(state.guests)
            text = f"{state.displayed_count} of {state.total_count} guests"
            if state.has_search_query:
                text += f" matching '{state.search_query}'"
            status.update(text)

        self._render_detail()

    def _show_guests(self, guests: tuple[Guest, ...]) -> None:
        # Rebuilding resets the cursor, so only rebuild when membership/order changed
        if guests == self._shown_guests:
            return
        self._shown_guests = guests

        table = self.query_one("#guest-table", DataTable)
        table.clear()
        for guest in guests:
            guest_id, name = guest_row(guest)[:2]
            table.add_row(guest_id, name, key=guest.id)

    async def _on_panel_state(self, state: PanelState) -> None:
        master = self.query_one("#master-panel")
        cells = round(resolve_width(state, self.panel.panel_width) / TERMINAL_CELL_PX)
        master.display = cells > 0
        if cells > 0:
            master.styles.width = cells

    async def _on_tab_state(self, state: TabState) -> None:
        index = self.tabs.selected_index
        labels = [
            f"[reverse] {label} [/reverse]" if i == index else f" {label} "
            for i, label in enumerate(NAVIGATION_TABS)
        ]
        self.query_one("#tab-strip", Static).update("|".join(labels))
        self._render_detail()

    def _render_detail(self) -> None:
        detail = self.query_one("#guest-detail", Static)
        guest = self.guest_list.selected_guest
        if guest is None:
            detail.update("Select a guest")
            return
        detail.update(render_guest_tab(guest, self.tabs.selected_index or 0))

    # ------------------------------------------------------------------
    # User intents
    # ------------------------------------------------------------------

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            await self.guest_list.search(event.value)

    async def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if event.row_key is not None and event.row_key.value is not None:
            await self.guest_list.select(event.row_key.value)

    def action_toggle_panel(self) -> None:
        self.run_worker(self.panel.toggle(), group="panel")

    def action_refresh(self) -> None:
        logger.info("Refresh requested")
        self.run_worker(self.guest_list.refresh(), group="guest-list")

    async def action_next_tab(self) -> None:
        await self.tabs.cycle(1)

    async def action_previous_tab(self) -> None:
        await self.tabs.cycle(-1)

    async def action_clear_search(self) -> None:
        self.query_one("#search-input", Input).value = ""
        await self.guest_list.clear_search()
