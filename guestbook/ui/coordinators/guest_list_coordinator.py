"""
Coordinator for the guest list.

Owns the cached full guest set, the visible list and its search, filter,
sort and selection. Searches are debounced and only the most recent query
may commit results; anything older is dropped when it resolves.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Coroutine, Sequence
from datetime import datetime
from typing import Any

from guestbook.config.constants import DEFAULT_TOP_SPENDERS_LIMIT, SEARCH_DEBOUNCE_MS
from guestbook.exceptions import DataSourceError, ValidationError
from guestbook.models.filters import (
    DEFAULT_SORT,
    GuestFilter,
    GuestSortBy,
    SortOrder,
    SortSpec,
    apply_filter,
    apply_sorting,
)
from guestbook.models.guest import Guest
from guestbook.services.guest_query_service import GuestQueryService

from .. import events
from ..viewmodels.guest_list_state import (
    GuestListError,
    GuestListInitial,
    GuestListLoaded,
    GuestListLoading,
    GuestListRefreshing,
    GuestListSearching,
    GuestListState,
)
from .base import StateCallback, StateCoordinator

logger = logging.getLogger(__name__)

DATA_ERROR_MESSAGE = "Unable to load guest data. Please try again."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


def _order(guests: Sequence[Guest], sort_spec: SortSpec | None) -> list[Guest]:
    # None keeps the incoming (relevance) order
    if sort_spec is None:
        return list(guests)
    return apply_sorting(guests, sort_spec)


class GuestListCoordinator(StateCoordinator[GuestListState]):
    """
    Drives the guest list view.

    Every intent is an async method. ``search`` returns as soon as the
    debounced query is scheduled; use ``wait_for_pending`` to await it.
    """

    def __init__(
        self,
        query_service: GuestQueryService,
        on_state_update: StateCallback | None = None,
        search_debounce: float | None = None,
    ):
        super().__init__(GuestListInitial(), on_state_update)
        self.query_service = query_service
        self.search_debounce = (
            SEARCH_DEBOUNCE_MS / 1000.0 if search_debounce is None else search_debounce
        )

        self._all_guests: list[Guest] = []
        self._has_loaded = False
        self._search_results: list[Guest] = []
        # Most recent Loaded snapshot; search commits inherit its filter and selection
        self._last_loaded: GuestListLoaded | None = None
        self._search_generation = 0
        self._load_generation = 0
        self._pending: set[asyncio.Task] = set()

        self._register(events.LoadGuestList, lambda e: self.load(e.force_refresh))
        self._register(events.SearchGuests, lambda e: self.search(e.query))
        self._register(events.ClearSearch, lambda e: self.clear_search())
        self._register(events.SelectGuest, lambda e: self.select(e.guest_id))
        self._register(events.DeselectGuest, lambda e: self.deselect())
        self._register(events.FilterGuests, lambda e: self.filter(e.filter))
        self._register(events.ClearFilters, lambda e: self.clear_filter())
        self._register(events.SortGuests, lambda e: self.sort(e.sort_spec))
        self._register(events.RefreshGuestList, lambda e: self.refresh())
        self._register(
            events.LoadGuestsWithUpcomingVisits, lambda e: self.load_with_upcoming_visits()
        )
        self._register(events.LoadGuestsWithAllergies, lambda e: self.load_with_allergies())
        self._register(events.LoadTopSpendingGuests, lambda e: self.load_top_spenders(e.limit))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def all_guests(self) -> tuple[Guest, ...]:
        """The cached full guest set from the last successful load."""
        return tuple(self._all_guests)

    @property
    def selected_guest(self) -> Guest | None:
        state = self.state
        if not isinstance(state, GuestListLoaded) or state.selected_guest_id is None:
            return None
        for guest in [*state.guests, *self._all_guests]:
            if guest.id == state.selected_guest_id:
                return guest
        return None

    @property
    def has_guests(self) -> bool:
        return isinstance(self.state, GuestListLoaded) and self.state.has_guests

    @property
    def is_loading(self) -> bool:
        return isinstance(
            self.state, (GuestListLoading, GuestListSearching, GuestListRefreshing)
        )

    @property
    def has_error(self) -> bool:
        return isinstance(self.state, GuestListError)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self, force_refresh: bool = False) -> None:
        """Load the full guest set. No-op when already loaded unless forced."""
        if not force_refresh and isinstance(self.state, GuestListLoaded):
            logger.debug("Guest list already loaded, skipping load")
            return

        await self._emit(GuestListLoading())
        await self._load_all()

    async def retry(self) -> None:
        await self.load(force_refresh=True)

    async def refresh(self) -> None:
        """Reload the full guest set, keeping the visible list meanwhile."""
        state = self.state
        if isinstance(state, GuestListLoaded):
            await self._emit(GuestListRefreshing(current_guests=state.guests))
        else:
            await self._emit(
                GuestListLoading(message="Refreshing guests...", is_refreshing=True)
            )
        await self._load_all()

    async def _load_all(self) -> None:
        generation = self._start_load()

        try:
            guests = await self.query_service.get_all()
        except Exception as e:
            if generation == self._load_generation:
                await self._emit(self._error_state(e))
            return

        if generation != self._load_generation:
            logger.debug("Discarding superseded guest load")
            return

        self._all_guests = list(guests)
        self._has_loaded = True
        logger.info(f"Loaded {len(self._all_guests)} guests")

        await self._emit(
            GuestListLoaded(
                guests=tuple(self._all_guests),
                total_count=len(self._all_guests),
            )
        )

    async def load_with_upcoming_visits(self) -> None:
        await self._load_subset(
            "Loading guests with upcoming visits...",
            self.query_service.with_upcoming_visits,
            guest_filter=GuestFilter(has_upcoming_visits=True),
            sort_spec=SortSpec(GuestSortBy.UPCOMING_VISITS, SortOrder.DESCENDING),
        )

    async def load_with_allergies(self) -> None:
        await self._load_subset(
            "Loading guests with allergies...",
            self.query_service.with_allergies,
            guest_filter=GuestFilter(has_allergies=True),
            sort_spec=DEFAULT_SORT,
        )

    async def load_top_spenders(self, limit: int = DEFAULT_TOP_SPENDERS_LIMIT) -> None:
        if limit <= 0:
            raise ValidationError("Limit must be greater than 0", fields=["limit"])

        await self._load_subset(
            f"Loading top {limit} spenders...",
            lambda: self.query_service.top_spenders(limit),
            guest_filter=None,
            sort_spec=SortSpec(GuestSortBy.LIFETIME_SPEND, SortOrder.DESCENDING),
        )

    async def _load_subset(
        self,
        message: str,
        fetch: Callable[[], Awaitable[list[Guest]]],
        guest_filter: GuestFilter | None,
        sort_spec: SortSpec,
    ) -> None:
        """Show a specialised subset without replacing the cached full set.

        With nothing cached yet the full set is fetched as well, so clearing
        the subset later has a base to fall back to.
        """
        generation = self._start_load()
        await self._emit(GuestListLoading(message=message))

        all_guests = None
        try:
            if not self._has_loaded:
                all_guests = await self.query_service.get_all()
            guests = await fetch()
        except Exception as e:
            if generation == self._load_generation:
                await self._emit(self._error_state(e))
            return

        if generation != self._load_generation:
            logger.debug("Discarding superseded subset load")
            return

        if all_guests is not None:
            self._all_guests = list(all_guests)
            self._has_loaded = True

        await self._emit(
            GuestListLoaded(
                guests=tuple(guests),
                filter=guest_filter,
                sort_spec=sort_spec,
                is_filtered=True,
                total_count=len(self._all_guests),
            )
        )

    def _start_load(self) -> int:
        # A new load supersedes any earlier load and any in-flight search
        self._load_generation += 1
        self._search_generation += 1
        self._search_results = []
        self._last_loaded = None
        return self._load_generation

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, query: str) -> None:
        """
        Debounced search. Blank input clears the search immediately.

        Each call supersedes earlier ones: only the last query in a burst
        reaches the service, and results for a superseded query are dropped.
        """
        query = query.strip()
        if not query:
            await self.clear_search()
            return

        self._search_generation += 1
        self._schedule(self._debounced_search(query, self._search_generation))

    async def _debounced_search(self, query: str, generation: int) -> None:
        await asyncio.sleep(self.search_debounce)
        if generation != self._search_generation:
            return

        if self._visible_query() != query:
            await self._emit(GuestListSearching(query=query))

        try:
            results = await self.query_service.search(query)
        except Exception as e:
            if self._search_is_current(query, generation):
                await self._emit(self._error_state(e))
            else:
                logger.debug(f"Discarding failure of superseded search {query!r}")
            return

        if not self._search_is_current(query, generation):
            logger.debug(f"Discarding results of superseded search {query!r}")
            return

        self._search_results = list(results)

        previous = self._last_loaded
        guest_filter = previous.filter if previous else None
        visible = self._search_results
        if guest_filter is not None and guest_filter.is_not_empty:
            visible = apply_filter(visible, guest_filter)

        selected_id = None
        if previous and any(g.id == previous.selected_guest_id for g in visible):
            selected_id = previous.selected_guest_id

        logger.info(f"Search {query!r} matched {len(results)} guests")
        await self._emit(
            GuestListLoaded(
                guests=tuple(visible),
                selected_guest_id=selected_id,
                search_query=query,
                filter=guest_filter,
                sort_spec=None,
                is_filtered=True,
                total_count=len(self._all_guests),
            )
        )

    def _visible_query(self) -> str | None:
        state = self.state
        if isinstance(state, GuestListSearching):
            return state.query
        if isinstance(state, GuestListLoaded):
            return state.search_query
        return None

    def _search_is_current(self, query: str, generation: int) -> bool:
        if generation != self._search_generation:
            return False
        state = self.state
        if isinstance(state, GuestListSearching):
            return state.query == query
        if isinstance(state, GuestListLoaded):
            return state.search_query in (None, query)
        return False

    async def clear_search(self) -> None:
        """Drop the search and show the full cached set (filter and sort kept)."""
        self._search_generation += 1
        self._search_results = []

        state = self.state
        if not isinstance(state, GuestListLoaded):
            await self._emit(
                GuestListLoaded(
                    guests=tuple(self._all_guests),
                    total_count=len(self._all_guests),
                )
            )
            return

        sort_spec = state.sort_spec or DEFAULT_SORT
        base: Sequence[Guest] = self._all_guests
        if state.has_filter:
            base = apply_filter(base, state.filter)

        await self._emit(
            state.copy_with(
                guests=tuple(apply_sorting(base, sort_spec)),
                search_query=None,
                sort_spec=sort_spec,
                is_filtered=state.has_filter,
                total_count=len(self._all_guests),
                last_updated=datetime.now(),
            )
        )

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    async def select(self, guest_id: str) -> bool:
        """Select a visible guest. Returns False when nothing changed."""
        state = self.state
        if not isinstance(state, GuestListLoaded):
            logger.warning(f"Cannot select guest {guest_id}: list not loaded")
            return False
        if not any(g.id == guest_id for g in state.guests):
            logger.warning(f"Cannot select guest {guest_id}: not in visible list")
            return False

        await self._emit(
            state.copy_with(selected_guest_id=guest_id, last_updated=datetime.now())
        )
        return True

    async def deselect(self) -> bool:
        state = self.state
        if not isinstance(state, GuestListLoaded):
            return False
        await self._emit(
            state.copy_with(selected_guest_id=None, last_updated=datetime.now())
        )
        return True

    # ------------------------------------------------------------------
    # Filter / sort
    # ------------------------------------------------------------------

    async def filter(self, guest_filter: GuestFilter) -> None:
        """Apply ``guest_filter`` on top of the active search (or the full set)."""
        state = self.state
        if not isinstance(state, GuestListLoaded):
            logger.debug("Ignoring filter: list not loaded")
            return

        base = self._search_results if state.has_search_query else self._all_guests
        guests = _order(apply_filter(base, guest_filter), state.sort_spec)

        await self._emit(
            state.copy_with(
                guests=tuple(guests),
                filter=guest_filter,
                is_filtered=guest_filter.is_not_empty or state.has_search_query,
                last_updated=datetime.now(),
            )
        )

    async def clear_filter(self) -> None:
        """Remove the filter, re-running the active search if there is one."""
        state = self.state
        if not isinstance(state, GuestListLoaded):
            return

        if not state.has_search_query:
            guests = _order(self._all_guests, state.sort_spec)
            await self._emit(
                state.copy_with(
                    guests=tuple(guests),
                    filter=None,
                    is_filtered=False,
                    last_updated=datetime.now(),
                )
            )
            return

        query = state.search_query
        generation = self._search_generation
        try:
            results = await self.query_service.search(query)
        except Exception as e:
            if self._filter_reset_is_current(state, generation):
                await self._emit(self._error_state(e))
            return

        if not self._filter_reset_is_current(state, generation):
            logger.debug("Discarding superseded filter reset")
            return

        self._search_results = list(results)
        await self._emit(
            state.copy_with(
                guests=tuple(_order(self._search_results, state.sort_spec)),
                filter=None,
                is_filtered=True,
                last_updated=datetime.now(),
            )
        )

    def _filter_reset_is_current(
        self, started_from: GuestListState, generation: int
    ) -> bool:
        # Any state emitted after the reset started supersedes it
        return generation == self._search_generation and self.state is started_from

    async def sort(self, sort_spec: SortSpec) -> None:
        """Reorder the visible list. Membership is unchanged."""
        state = self.state
        if not isinstance(state, GuestListLoaded):
            logger.debug("Ignoring sort: list not loaded")
            return

        await self._emit(
            state.copy_with(
                guests=tuple(apply_sorting(state.guests, sort_spec)),
                sort_spec=sort_spec,
                last_updated=datetime.now(),
            )
        )

    # ------------------------------------------------------------------
    # Errors and lifecycle
    # ------------------------------------------------------------------

    async def _emit(self, state: GuestListState) -> None:
        if isinstance(state, GuestListLoaded):
            self._last_loaded = state
        await super()._emit(state)

    def _error_state(self, error: Exception) -> GuestListError:
        if isinstance(error, ValidationError):
            message, can_retry = error.message, False
        elif isinstance(error, DataSourceError):
            message, can_retry = DATA_ERROR_MESSAGE, True
        else:
            message, can_retry = UNEXPECTED_ERROR_MESSAGE, True

        logger.error(f"Guest list operation failed: {error}")
        return GuestListError(
            message=message,
            can_retry=can_retry,
            previous_guests=tuple(self._all_guests) if self._has_loaded else None,
            technical_details=str(error),
            error_code=type(error).__name__,
        )

    def _schedule(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def wait_for_pending(self) -> None:
        """Wait until every scheduled search has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def close(self) -> None:
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending.clear()
        await super().close()
