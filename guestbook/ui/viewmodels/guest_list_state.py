"""
States emitted by the GuestListCoordinator.

Exactly one variant is current at a time. Every variant is a frozen
dataclass; views switch on the type (``isinstance`` or ``match``).
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Tuple, Union

from guestbook.models.filters import DEFAULT_SORT, GuestFilter, SortSpec
from guestbook.models.guest import Guest


@dataclass(frozen=True)
class GuestListInitial:
    """Nothing requested yet."""


@dataclass(frozen=True)
class GuestListLoading:
    """A full or specialised load is in flight."""

    message: str = "Loading guests..."
    is_refreshing: bool = False


@dataclass(frozen=True)
class GuestListLoaded:
    """The visible guest list plus the search/filter/sort that produced it.

    ``sort_spec`` is None when the list is in search-relevance order.
    ``selected_guest_id`` may reference a guest filtered out of ``guests``.
    """

    guests: Tuple[Guest, ...] = ()
    selected_guest_id: Optional[str] = None
    search_query: Optional[str] = None
    filter: Optional[GuestFilter] = None
    sort_spec: Optional[SortSpec] = DEFAULT_SORT
    is_filtered: bool = False
    total_count: int = 0
    last_updated: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        object.__setattr__(self, "guests", tuple(self.guests))

    @property
    def has_guests(self) -> bool:
        return bool(self.guests)

    @property
    def has_selected_guest(self) -> bool:
        return self.selected_guest_id is not None

    @property
    def has_search_query(self) -> bool:
        return bool(self.search_query)

    @property
    def has_filter(self) -> bool:
        return self.filter is not None and self.filter.is_not_empty

    @property
    def displayed_count(self) -> int:
        return len(self.guests)

    @property
    def showing_all_guests(self) -> bool:
        return not self.has_search_query and not self.has_filter

    @property
    def selected_guest(self) -> Optional[Guest]:
        """Selected guest if it is in the visible list."""
        for guest in self.guests:
            if guest.id == self.selected_guest_id:
                return guest
        return None

    def copy_with(self, **changes: Any) -> GuestListLoaded:
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class GuestListSearching:
    """A debounced search is executing for ``query``."""

    query: str


@dataclass(frozen=True)
class GuestListRefreshing:
    """A refresh is in flight; ``current_guests`` stays on screen meanwhile."""

    current_guests: Tuple[Guest, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "current_guests", tuple(self.current_guests))


@dataclass(frozen=True)
class GuestListError:
    """An operation failed.

    ``previous_guests`` holds the last successfully loaded list (None when no
    load ever succeeded) so the view can keep showing stale data.
    """

    message: str
    can_retry: bool = True
    previous_guests: Optional[Tuple[Guest, ...]] = None
    technical_details: Optional[str] = None
    error_code: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def has_previous_data(self) -> bool:
        return bool(self.previous_guests)


GuestListState = Union[
    GuestListInitial,
    GuestListLoading,
    GuestListLoaded,
    GuestListSearching,
    GuestListRefreshing,
    GuestListError,
]
