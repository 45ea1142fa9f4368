"""
Intent events dispatched by views into the coordinators.

Each coordinator also exposes one async method per event; ``dispatch`` just
routes an event object to that method.
"""

from dataclasses import dataclass
from typing import Optional

from guestbook.config.constants import DEFAULT_TOP_SPENDERS_LIMIT
from guestbook.models.filters import GuestFilter, SortSpec

# =============================================================================
# Guest list
# =============================================================================


@dataclass(frozen=True)
class LoadGuestList:
    force_refresh: bool = False


@dataclass(frozen=True)
class SearchGuests:
    query: str


@dataclass(frozen=True)
class ClearSearch:
    pass


@dataclass(frozen=True)
class SelectGuest:
    guest_id: str


@dataclass(frozen=True)
class DeselectGuest:
    pass


@dataclass(frozen=True)
class FilterGuests:
    filter: GuestFilter


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class SortGuests:
    sort_spec: SortSpec


@dataclass(frozen=True)
class RefreshGuestList:
    pass


@dataclass(frozen=True)
class LoadGuestsWithUpcomingVisits:
    pass


@dataclass(frozen=True)
class LoadGuestsWithAllergies:
    pass


@dataclass(frozen=True)
class LoadTopSpendingGuests:
    limit: int = DEFAULT_TOP_SPENDERS_LIMIT


# =============================================================================
# Panel
# =============================================================================


@dataclass(frozen=True)
class InitializePanel:
    should_expand: bool


@dataclass(frozen=True)
class ExpandPanel:
    pass


@dataclass(frozen=True)
class CollapsePanel:
    pass


@dataclass(frozen=True)
class TogglePanel:
    pass


@dataclass(frozen=True)
class SetPanelState:
    is_expanded: bool
    animation_duration: Optional[float] = None


# =============================================================================
# Tabs
# =============================================================================


@dataclass(frozen=True)
class InitializeTabs:
    pass


@dataclass(frozen=True)
class SelectTab:
    index: int
