"""
ViewModels: immutable state snapshots emitted by the coordinators.

Views hold these snapshots and re-render from them; they never mutate them.
"""

from .guest_list_state import (
    GuestListError,
    GuestListInitial,
    GuestListLoaded,
    GuestListLoading,
    GuestListRefreshing,
    GuestListSearching,
    GuestListState,
)
from .panel_state import (
    PanelAnimating,
    PanelCollapsed,
    PanelExpanded,
    PanelInitial,
    PanelState,
    resolve_width,
)
from .tab_state import TabInitial, TabSelected, TabState

__all__ = [
    "GuestListError",
    "GuestListInitial",
    "GuestListLoaded",
    "GuestListLoading",
    "GuestListRefreshing",
    "GuestListSearching",
    "GuestListState",
    "PanelAnimating",
    "PanelCollapsed",
    "PanelExpanded",
    "PanelInitial",
    "PanelState",
    "TabInitial",
    "TabSelected",
    "TabState",
    "resolve_width",
]
