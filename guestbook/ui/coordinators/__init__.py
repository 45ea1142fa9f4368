"""
Coordinators: the state machines behind the guest book views.

Each one exposes its current state, accepts intents as async methods and
pushes every new state to ``on_state_update`` and any subscribers.
"""

from .base import StateCoordinator
from .guest_list_coordinator import GuestListCoordinator
from .panel_coordinator import PanelCoordinator
from .tab_coordinator import TabCoordinator

__all__ = [
    "GuestListCoordinator",
    "PanelCoordinator",
    "StateCoordinator",
    "TabCoordinator",
]
