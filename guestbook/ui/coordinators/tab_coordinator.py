"""Coordinator for the detail-view tab bar."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from guestbook.config.constants import DEFAULT_TAB_INDEX, NAVIGATION_TABS

from .. import events
from ..viewmodels.tab_state import TabInitial, TabSelected, TabState
from .base import StateCallback, StateCoordinator

logger = logging.getLogger(__name__)


class TabCoordinator(StateCoordinator[TabState]):
    def __init__(
        self,
        on_state_update: StateCallback | None = None,
        labels: Sequence[str] = NAVIGATION_TABS,
        default_index: int = DEFAULT_TAB_INDEX,
    ):
        super().__init__(TabInitial(), on_state_update)
        self.labels = tuple(labels)
        if not 0 <= default_index < len(self.labels):
            raise ValueError(f"default_index {default_index} out of range")
        self.default_index = default_index

        self._register(events.InitializeTabs, lambda e: self.initialize())
        self._register(events.SelectTab, lambda e: self.select(e.index))

    @property
    def selected_index(self) -> int | None:
        state = self.state
        return state.index if isinstance(state, TabSelected) else None

    @property
    def selected_label(self) -> str | None:
        index = self.selected_index
        return None if index is None else self.labels[index]

    async def initialize(self) -> None:
        await self._emit(TabSelected(self.default_index))

    async def select(self, index: int) -> bool:
        """Select tab ``index``. Out-of-range indices are rejected."""
        if not 0 <= index < len(self.labels):
            logger.warning(f"Tab index {index} out of range (0-{len(self.labels) - 1})")
            return False
        await self._emit(TabSelected(index))
        return True

    async def cycle(self, step: int = 1) -> None:
        """Move ``step`` tabs along, wrapping around."""
        current = self.selected_index
        start = self.default_index if current is None else current
        await self.select((start + step) % len(self.labels))
