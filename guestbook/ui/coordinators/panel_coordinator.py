"""
Coordinator for the collapsible master panel.

Every transition between Expanded and Collapsed is stepped through a run of
Animating states. Requests that arrive mid-animation are ignored.
"""

from __future__ import annotations

import asyncio
import logging

from guestbook.config.constants import (
    PANEL_ANIMATION_MS,
    PANEL_ANIMATION_STEPS,
    PANEL_WIDTH_MEDIUM,
)

from .. import events
from ..viewmodels.panel_state import (
    PanelAnimating,
    PanelCollapsed,
    PanelExpanded,
    PanelInitial,
    PanelState,
    resolve_width,
)
from .base import StateCallback, StateCoordinator

logger = logging.getLogger(__name__)


class PanelCoordinator(StateCoordinator[PanelState]):
    """Expand/collapse state machine for the master panel."""

    def __init__(
        self,
        on_state_update: StateCallback | None = None,
        panel_width: float = PANEL_WIDTH_MEDIUM,
        animation_duration: float | None = None,
        animation_steps: int = PANEL_ANIMATION_STEPS,
    ):
        super().__init__(PanelInitial(), on_state_update)
        if animation_steps < 1:
            raise ValueError("animation_steps must be at least 1")
        self._panel_width = panel_width
        self.animation_duration = (
            PANEL_ANIMATION_MS / 1000.0 if animation_duration is None else animation_duration
        )
        self.animation_steps = animation_steps

        self._register(events.InitializePanel, lambda e: self.initialize(e.should_expand))
        self._register(events.ExpandPanel, lambda e: self.expand())
        self._register(events.CollapsePanel, lambda e: self.collapse())
        self._register(events.TogglePanel, lambda e: self.toggle())
        self._register(
            events.SetPanelState,
            lambda e: self.set_state(e.is_expanded, e.animation_duration),
        )

    @property
    def panel_width(self) -> float:
        return self._panel_width

    @property
    def is_expanded(self) -> bool:
        return isinstance(self.state, PanelExpanded)

    @property
    def is_collapsed(self) -> bool:
        return isinstance(self.state, PanelCollapsed)

    @property
    def is_animating(self) -> bool:
        return isinstance(self.state, PanelAnimating)

    def update_panel_width(self, width: float) -> None:
        """Set the width used by the next Expanded state (e.g. after a resize)."""
        self._panel_width = width

    def current_width(self) -> float:
        return resolve_width(self.state, self._panel_width)

    async def initialize(self, should_expand: bool) -> None:
        if should_expand:
            await self.expand()
        else:
            await self.collapse()

    async def expand(self) -> None:
        if self.is_animating or self.is_expanded:
            return
        await self._animate(True, self.animation_duration)

    async def collapse(self) -> None:
        if self.is_animating or self.is_collapsed:
            return
        await self._animate(False, self.animation_duration)

    async def toggle(self) -> None:
        if self.is_animating:
            logger.debug("Ignoring toggle while animating")
            return
        if self.is_expanded:
            await self.collapse()
        else:
            await self.expand()

    async def set_state(
        self, is_expanded: bool, animation_duration: float | None = None
    ) -> None:
        """Move to a target state, optionally with a one-off duration."""
        if self.is_animating:
            logger.debug("Ignoring set_state while animating")
            return
        if (is_expanded and self.is_expanded) or (not is_expanded and self.is_collapsed):
            return

        duration = self.animation_duration if animation_duration is None else animation_duration
        await self._animate(is_expanded, duration)

    async def _animate(self, to_expanded: bool, duration: float) -> None:
        steps = self.animation_steps
        step_delay = duration / steps

        for i in range(steps + 1):
            await self._emit(
                PanelAnimating(to_expanded=to_expanded, progress=i / steps, duration=duration)
            )
            if i < steps:
                await asyncio.sleep(step_delay)

        if to_expanded:
            await self._emit(
                PanelExpanded(
                    width=self._panel_width, animate=True, animation_duration=duration
                )
            )
        else:
            await self._emit(PanelCollapsed(animate=True, animation_duration=duration))
