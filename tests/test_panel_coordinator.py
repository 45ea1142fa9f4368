"""Tests for the PanelCoordinator and the panel width function."""

import asyncio

import pytest

from guestbook.ui import events
from guestbook.ui.coordinators import PanelCoordinator
from guestbook.ui.viewmodels import (
    PanelAnimating,
    PanelCollapsed,
    PanelExpanded,
    PanelInitial,
    resolve_width,
)


def _progress(states, to_expanded):
    return [
        s.progress
        for s in states
        if isinstance(s, PanelAnimating) and s.to_expanded is to_expanded
    ]


@pytest.fixture
def panel(recorder):
    return PanelCoordinator(
        on_state_update=recorder, panel_width=320.0, animation_duration=0
    )


class TestResolveWidth:
    """Tests for resolve_width."""

    def test_expanded_uses_full_width(self) -> None:
        """Expanded resolves to the expanded width."""
        assert resolve_width(PanelExpanded(width=320.0), 320.0) == 320.0

    def test_collapsed_and_initial_are_zero(self) -> None:
        """Collapsed and Initial take no width."""
        assert resolve_width(PanelCollapsed(), 320.0) == 0.0
        assert resolve_width(PanelInitial(), 320.0) == 0.0

    def test_animating_interpolates(self) -> None:
        """Animating scales by progress in the direction of travel."""
        expanding = PanelAnimating(to_expanded=True, progress=0.25, duration=0.3)
        collapsing = PanelAnimating(to_expanded=False, progress=0.25, duration=0.3)

        assert resolve_width(expanding, 320.0) == 80.0
        assert resolve_width(collapsing, 320.0) == 240.0


class TestPanelAnimation:
    """Tests for expand/collapse sequences."""

    @pytest.mark.asyncio
    async def test_expand_progress_is_monotonic(self, panel, recorder) -> None:
        """Expand steps progress strictly upward from 0 to exactly 1.0."""
        await panel.collapse()
        recorder.clear()

        await panel.expand()

        progress = _progress(recorder.states, True)
        assert progress[0] == 0.0
        assert progress[-1] == 1.0
        assert all(a < b for a, b in zip(progress, progress[1:]))
        assert len(progress) == panel.animation_steps + 1
        assert recorder.states[-1] == PanelExpanded(
            width=320.0, animate=True, animation_duration=0
        )

    @pytest.mark.asyncio
    async def test_expand_when_expanded_is_noop(self, panel, recorder) -> None:
        """A second expand emits nothing."""
        await panel.expand()
        recorder.clear()

        await panel.expand()

        assert recorder.states == []

    @pytest.mark.asyncio
    async def test_collapse_ends_collapsed(self, panel, recorder) -> None:
        """Collapse animates toward collapsed and terminates."""
        await panel.expand()
        recorder.clear()

        await panel.collapse()

        assert _progress(recorder.states, False)[-1] == 1.0
        assert isinstance(panel.state, PanelCollapsed)
        assert panel.current_width() == 0.0

    @pytest.mark.asyncio
    async def test_initialize(self, panel) -> None:
        """Initialize picks the terminal state from the flag."""
        await panel.initialize(True)
        assert panel.is_expanded

        other = PanelCoordinator(animation_duration=0)
        await other.initialize(False)
        assert other.is_collapsed

    @pytest.mark.asyncio
    async def test_toggle(self, panel) -> None:
        """Toggle flips between expanded and collapsed."""
        await panel.toggle()
        assert panel.is_expanded
        await panel.toggle()
        assert panel.is_collapsed

    @pytest.mark.asyncio
    async def test_requests_ignored_while_animating(self, recorder) -> None:
        """Toggle and set_state are no-ops mid-animation."""
        panel = PanelCoordinator(
            on_state_update=recorder, animation_duration=0.05, animation_steps=5
        )
        task = asyncio.create_task(panel.expand())
        await asyncio.sleep(0.02)
        assert panel.is_animating

        await panel.toggle()
        await panel.set_state(False)
        await panel.collapse()
        await task

        assert panel.is_expanded
        assert all(
            s.to_expanded for s in recorder.states if isinstance(s, PanelAnimating)
        )

    @pytest.mark.asyncio
    async def test_set_state_duration_override(self, panel, recorder) -> None:
        """set_state uses a one-off duration when given."""
        await panel.set_state(True, animation_duration=0.0)
        assert panel.state.animation_duration == 0.0

        recorder.clear()
        await panel.set_state(True)
        assert recorder.states == []

    @pytest.mark.asyncio
    async def test_set_state_false_from_initial(self, panel) -> None:
        """From Initial, set_state(False) animates to Collapsed."""
        await panel.set_state(False)
        assert panel.is_collapsed

    @pytest.mark.asyncio
    async def test_update_panel_width(self, panel) -> None:
        """The next Expanded state uses the updated width."""
        panel.update_panel_width(380.0)
        await panel.expand()

        assert panel.state.width == 380.0
        assert panel.current_width() == 380.0

    def test_invalid_step_count(self) -> None:
        """At least one animation step is required."""
        with pytest.raises(ValueError):
            PanelCoordinator(animation_steps=0)

    @pytest.mark.asyncio
    async def test_dispatch(self, panel) -> None:
        """Panel events route to the matching methods."""
        await panel.dispatch(events.InitializePanel(should_expand=False))
        assert panel.is_collapsed
        await panel.dispatch(events.ExpandPanel())
        assert panel.is_expanded
        await panel.dispatch(events.TogglePanel())
        assert panel.is_collapsed
        await panel.dispatch(events.SetPanelState(is_expanded=True))
        assert panel.is_expanded
        await panel.dispatch(events.CollapsePanel())
        assert panel.is_collapsed
