"""Tests for the shared coordinator channel."""

from unittest.mock import AsyncMock

import pytest

from guestbook.repository.guest_repository import InMemoryGuestRepository
from guestbook.services.guest_query_service import GuestQueryService
from guestbook.ui import events
from guestbook.ui.coordinators import (
    GuestListCoordinator,
    PanelCoordinator,
    StateCoordinator,
    TabCoordinator,
)
from guestbook.ui.viewmodels import GuestListInitial, PanelInitial, TabInitial


def _all_coordinators(callback=None):
    service = GuestQueryService(InMemoryGuestRepository())
    return [
        (GuestListCoordinator(service, on_state_update=callback), GuestListInitial, events.LoadGuestList()),
        (PanelCoordinator(on_state_update=callback, animation_duration=0), PanelInitial, events.ExpandPanel()),
        (TabCoordinator(on_state_update=callback), TabInitial, events.InitializeTabs()),
    ]


class TestUniformContract:
    """Every coordinator exposes the same event-in/state-out shape."""

    @pytest.mark.asyncio
    async def test_initial_state_and_dispatch(self) -> None:
        """Each starts in its Initial variant and emits on dispatch."""
        for coordinator, initial_type, event in _all_coordinators():
            callback = AsyncMock()
            coordinator.subscribe(callback)

            assert isinstance(coordinator, StateCoordinator)
            assert isinstance(coordinator.state, initial_type)

            await coordinator.dispatch(event)

            callback.assert_called()
            assert callback.call_args[0][0] == coordinator.state
            await coordinator.close()

    @pytest.mark.asyncio
    async def test_on_state_update_receives_every_state(self, recorder) -> None:
        """The constructor callback sees each emitted state in order."""
        for coordinator, _, event in _all_coordinators(recorder):
            recorder.clear()
            await coordinator.dispatch(event)
            assert recorder.states
            assert recorder.states[-1] == coordinator.state
            await coordinator.close()


class TestStateCoordinator:
    """Tests for subscribe/emit/close."""

    @pytest.mark.asyncio
    async def test_subscribers_notified_in_order(self) -> None:
        """Subscribers are awaited in subscription order."""
        coordinator = StateCoordinator("start")
        seen = []

        async def first(state):
            seen.append(("first", state))

        async def second(state):
            seen.append(("second", state))

        coordinator.subscribe(first)
        coordinator.subscribe(second)
        await coordinator._emit("next")

        assert seen == [("first", "next"), ("second", "next")]
        assert coordinator.state == "next"

    @pytest.mark.asyncio
    async def test_unsubscribe(self) -> None:
        """An unsubscribed callback is not called again."""
        coordinator = StateCoordinator(0)
        callback = AsyncMock()
        unsubscribe = coordinator.subscribe(callback)

        unsubscribe()
        unsubscribe()
        await coordinator._emit(1)

        callback.assert_not_called()

    @pytest.mark.asyncio
    async def test_close_is_idempotent_and_stops_emission(self) -> None:
        """After close, emits are dropped."""
        callback = AsyncMock()
        coordinator = StateCoordinator(0, on_state_update=callback)

        await coordinator.close()
        await coordinator.close()
        await coordinator._emit(1)

        assert coordinator.is_closed
        assert coordinator.state == 0
        callback.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_event_raises(self) -> None:
        """dispatch rejects events without a handler."""
        with pytest.raises(TypeError, match="does not handle"):
            await StateCoordinator(0).dispatch(object())
