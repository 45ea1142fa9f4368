"""
Shared plumbing for the state coordinators.

A coordinator owns one current state, accepts intents as async method calls
(or as event objects through ``dispatch``) and pushes every new state to its
listeners in emission order.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

StateCallback = Callable[[S], Awaitable[None]]
EventHandler = Callable[[Any], Awaitable[Any]]


class StateCoordinator(Generic[S]):
    """Base class holding the current state and its listeners."""

    def __init__(
        self,
        initial_state: S,
        on_state_update: StateCallback | None = None,
    ):
        self.on_state_update = on_state_update
        self._state: S = initial_state
        self._subscribers: list[StateCallback] = []
        self._handlers: dict[type, EventHandler] = {}
        self._closed = False

    @property
    def state(self) -> S:
        """Get current state."""
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _register(self, event_type: type, handler: EventHandler) -> None:
        self._handlers[event_type] = handler

    async def dispatch(self, event: Any) -> Any:
        """Route an event object to its handler method."""
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(
                f"{type(self).__name__} does not handle {type(event).__name__}"
            )
        return await handler(event)

    async def _emit(self, state: S) -> None:
        """Make ``state`` current and notify listeners in order."""
        if self._closed:
            logger.debug(
                "%s closed, dropping %s", type(self).__name__, type(state).__name__
            )
            return

        self._state = state
        logger.debug("%s -> %s", type(self).__name__, type(state).__name__)

        if self.on_state_update:
            await self.on_state_update(state)
        for callback in list(self._subscribers):
            await callback(state)

    async def close(self) -> None:
        """Stop emitting. Safe to call more than once."""
        self._closed = True
        self._subscribers.clear()
