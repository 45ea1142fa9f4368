"""Shared pytest fixtures for guestbook tests."""

import asyncio
import logging
import os
import tempfile

# Set before guestbook is imported: constants read these at import time
os.environ["GUESTBOOK_CONFIG_DIR"] = tempfile.mkdtemp(prefix="guestbook-tests-")
os.environ["COLUMNS"] = "200"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from guestbook.config import constants  # noqa: E402
from guestbook.repository.guest_repository import InMemoryGuestRepository  # noqa: E402
from guestbook.services.guest_query_service import GuestQueryService  # noqa: E402
from guestbook.ui.coordinators import GuestListCoordinator  # noqa: E402


class StateRecorder:
    """Async state callback that keeps every state it receives."""

    def __init__(self):
        self.states = []

    async def __call__(self, state) -> None:
        self.states.append(state)

    def of_type(self, state_type):
        return [s for s in self.states if isinstance(s, state_type)]

    def clear(self) -> None:
        self.states.clear()


class GatedGuestRepository(InMemoryGuestRepository):
    """In-memory repository whose searches can be held open by the test.

    ``search_calls`` records every query that reached the repository.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.search_calls: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}
        self.started: dict[str, asyncio.Event] = {}

    def hold(self, query: str) -> asyncio.Event:
        """Block searches for ``query`` until the returned event is set."""
        self.gates[query] = asyncio.Event()
        self.started[query] = asyncio.Event()
        return self.gates[query]

    async def search(self, query: str):
        self.search_calls.append(query)
        if query in self.gates:
            self.started[query].set()
            await self.gates[query].wait()
        return await super().search(query)


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point the config directory at a per-test temp dir."""
    monkeypatch.setattr(constants, "GUESTBOOK_CONFIG_DIR", tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop stderr handlers installed by CLI runs."""
    yield
    logger = logging.getLogger("guestbook")
    for handler in [h for h in logger.handlers if getattr(h, "_guestbook_cli", False)]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def repository():
    return GatedGuestRepository()


@pytest.fixture
def service(repository):
    return GuestQueryService(repository)


@pytest.fixture
def recorder():
    return StateRecorder()


@pytest_asyncio.fixture
async def coordinator(service, recorder):
    """Guest list coordinator with a short debounce window."""
    coordinator = GuestListCoordinator(
        service, on_state_update=recorder, search_debounce=0.02
    )
    yield coordinator
    await coordinator.close()


@pytest_asyncio.fixture
async def loaded_coordinator(coordinator, recorder):
    """Coordinator that has loaded the seeded guests; recorder starts empty."""
    await coordinator.load()
    recorder.clear()
    return coordinator
