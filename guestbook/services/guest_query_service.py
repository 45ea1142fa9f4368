"""
Guest query service.

Business rules on top of the repository:
- Inactive guests are never returned (permanent rule, not a user filter)
- Search results are ordered name matches first, then email-only matches
- Input is validated before the repository is called

Repository failures that are not already ``GuestbookError``s are wrapped in
``DataSourceError`` so callers only ever see the guestbook taxonomy.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, List, TypeVar

from guestbook.config.constants import DEFAULT_TOP_SPENDERS_LIMIT
from guestbook.exceptions import (
    DataSourceError,
    GuestbookError,
    NotFoundError,
    ValidationError,
)
from guestbook.models.guest import Guest
from guestbook.repository.guest_repository import GuestRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class GuestStatistics:
    """Aggregate figures over the whole guest collection."""

    total_guests: int
    total_lifetime_spending: float
    average_spending_per_guest: float


def _by_name(guest: Guest) -> str:
    return guest.name.lower()


class GuestQueryService:
    """Read-side business rules over a GuestRepository."""

    def __init__(self, repository: GuestRepository):
        self.repository = repository

    async def _call(self, awaitable: Awaitable[T], failure_message: str) -> T:
        """Await a repository call, mapping unknown failures to DataSourceError."""
        try:
            return await awaitable
        except GuestbookError:
            raise
        except Exception as e:
            logger.error(f"{failure_message}: {e}")
            raise DataSourceError(failure_message, cause=type(e).__name__) from e

    async def get_all(self) -> List[Guest]:
        """All active guests sorted by case-insensitive name."""
        guests = await self._call(self.repository.get_all(), "Failed to retrieve guests")
        return sorted((g for g in guests if g.is_active), key=_by_name)

    async def search(self, query: str) -> List[Guest]:
        """Active guests whose name or email contains ``query``.

        Name matches sort before email-only matches; ties by name.

        Raises:
            ValidationError: if ``query`` is blank
        """
        if not query.strip():
            raise ValidationError("Search query cannot be empty", fields=["query"])

        guests = await self._call(
            self.repository.search(query), "Failed to search guests"
        )
        needle = query.strip().lower()
        return sorted(
            (g for g in guests if g.is_active),
            key=lambda g: (needle not in g.name.lower(), g.name.lower()),
        )

    async def get_by_id(self, guest_id: str) -> Guest:
        """Fetch one active guest.

        Raises:
            ValidationError: if ``guest_id`` is blank
            NotFoundError: if the guest is absent or inactive
        """
        if not guest_id.strip():
            raise ValidationError("Guest ID cannot be empty", fields=["guestId"])

        guest = await self._call(
            self.repository.get_by_id(guest_id), "Failed to retrieve guest"
        )
        if guest is None:
            raise NotFoundError.for_guest(guest_id)
        if not guest.is_active:
            raise NotFoundError.for_guest(guest_id, resource="Active guest")
        return guest

    async def with_upcoming_visits(self) -> List[Guest]:
        """Active guests with upcoming visits, most upcoming first."""
        guests = await self._call(
            self.repository.with_upcoming_visits(),
            "Failed to retrieve guests with upcoming visits",
        )
        return sorted(
            (g for g in guests if g.is_active and g.has_upcoming_visits),
            key=lambda g: g.upcoming_visits,
            reverse=True,
        )

    async def with_allergies(self) -> List[Guest]:
        """Active guests with at least one allergy, by name."""
        guests = await self._call(
            self.repository.with_allergies(),
            "Failed to retrieve guests with allergies",
        )
        return sorted((g for g in guests if g.is_active and g.has_allergies), key=_by_name)

    async def top_spenders(self, limit: int = DEFAULT_TOP_SPENDERS_LIMIT) -> List[Guest]:
        """Highest lifetime spenders, excluding inactive and zero-spend guests.

        Raises:
            ValidationError: if ``limit`` is not positive
        """
        if limit <= 0:
            raise ValidationError("Limit must be greater than 0", fields=["limit"])

        guests = await self._call(
            self.repository.top_spending(limit=limit),
            "Failed to retrieve top spending guests",
        )
        return [g for g in guests if g.is_active and g.lifetime_spend > 0][:limit]

    async def statistics(self) -> GuestStatistics:
        """Run the aggregate queries concurrently; any failure fails the whole call."""
        total, spend, average = await asyncio.gather(
            self._call(self.repository.count(), "Failed to get total guest count"),
            self._call(
                self.repository.total_lifetime_spend(),
                "Failed to get total lifetime spending",
            ),
            self._call(
                self.repository.average_spend_per_guest(),
                "Failed to get average spending per guest",
            ),
        )
        return GuestStatistics(
            total_guests=total,
            total_lifetime_spending=spend,
            average_spending_per_guest=average,
        )
