"""
Guest repository: async access to the guest collection.

``GuestRepository`` is the contract the query service depends on.
``InMemoryGuestRepository`` is the demo implementation backed by a list,
seeded with mock guests, with optional simulated latency so the UI can
exercise its loading and race-handling paths.
"""

from __future__ import annotations

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from guestbook.config.constants import (
    DEFAULT_FREQUENT_VISITORS_LIMIT,
    DEFAULT_TOP_SPENDERS_LIMIT,
)
from guestbook.exceptions import NotFoundError, ValidationError
from guestbook.models.guest import Guest, SpendingCategory, VisitFrequency

from .seed import seed_guests

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@]+@[^@]+\.[^@]+$")


def validate_guest(guest: Guest) -> None:
    """Raise ValidationError listing every invalid field of ``guest``."""
    errors: List[str] = []
    fields: List[str] = []

    if not guest.id.strip():
        errors.append("Guest ID cannot be empty")
        fields.append("id")
    if not guest.name.strip():
        errors.append("Guest name cannot be empty")
        fields.append("name")
    if not guest.email.strip():
        errors.append("Guest email cannot be empty")
        fields.append("email")
    elif not _EMAIL_RE.match(guest.email):
        errors.append("Guest email format is invalid")
        fields.append("email")
    if not guest.phone.strip():
        errors.append("Guest phone cannot be empty")
        fields.append("phone")

    if errors:
        raise ValidationError(", ".join(errors), fields=fields)


def _require_positive(limit: int) -> None:
    if limit <= 0:
        raise ValidationError("Limit must be greater than 0", fields=["limit"])


class GuestRepository(ABC):
    """Async guest storage contract.

    Reads return copies; writes replace whole records (last write wins).
    Any method may raise; callers map failures to user-facing errors.
    """

    # ---- reads ---------------------------------------------------------------

    @abstractmethod
    async def get_all(self) -> List[Guest]: ...

    @abstractmethod
    async def get_by_id(self, guest_id: str) -> Optional[Guest]: ...

    @abstractmethod
    async def search(self, query: str) -> List[Guest]: ...

    @abstractmethod
    async def with_upcoming_visits(self) -> List[Guest]: ...

    @abstractmethod
    async def with_allergies(self) -> List[Guest]: ...

    @abstractmethod
    async def top_spending(self, limit: int = DEFAULT_TOP_SPENDERS_LIMIT) -> List[Guest]: ...

    # ---- writes --------------------------------------------------------------

    @abstractmethod
    async def add(self, guest: Guest) -> Guest: ...

    @abstractmethod
    async def update(self, guest: Guest) -> Guest: ...

    @abstractmethod
    async def delete(self, guest_id: str) -> None: ...

    # ---- aggregates ----------------------------------------------------------

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def total_lifetime_spend(self) -> float: ...

    @abstractmethod
    async def average_spend_per_guest(self) -> float: ...

    # ---- derived queries built on get_all -----------------------------------

    async def by_visit_frequency(self, frequency: VisitFrequency) -> List[Guest]:
        return [g for g in await self.get_all() if g.visit_frequency is frequency]

    async def by_spending_category(self, category: SpendingCategory) -> List[Guest]:
        return [g for g in await self.get_all() if g.spending_category is category]

    async def most_frequent_visitors(
        self, limit: int = DEFAULT_FREQUENT_VISITORS_LIMIT
    ) -> List[Guest]:
        _require_positive(limit)
        guests = sorted(await self.get_all(), key=lambda g: g.total_visits, reverse=True)
        return guests[:limit]

    # ---- copy-and-replace mutations -----------------------------------------

    async def _require(self, guest_id: str) -> Guest:
        guest = await self.get_by_id(guest_id)
        if guest is None:
            raise NotFoundError.for_guest(guest_id)
        return guest

    async def update_notes(self, guest_id: str, category: str, text: str) -> Guest:
        guest = await self._require(guest_id)
        notes = dict(guest.notes)
        notes[category] = text
        return await self.update(guest.copy_with(notes=notes))

    async def add_allergy(self, guest_id: str, allergy: str) -> Guest:
        guest = await self._require(guest_id)
        if allergy in guest.allergies:
            return guest
        return await self.update(guest.copy_with(allergies=guest.allergies + (allergy,)))

    async def remove_allergy(self, guest_id: str, allergy: str) -> Guest:
        guest = await self._require(guest_id)
        allergies = tuple(a for a in guest.allergies if a != allergy)
        return await self.update(guest.copy_with(allergies=allergies))

    async def add_tag(self, guest_id: str, tag: str) -> Guest:
        guest = await self._require(guest_id)
        if tag in guest.tags:
            return guest
        return await self.update(guest.copy_with(tags=guest.tags + (tag,)))

    async def remove_tag(self, guest_id: str, tag: str) -> Guest:
        guest = await self._require(guest_id)
        tags = tuple(t for t in guest.tags if t != tag)
        return await self.update(guest.copy_with(tags=tags))

    async def update_loyalty_points(
        self, guest_id: str, points_earned: int, points_redeemed: int
    ) -> Guest:
        guest = await self._require(guest_id)
        delta = points_earned - points_redeemed
        return await self.update(
            guest.copy_with(
                loyalty_earned=guest.loyalty_earned + points_earned,
                loyalty_redeemed=guest.loyalty_redeemed + points_redeemed,
                loyalty_amount=guest.loyalty_amount + delta,
                loyalty_available=guest.loyalty_available + delta,
            )
        )

    async def update_visit_statistics(
        self,
        guest_id: str,
        *,
        total_visits: Optional[int] = None,
        upcoming_visits: Optional[int] = None,
        cancelled_visits: Optional[int] = None,
        no_shows: Optional[int] = None,
        last_visit: Optional[datetime] = None,
    ) -> Guest:
        guest = await self._require(guest_id)
        changes = {
            "total_visits": total_visits,
            "upcoming_visits": upcoming_visits,
            "cancelled_visits": cancelled_visits,
            "no_shows": no_shows,
            "last_visit": last_visit,
        }
        return await self.update(
            guest.copy_with(**{k: v for k, v in changes.items() if v is not None})
        )

    async def update_spending_statistics(
        self,
        guest_id: str,
        *,
        average_spend: Optional[float] = None,
        lifetime_spend: Optional[float] = None,
        total_orders: Optional[int] = None,
        average_tip: Optional[float] = None,
    ) -> Guest:
        guest = await self._require(guest_id)
        changes = {
            "average_spend": average_spend,
            "lifetime_spend": lifetime_spend,
            "total_orders": total_orders,
            "average_tip": average_tip,
        }
        return await self.update(
            guest.copy_with(**{k: v for k, v in changes.items() if v is not None})
        )


class InMemoryGuestRepository(GuestRepository):
    """List-backed repository used by the demo app and tests."""

    def __init__(
        self,
        guests: Optional[Iterable[Guest]] = None,
        latency: float = 0.0,
    ):
        """Initialize the repository.

        Args:
            guests: Initial guests; defaults to the seeded demo set
            latency: Simulated delay in seconds applied to every call
        """
        self._guests: List[Guest] = list(guests) if guests is not None else seed_guests()
        self.latency = latency

    async def _delay(self) -> None:
        # Always yield so callers see a real suspension point
        await asyncio.sleep(self.latency)

    def _find_index(self, guest_id: str) -> int:
        for index, guest in enumerate(self._guests):
            if guest.id == guest_id:
                return index
        return -1

    async def get_all(self) -> List[Guest]:
        await self._delay()
        return list(self._guests)

    async def get_by_id(self, guest_id: str) -> Optional[Guest]:
        if not guest_id.strip():
            raise ValidationError("Guest ID cannot be empty", fields=["id"])
        await self._delay()
        index = self._find_index(guest_id)
        return self._guests[index] if index != -1 else None

    async def search(self, query: str) -> List[Guest]:
        if not query.strip():
            raise ValidationError("Search query cannot be empty", fields=["query"])
        await self._delay()
        needle = query.strip().lower()
        return [
            guest
            for guest in self._guests
            if needle in guest.name.lower() or needle in guest.email.lower()
        ]

    async def with_upcoming_visits(self) -> List[Guest]:
        await self._delay()
        return [guest for guest in self._guests if guest.has_upcoming_visits]

    async def with_allergies(self) -> List[Guest]:
        await self._delay()
        return [guest for guest in self._guests if guest.has_allergies]

    async def top_spending(self, limit: int = DEFAULT_TOP_SPENDERS_LIMIT) -> List[Guest]:
        _require_positive(limit)
        await self._delay()
        ranked = sorted(self._guests, key=lambda g: g.lifetime_spend, reverse=True)
        return ranked[:limit]

    async def add(self, guest: Guest) -> Guest:
        validate_guest(guest)
        await self._delay()
        if self._find_index(guest.id) != -1:
            raise ValidationError(
                f"Guest with ID {guest.id} already exists", fields=["id"]
            )
        self._guests.append(guest)
        logger.info("Added guest %s", guest.id)
        return guest

    async def update(self, guest: Guest) -> Guest:
        validate_guest(guest)
        await self._delay()
        index = self._find_index(guest.id)
        if index == -1:
            raise NotFoundError.for_guest(guest.id)
        self._guests[index] = guest
        logger.debug("Updated guest %s", guest.id)
        return guest

    async def delete(self, guest_id: str) -> None:
        if not guest_id.strip():
            raise ValidationError("Guest ID cannot be empty", fields=["id"])
        await self._delay()
        index = self._find_index(guest_id)
        if index == -1:
            raise NotFoundError.for_guest(guest_id)
        del self._guests[index]
        logger.info("Deleted guest %s", guest_id)

    async def count(self) -> int:
        await self._delay()
        return len(self._guests)

    async def total_lifetime_spend(self) -> float:
        await self._delay()
        return sum(guest.lifetime_spend for guest in self._guests)

    async def average_spend_per_guest(self) -> float:
        await self._delay()
        if not self._guests:
            return 0.0
        return sum(guest.lifetime_spend for guest in self._guests) / len(self._guests)

    async def clear(self) -> None:
        """Remove every guest (test helper)."""
        self._guests.clear()
