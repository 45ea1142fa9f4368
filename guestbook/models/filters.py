"""Filter and sort specifications for guest lists.

``apply_filter`` and ``apply_sorting`` are pure: they never mutate the input
list and always return a new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from .guest import Guest, SpendingCategory, VisitFrequency

# Missing dates sort before every real date
_MIN_DATE = datetime(1900, 1, 1)


class GuestSortBy(Enum):
    """Sortable guest fields."""

    NAME = "name"
    EMAIL = "email"
    LAST_VISIT = "lastVisit"
    TOTAL_VISITS = "totalVisits"
    LIFETIME_SPEND = "lifetimeSpend"
    CUSTOMER_SINCE = "customerSince"
    UPCOMING_VISITS = "upcomingVisits"

    @property
    def display_name(self) -> str:
        return {
            GuestSortBy.NAME: "Name",
            GuestSortBy.EMAIL: "Email",
            GuestSortBy.LAST_VISIT: "Last Visit",
            GuestSortBy.TOTAL_VISITS: "Total Visits",
            GuestSortBy.LIFETIME_SPEND: "Lifetime Spend",
            GuestSortBy.CUSTOMER_SINCE: "Customer Since",
            GuestSortBy.UPCOMING_VISITS: "Upcoming Visits",
        }[self]


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def display_name(self) -> str:
        return "Ascending" if self is SortOrder.ASCENDING else "Descending"


@dataclass(frozen=True)
class SortSpec:
    """Field plus direction."""

    sort_by: GuestSortBy = GuestSortBy.NAME
    order: SortOrder = SortOrder.ASCENDING

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESCENDING


DEFAULT_SORT = SortSpec()


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range."""

    start: datetime
    end: datetime

    def contains(self, value: datetime) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True)
class GuestFilter:
    """Optional predicates narrowing a guest list.

    Unset (None/empty) fields do not filter. ``tags`` matches guests carrying
    any of the listed tags.
    """

    has_allergies: Optional[bool] = None
    has_upcoming_visits: Optional[bool] = None
    tags: frozenset[str] = frozenset()
    visit_frequency: Optional[VisitFrequency] = None
    spending_category: Optional[SpendingCategory] = None
    date_range: Optional[DateRange] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def is_empty(self) -> bool:
        return (
            self.has_allergies is None
            and self.has_upcoming_visits is None
            and not self.tags
            and self.visit_frequency is None
            and self.spending_category is None
            and self.date_range is None
        )

    @property
    def is_not_empty(self) -> bool:
        return not self.is_empty

    def matches(self, guest: Guest) -> bool:
        """Check a single guest against every set predicate."""
        if self.has_allergies is not None and guest.has_allergies != self.has_allergies:
            return False

        if (
            self.has_upcoming_visits is not None
            and guest.has_upcoming_visits != self.has_upcoming_visits
        ):
            return False

        if self.tags and not any(tag in self.tags for tag in guest.tags):
            return False

        if self.visit_frequency is not None and guest.visit_frequency is not self.visit_frequency:
            return False

        if (
            self.spending_category is not None
            and guest.spending_category is not self.spending_category
        ):
            return False

        if self.date_range is not None:
            if guest.last_visit is None or not self.date_range.contains(guest.last_visit):
                return False

        return True


def apply_filter(guests: Iterable[Guest], guest_filter: GuestFilter) -> List[Guest]:
    """Return the guests matching ``guest_filter``, preserving order."""
    return [guest for guest in guests if guest_filter.matches(guest)]


def _sort_key(guest: Guest, sort_by: GuestSortBy):
    if sort_by is GuestSortBy.NAME:
        return guest.name.lower()
    if sort_by is GuestSortBy.EMAIL:
        return guest.email.lower()
    if sort_by is GuestSortBy.LAST_VISIT:
        return guest.last_visit or _MIN_DATE
    if sort_by is GuestSortBy.TOTAL_VISITS:
        return guest.total_visits
    if sort_by is GuestSortBy.LIFETIME_SPEND:
        return guest.lifetime_spend
    if sort_by is GuestSortBy.CUSTOMER_SINCE:
        return guest.customer_since or _MIN_DATE
    return guest.upcoming_visits


def apply_sorting(guests: Iterable[Guest], sort_spec: SortSpec) -> List[Guest]:
    """Return a new list ordered by ``sort_spec`` (stable)."""
    return sorted(
        guests,
        key=lambda guest: _sort_key(guest, sort_spec.sort_by),
        reverse=sort_spec.descending,
    )
