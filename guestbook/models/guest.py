"""Guest value object.

A Guest is immutable: every change goes through ``copy_with`` and the
repository replaces the stored record with the copy.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class VisitFrequency(Enum):
    """How often a guest visits, bucketed by total visits."""

    RARE = "rare"
    OCCASIONAL = "occasional"
    REGULAR = "regular"
    FREQUENT = "frequent"
    VERY_FREQUENT = "very_frequent"

    @property
    def display_name(self) -> str:
        return _VISIT_FREQUENCY_NAMES[self]


_VISIT_FREQUENCY_NAMES = {
    VisitFrequency.RARE: "Rare Visitor",
    VisitFrequency.OCCASIONAL: "Occasional Visitor",
    VisitFrequency.REGULAR: "Regular Visitor",
    VisitFrequency.FREQUENT: "Frequent Visitor",
    VisitFrequency.VERY_FREQUENT: "VIP Visitor",
}


class SpendingCategory(Enum):
    """Lifetime spend bucket."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VIP = "vip"

    @property
    def display_name(self) -> str:
        return _SPENDING_CATEGORY_NAMES[self]


_SPENDING_CATEGORY_NAMES = {
    SpendingCategory.NONE: "New Customer",
    SpendingCategory.LOW: "Light Spender",
    SpendingCategory.MEDIUM: "Regular Spender",
    SpendingCategory.HIGH: "High Value",
    SpendingCategory.VIP: "VIP Customer",
}

# camelCase JSON key for every snake_case field that differs
_JSON_KEYS = {
    "avatar_url": "avatarUrl",
    "loyalty_number": "loyaltyNumber",
    "customer_since": "customerSince",
    "last_visit": "lastVisit",
    "average_spend": "averageSpend",
    "lifetime_spend": "lifetimeSpend",
    "total_orders": "totalOrders",
    "average_tip": "averageTip",
    "loyalty_earned": "loyaltyEarned",
    "loyalty_redeemed": "loyaltyRedeemed",
    "loyalty_available": "loyaltyAvailable",
    "loyalty_amount": "loyaltyAmount",
    "total_visits": "totalVisits",
    "upcoming_visits": "upcomingVisits",
    "cancelled_visits": "cancelledVisits",
    "no_shows": "noShows",
    "is_active": "isActive",
}

_DATE_FIELDS = ("customer_since", "birthday", "anniversary", "last_visit")


@dataclass(frozen=True)
class Guest:
    """A guest in the guest book, with visit and spending statistics."""

    id: str
    name: str
    email: str
    phone: str
    avatar_url: Optional[str] = None
    loyalty_number: Optional[str] = None
    customer_since: Optional[datetime] = None
    birthday: Optional[datetime] = None
    anniversary: Optional[datetime] = None
    last_visit: Optional[datetime] = None

    # Spending
    average_spend: float = 0.0
    lifetime_spend: float = 0.0
    total_orders: int = 0
    average_tip: float = 0.0

    # Loyalty program
    loyalty_earned: int = 0
    loyalty_redeemed: int = 0
    loyalty_available: float = 0.0
    loyalty_amount: int = 0

    # Visits
    total_visits: int = 0
    upcoming_visits: int = 0
    cancelled_visits: int = 0
    no_shows: int = 0

    allergies: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    # Category key (see NOTE_CATEGORIES) -> free text
    notes: Mapping[str, str] = field(default_factory=dict)
    is_active: bool = True

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        object.__setattr__(self, "allergies", tuple(self.allergies))
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "notes", dict(self.notes))

    # ---- computed properties -------------------------------------------------

    @property
    def initials(self) -> str:
        names = self.name.split()
        if not names:
            return "?"
        if len(names) == 1:
            return names[0][0].upper()
        return f"{names[0][0]}{names[-1][0]}".upper()

    @property
    def first_name(self) -> str:
        names = self.name.split()
        return names[0] if names else self.name

    @property
    def last_name(self) -> str:
        names = self.name.split()
        return names[-1] if len(names) > 1 else ""

    @property
    def has_allergies(self) -> bool:
        return bool(self.allergies)

    @property
    def has_upcoming_visits(self) -> bool:
        return self.upcoming_visits > 0

    @property
    def has_orders(self) -> bool:
        return self.total_orders > 0

    def customer_duration(self, now: Optional[datetime] = None) -> str:
        """Human readable time since the guest became a customer."""
        if self.customer_since is None:
            return "New Customer"

        days = ((now or datetime.now()) - self.customer_since).days
        if days < 30:
            return f"{days} days"
        if days < 365:
            months = days // 30
            return f"{months} month{'s' if months != 1 else ''}"
        years = days // 365
        return f"{years} year{'s' if years != 1 else ''}"

    @property
    def visit_frequency(self) -> VisitFrequency:
        if self.total_visits >= 50:
            return VisitFrequency.VERY_FREQUENT
        if self.total_visits >= 20:
            return VisitFrequency.FREQUENT
        if self.total_visits >= 10:
            return VisitFrequency.REGULAR
        if self.total_visits >= 5:
            return VisitFrequency.OCCASIONAL
        return VisitFrequency.RARE

    @property
    def spending_category(self) -> SpendingCategory:
        if self.lifetime_spend >= 5000:
            return SpendingCategory.VIP
        if self.lifetime_spend >= 2000:
            return SpendingCategory.HIGH
        if self.lifetime_spend >= 500:
            return SpendingCategory.MEDIUM
        if self.lifetime_spend > 0:
            return SpendingCategory.LOW
        return SpendingCategory.NONE

    # ---- copy / serialisation -----------------------------------------------

    def copy_with(self, **changes: Any) -> Guest:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dict with camelCase keys."""
        data: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.name in _DATE_FIELDS and value is not None:
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = list(value)
            elif isinstance(value, Mapping):
                value = dict(value)
            data[_JSON_KEYS.get(f.name, f.name)] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Guest:
        """Build a Guest from a dict produced by ``to_dict``."""
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            key = _JSON_KEYS.get(f.name, f.name)
            if key not in data:
                continue
            value = data[key]
            if f.name in _DATE_FIELDS and isinstance(value, str):
                value = datetime.fromisoformat(value)
            kwargs[f.name] = value
        return cls(**kwargs)

    def __str__(self) -> str:
        return f"Guest(id: {self.id}, name: {self.name}, email: {self.email})"
