"""Data models for guestbook.

- guest: the immutable Guest record plus visit/spending categories
- filters: filter and sort specifications applied to guest lists
"""

from .filters import (
    DEFAULT_SORT,
    DateRange,
    GuestFilter,
    GuestSortBy,
    SortOrder,
    SortSpec,
    apply_filter,
    apply_sorting,
)
from .guest import Guest, SpendingCategory, VisitFrequency

__all__ = [
    "DEFAULT_SORT",
    "DateRange",
    "Guest",
    "GuestFilter",
    "GuestSortBy",
    "SortOrder",
    "SortSpec",
    "SpendingCategory",
    "VisitFrequency",
    "apply_filter",
    "apply_sorting",
]
