"""Business services for guestbook."""

from .guest_query_service import GuestQueryService, GuestStatistics

__all__ = ["GuestQueryService", "GuestStatistics"]
