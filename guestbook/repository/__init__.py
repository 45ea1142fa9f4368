"""Guest storage: the repository contract and its in-memory implementation."""

from .guest_repository import GuestRepository, InMemoryGuestRepository, validate_guest
from .seed import seed_guests

__all__ = [
    "GuestRepository",
    "InMemoryGuestRepository",
    "seed_guests",
    "validate_guest",
]
