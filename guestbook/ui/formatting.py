"""Display helpers shared by the CLI tables and the Textual detail view."""

from __future__ import annotations

from datetime import datetime

from guestbook.config.constants import NAVIGATION_TABS, NOTE_CATEGORIES
from guestbook.models.guest import Guest


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def format_date(value: datetime | None, empty: str = "-") -> str:
    if value is None:
        return empty
    return value.strftime("%b %d, %Y")


def format_list(items: tuple[str, ...] | list[str], empty: str = "-") -> str:
    return ", ".join(items) if items else empty


def guest_row(guest: Guest) -> tuple[str, ...]:
    """Cells for one guest in a list table (id, name, email, visits, spend, last visit)."""
    return (
        guest.id,
        guest.name,
        guest.email,
        str(guest.total_visits),
        format_currency(guest.lifetime_spend),
        format_date(guest.last_visit),
    )


GUEST_ROW_HEADERS = ("ID", "Name", "Email", "Visits", "Lifetime", "Last Visit")


def _profile(guest: Guest) -> list[str]:
    lines = [
        f"[bold]{guest.name}[/bold] ({guest.initials})",
        f"Email: {guest.email}",
        f"Phone: {guest.phone}",
        f"Loyalty #: {guest.loyalty_number or '-'}",
        f"Customer for: {guest.customer_duration()}",
        f"Birthday: {format_date(guest.birthday)}",
        f"Anniversary: {format_date(guest.anniversary)}",
        f"Tags: {format_list(guest.tags)}",
    ]
    if guest.has_allergies:
        lines.append(f"[red]Allergies: {format_list(guest.allergies)}[/red]")
    for key, label in NOTE_CATEGORIES.items():
        if guest.notes.get(key):
            lines.append(f"{label}: {guest.notes[key]}")
    return lines


def _reservation(guest: Guest) -> list[str]:
    return [
        f"Total visits: {guest.total_visits} ({guest.visit_frequency.display_name})",
        f"Upcoming visits: {guest.upcoming_visits}",
        f"Cancelled: {guest.cancelled_visits}",
        f"No-shows: {guest.no_shows}",
        f"Last visit: {format_date(guest.last_visit, empty='Never')}",
    ]


def _payment(guest: Guest) -> list[str]:
    return [
        f"Lifetime spend: {format_currency(guest.lifetime_spend)} "
        f"({guest.spending_category.display_name})",
        f"Average spend: {format_currency(guest.average_spend)}",
        f"Average tip: {format_currency(guest.average_tip)}",
        f"Loyalty earned: {guest.loyalty_earned}",
        f"Loyalty redeemed: {guest.loyalty_redeemed}",
        f"Loyalty available: {guest.loyalty_available:g}",
    ]


def _feedback(guest: Guest) -> list[str]:
    return [f"No feedback recorded for {guest.first_name}."]


def _order_history(guest: Guest) -> list[str]:
    if not guest.has_orders:
        return ["No orders yet."]
    return [
        f"Total orders: {guest.total_orders}",
        f"Average order: {format_currency(guest.average_spend)}",
    ]


_TAB_RENDERERS = (_profile, _reservation, _payment, _feedback, _order_history)


def render_guest_tab(guest: Guest, tab_index: int) -> str:
    """Rich markup for ``guest`` on detail tab ``tab_index``."""
    if not 0 <= tab_index < len(_TAB_RENDERERS):
        raise IndexError(f"No detail tab {tab_index}")
    title = f"[bold cyan]{NAVIGATION_TABS[tab_index]}[/bold cyan]"
    return "\n".join([title, "", *_TAB_RENDERERS[tab_index](guest)])
