"""Guest listing commands for guestbook.

Commands are registered on the top-level app in guestbook.main. Each one
builds a GuestListCoordinator over the in-memory repository, drives it with
the same intents the Textual shell uses, and renders the resulting state.
"""

import asyncio
from typing import Optional

import typer
from rich.table import Table

from guestbook.config.ui_config import get_repository_latency
from guestbook.exceptions import GuestbookError
from guestbook.models.filters import GuestFilter, GuestSortBy, SortOrder, SortSpec
from guestbook.repository.guest_repository import GuestRepository, InMemoryGuestRepository
from guestbook.services.guest_query_service import GuestQueryService
from guestbook.ui.coordinators.guest_list_coordinator import GuestListCoordinator
from guestbook.ui.formatting import (
    GUEST_ROW_HEADERS,
    format_currency,
    format_date,
    format_list,
    guest_row,
)
from guestbook.ui.viewmodels.guest_list_state import (
    GuestListError,
    GuestListLoaded,
    GuestListState,
)
from guestbook.utils.output import console, print_json


def create_repository() -> GuestRepository:
    """Repository backing the CLI (seeded demo data)."""
    return InMemoryGuestRepository(latency=get_repository_latency())


def _create_coordinator() -> GuestListCoordinator:
    service = GuestQueryService(create_repository())
    # The CLI issues one search per run; no keystrokes to debounce
    return GuestListCoordinator(service, search_debounce=0)


def _fail(state: GuestListError) -> None:
    console.print(f"[red]Error: {state.message}[/red]")
    if state.technical_details:
        console.print(f"[dim]{state.error_code}: {state.technical_details}[/dim]")
    raise typer.Exit(1)


def _render_list(state: GuestListState, title: str) -> None:
    if isinstance(state, GuestListError):
        _fail(state)
    if not isinstance(state, GuestListLoaded):
        console.print(f"[red]Error: unexpected state {type(state).__name__}[/red]")
        raise typer.Exit(1)

    if not state.has_guests:
        console.print("[yellow]No guests found[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in GUEST_ROW_HEADERS:
        justify = "right" if header in ("Visits", "Lifetime") else "left"
        table.add_column(header, justify=justify)
    for guest in state.guests:
        table.add_row(*guest_row(guest))

    console.print(table)
    console.print(
        f"[dim]Showing {state.displayed_count} of {state.total_count} guests[/dim]"
    )


def list_guests(
    sort: GuestSortBy = typer.Option(
        GuestSortBy.NAME, "--sort", "-s", case_sensitive=False, help="Field to sort by"
    ),
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
    allergies: bool = typer.Option(False, "--allergies", help="Only guests with allergies"),
    upcoming: bool = typer.Option(False, "--upcoming", help="Only guests with upcoming visits"),
    tags: Optional[list[str]] = typer.Option(
        None, "--tag", "-t", help="Only guests with this tag (repeatable)"
    ),
):
    """List guests, optionally filtered and sorted."""

    async def run() -> GuestListState:
        coordinator = _create_coordinator()
        try:
            await coordinator.load()
            guest_filter = GuestFilter(
                has_allergies=True if allergies else None,
                has_upcoming_visits=True if upcoming else None,
                tags=frozenset(tags or ()),
            )
            if guest_filter.is_not_empty:
                await coordinator.filter(guest_filter)
            order = SortOrder.DESCENDING if desc else SortOrder.ASCENDING
            await coordinator.sort(SortSpec(sort, order))
            return coordinator.state
        finally:
            await coordinator.close()

    _render_list(asyncio.run(run()), "Guests")


def search(
    query: str = typer.Argument(..., help="Text to match against name or email"),
):
    """Search guests by name or email."""

    async def run() -> GuestListState:
        coordinator = _create_coordinator()
        try:
            await coordinator.load()
            await coordinator.search(query)
            await coordinator.wait_for_pending()
            return coordinator.state
        finally:
            await coordinator.close()

    _render_list(asyncio.run(run()), f"Guests matching '{query.strip()}'")


def show(
    guest_id: str = typer.Argument(..., help="Guest ID"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show one guest's profile."""

    async def run():
        coordinator = _create_coordinator()
        try:
            await coordinator.load()
            if isinstance(coordinator.state, GuestListError):
                return coordinator.state, None
            await coordinator.select(guest_id)
            return coordinator.state, coordinator.selected_guest
        finally:
            await coordinator.close()

    state, guest = asyncio.run(run())
    if isinstance(state, GuestListError):
        _fail(state)
    if guest is None:
        console.print(f"[red]Error: Guest with ID {guest_id} not found[/red]")
        raise typer.Exit(1)

    if as_json:
        print_json(guest.to_dict())
        return

    table = Table(title=guest.name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("ID", guest.id)
    table.add_row("Email", guest.email)
    table.add_row("Phone", guest.phone)
    table.add_row("Customer for", guest.customer_duration())
    table.add_row("Visits", f"{guest.total_visits} ({guest.visit_frequency.display_name})")
    table.add_row("Upcoming", str(guest.upcoming_visits))
    table.add_row("Last visit", format_date(guest.last_visit, empty="Never"))
    table.add_row(
        "Lifetime spend",
        f"{format_currency(guest.lifetime_spend)} ({guest.spending_category.display_name})",
    )
    table.add_row("Allergies", format_list(guest.allergies))
    table.add_row("Tags", format_list(guest.tags))
    console.print(table)


def top(
    limit: int = typer.Option(10, "--limit", "-n", help="Number of guests to show"),
):
    """Show the highest lifetime spenders."""

    async def run() -> GuestListState:
        coordinator = _create_coordinator()
        try:
            await coordinator.load_top_spenders(limit)
            return coordinator.state
        finally:
            await coordinator.close()

    try:
        state = asyncio.run(run())
    except GuestbookError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e

    _render_list(state, f"Top {limit} spenders")


def stats():
    """Show totals across the guest book."""
    service = GuestQueryService(create_repository())

    try:
        statistics = asyncio.run(service.statistics())
    except GuestbookError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    table = Table(title="Guest book statistics", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Guests", str(statistics.total_guests))
    table.add_row("Lifetime spend", format_currency(statistics.total_lifetime_spending))
    table.add_row("Average per guest", format_currency(statistics.average_spending_per_guest))
    console.print(table)


def browse():
    """Open the interactive guest book."""
    from guestbook.ui.app import GuestBookApp

    try:
        GuestBookApp(repository=create_repository()).run()
    except KeyboardInterrupt:
        pass
