"""Rich terminal views for the marketplace."""

import logging
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from modules.listings.models import Listing, ListingType
from modules.listings.rules import display_amount, listing_status, remaining_ms
from shared.exceptions import MarketError

from .formatting import format_currency, time_left

console = Console()


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to the console through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def money(amount) -> str:
    return f"${format_currency(amount)}"


def status_label(listing: Listing, now: datetime) -> str:
    """Badge text for a listing.

    Examples: "AUCTION · 3h 12m left", "AUCTION · Ended", "BUY NOW", "SOLD"
    """
    if listing.type == ListingType.AUCTION:
        left = time_left(remaining_ms(listing, now))
        return "AUCTION · Ended" if left == "Ended" else f"AUCTION · {left} left"
    return "SOLD" if listing.sold else "BUY NOW"


def amount_label(listing: Listing) -> str:
    if listing.type == ListingType.AUCTION:
        return f"Current bid: {money(display_amount(listing))}"
    return f"Price: {money(display_amount(listing))}"


def build_listing_table(
    listings: list[Listing],
    now: datetime,
    viewer: Optional[str] = None,
) -> Table:
    """Build the catalog grid.

    Args:
        listings: Listings in display order
        now: Current time, used for auction countdowns
        viewer: Email of the signed-in student; their listings are marked

    Returns:
        A rich Table with one row per listing
    """
    table = Table(title="Listings", show_lines=False)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Category")
    table.add_column("Amount", justify="right")
    table.add_column("Status")
    table.add_column("Photos", justify="right")
    table.add_column("Yours", justify="center")

    for listing in listings:
        status = status_label(listing, now)
        style = "green" if listing_status(listing, now) in ("open", "available") else "red"
        table.add_row(
            listing.id,
            listing.title,
            listing.category.value,
            money(display_amount(listing)),
            Text(status, style=style),
            str(len(listing.images)),
            "✓" if viewer and listing.owner == viewer else "",
        )

    return table


def build_listing_panel(listing: Listing, now: datetime, minimum_bid: Optional[str] = None) -> Panel:
    """Build the detail card for a single listing."""
    lines = [
        f"[dim]{listing.category.value}[/dim]",
        amount_label(listing),
        status_label(listing, now),
    ]
    if minimum_bid and listing.type == ListingType.AUCTION:
        lines.append(f"[dim]{minimum_bid}[/dim]")
    if listing.housing is not None:
        housing = listing.housing
        lines.append(
            f"Rent {money(housing.rent)}/mo · {housing.unit_kind.value} · "
            f"{housing.bathroom.value} bath · roommates: {housing.roommate_intent.value}"
        )
    lines.append(f"Seller: {listing.owner}")
    lines.append(f"Posted: {listing.created_at:%Y-%m-%d %H:%M} UTC")
    lines.append("Photos: " + ", ".join(listing.images))
    return Panel("\n".join(lines), title=listing.title, subtitle=listing.id, border_style="blue")


def print_error(error: MarketError) -> None:
    console.print(f"[red]Error:[/red] {error.message}")


def print_success(message: str) -> None:
    console.print(f"[green]{message}[/green]")
