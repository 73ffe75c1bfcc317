"""
Pure auction and sale rules.

Nothing here reads the store or the clock; callers pass ``now`` in.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from .models import AuctionState, Listing, ListingType, SaleState


def bid_floor(listing: Listing) -> Decimal:
    """The amount a new bid has to beat: max(current_bid, start_bid)."""
    start = listing.start_bid or Decimal(0)
    current = listing.current_bid if listing.current_bid is not None else start
    return max(current, start)


def minimum_next_bid(listing: Listing, increment: Decimal = Decimal(0)) -> Decimal:
    """
    Smallest acceptable bid when an increment is configured.

    With the default increment of 0 any amount strictly above the floor
    is accepted, so this returns the floor itself.
    """
    return bid_floor(listing) + increment


def is_acceptable_bid(listing: Listing, amount: Decimal, increment: Decimal = Decimal(0)) -> bool:
    """A bid must exceed the floor and reach floor + increment."""
    return amount > bid_floor(listing) and amount >= minimum_next_bid(listing, increment)


def remaining_ms(listing: Listing, now: datetime) -> Optional[int]:
    """Milliseconds until the auction deadline, or None for buy listings."""
    if listing.ends_at is None:
        return None
    return int((listing.ends_at - now).total_seconds() * 1000)


def auction_state(listing: Listing, now: datetime) -> AuctionState:
    """Open until ``ends_at``; ended from that instant on."""
    if listing.type != ListingType.AUCTION:
        raise ValueError(f"Listing {listing.id} is not an auction")
    return AuctionState.OPEN if now < listing.ends_at else AuctionState.ENDED


def sale_state(listing: Listing) -> SaleState:
    if listing.type != ListingType.BUY:
        raise ValueError(f"Listing {listing.id} is not a buy-now listing")
    return SaleState.SOLD if listing.sold else SaleState.AVAILABLE


def listing_status(listing: Listing, now: datetime) -> str:
    """Either the auction state or the sale state, as a plain string."""
    if listing.type == ListingType.AUCTION:
        return auction_state(listing, now).value
    return sale_state(listing).value


def display_amount(listing: Listing) -> Decimal:
    """Price for buy listings, the bid floor for auctions."""
    if listing.type == ListingType.BUY:
        return listing.price
    return bid_floor(listing)
