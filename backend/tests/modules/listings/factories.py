"""Builders for listing records used across listings tests."""

from datetime import timedelta
from decimal import Decimal

from modules.listings.models import Category, Listing, ListingType

from tests.conftest import T0


def make_listing(**overrides) -> Listing:
    """Build a valid buy listing, overriding any field."""
    fields = {
        "id": "l_0000000000001_deadbeef",
        "title": "Lamp",
        "category": Category.DORM_FURNITURE,
        "type": ListingType.BUY,
        "price": Decimal("15"),
        "images": ["lamp.jpg"],
        "owner": "alex@student.csulb.edu",
        "created_at": T0,
    }
    fields.update(overrides)
    return Listing(**fields)


def make_auction(**overrides) -> Listing:
    """Build a valid open auction, overriding any field."""
    fields = {
        "id": "l_0000000000002_cafebabe",
        "title": "Bike",
        "category": Category.BIKES_SCOOTERS,
        "type": ListingType.AUCTION,
        "start_bid": Decimal("50"),
        "current_bid": Decimal("50"),
        "ends_at": T0 + timedelta(hours=24),
        "images": ["bike.jpg"],
        "owner": "alex@student.csulb.edu",
        "created_at": T0,
    }
    fields.update(overrides)
    return Listing(**fields)
