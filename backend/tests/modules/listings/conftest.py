"""Fixtures for listings tests."""

import pytest
from decimal import Decimal

from modules.listings.models import (
    BathroomKind,
    HousingDetails,
    ListingDraft,
    RoommateIntent,
    UnitKind,
)
from modules.listings.service import ListingService


@pytest.fixture
def service(store, settings, clock) -> ListingService:
    """Listing service over an in-memory store with a controllable clock."""
    return ListingService(store, settings=settings, clock=clock)


@pytest.fixture
def buy_draft() -> ListingDraft:
    return ListingDraft(
        title="Desk",
        category="Dorm & Furniture",
        type="buy",
        price=Decimal("40"),
        images=["x"],
    )


@pytest.fixture
def auction_draft() -> ListingDraft:
    return ListingDraft(
        title="Calculus textbook",
        category="Textbooks",
        type="auction",
        start_bid=Decimal("10"),
        duration_hours=24,
        images=["cover.jpg"],
    )


@pytest.fixture
def housing_details() -> HousingDetails:
    return HousingDetails(
        rent=Decimal("950"),
        unit_kind=UnitKind.ROOM,
        bathroom=BathroomKind.SHARED,
        roommate_intent=RoommateIntent.HAS_ROOMMATES,
    )


@pytest.fixture
def housing_draft(housing_details) -> ListingDraft:
    return ListingDraft(
        title="Room near campus",
        category="Housing",
        type="buy",
        price=Decimal("950"),
        images=["room.jpg", "kitchen.jpg"],
        housing=housing_details,
    )
