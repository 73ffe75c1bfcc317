"""
Listings module data models.

These models define the catalog records, the drafts students submit when
creating or editing a listing, and the filter used to browse the catalog.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Self
from pydantic import BaseModel, Field, model_validator


class Category(str, Enum):
    """Closed set of listing categories."""

    TEXTBOOKS = "Textbooks"
    DORM_FURNITURE = "Dorm & Furniture"
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BIKES_SCOOTERS = "Bikes & Scooters"
    TICKETS = "Tickets"
    SERVICES = "Services"
    HOUSING = "Housing"
    OTHER = "Other"


class ListingType(str, Enum):
    """How a listing is sold."""

    AUCTION = "auction"
    BUY = "buy"


class UnitKind(str, Enum):
    """Kind of housing unit on offer."""

    STUDIO = "studio"
    APARTMENT = "apartment"
    HOUSE = "house"
    ROOM = "room"


class BathroomKind(str, Enum):
    PRIVATE = "private"
    SHARED = "shared"


class RoommateIntent(str, Enum):
    """Whether the poster is looking for, or already has, roommates."""

    NONE = "none"
    SEEKING_ROOMMATE = "seeking_roommate"
    HAS_ROOMMATES = "has_roommates"


class AuctionState(str, Enum):
    """Display state of an auction, derived from elapsed time only."""

    OPEN = "open"
    ENDED = "ended"


class SaleState(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"


class HousingDetails(BaseModel):
    """Extra attributes carried by Housing listings."""

    rent: Decimal = Field(..., gt=0, description="Monthly rent")
    unit_kind: UnitKind = Field(..., description="Kind of unit")
    bathroom: BathroomKind = Field(..., description="Private or shared bathroom")
    roommate_intent: RoommateIntent = Field(
        default=RoommateIntent.NONE,
        description="Roommate situation",
    )


class ListingDraft(BaseModel):
    """
    Listing fields as submitted by a student.

    Deliberately loose: category and type are plain strings and numbers are
    optional so the service can report the first unmet constraint itself.
    """

    title: str = Field(default="", description="Listing title")
    category: str = Field(default="", description="Category name")
    type: str = Field(default=ListingType.AUCTION.value, description="auction or buy")
    price: Optional[Decimal] = Field(None, description="Buy-now price")
    start_bid: Optional[Decimal] = Field(None, description="Opening bid")
    duration_hours: Optional[int] = Field(
        None,
        description="Auction length in hours (default from settings)",
    )
    images: list[str] = Field(default_factory=list, description="Image references")
    housing: Optional[HousingDetails] = Field(None, description="Housing attributes")


class Listing(BaseModel):
    """
    A catalog record.

    Exactly one of the buy fields (price, sold) or the auction fields
    (start_bid, current_bid, ends_at) is populated, keyed by ``type``.
    """

    id: str = Field(..., description="Opaque id, ordered by generation time")
    title: str = Field(..., min_length=1, description="Listing title")
    category: Category = Field(..., description="Listing category")
    type: ListingType = Field(..., description="auction or buy")
    price: Optional[Decimal] = Field(None, description="Buy-now price")
    start_bid: Optional[Decimal] = Field(None, description="Opening bid")
    current_bid: Optional[Decimal] = Field(None, description="Highest bid so far")
    ends_at: Optional[datetime] = Field(None, description="Auction deadline (UTC)")
    images: list[str] = Field(..., min_length=1, description="Image references")
    owner: str = Field(..., description="Owner email")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    sold: bool = Field(default=False, description="Buy listings: purchase confirmed")
    housing: Optional[HousingDetails] = Field(None, description="Housing attributes")

    @model_validator(mode="after")
    def _validate_type_fields(self) -> Self:
        auction_fields = (self.start_bid, self.current_bid, self.ends_at)
        if self.type == ListingType.BUY:
            if self.price is None or any(f is not None for f in auction_fields):
                raise ValueError("Buy listings carry a price and no auction fields")
        else:
            if self.price is not None or any(f is None for f in auction_fields):
                raise ValueError("Auctions carry start_bid, current_bid and ends_at and no price")
            if self.sold:
                raise ValueError("Auctions cannot be marked sold")
            if self.current_bid < self.start_bid:
                raise ValueError("current_bid cannot be below start_bid")
        if (self.category == Category.HOUSING) != (self.housing is not None):
            raise ValueError("Housing details are required for, and only for, Housing listings")
        return self


class ListingFilter(BaseModel):
    """Facets for browsing the catalog. Unset facets match everything."""

    category: Optional[Category] = None
    type: Optional[ListingType] = None
    min_amount: Optional[Decimal] = Field(None, description="Inclusive lower bound")
    max_amount: Optional[Decimal] = Field(None, description="Inclusive upper bound")
    owner: Optional[str] = None
    hide_sold: bool = False
    unit_kind: Optional[UnitKind] = None
    bathroom: Optional[BathroomKind] = None
    roommate_intent: Optional[RoommateIntent] = None
