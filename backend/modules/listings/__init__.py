"""
Listings module.

Handles the catalog: publishing, editing and removing listings, bidding on
auctions, buying buy-now items, and filtering.

Public API:
- IListingService: Interface for catalog operations
- Listing, ListingDraft, ListingFilter: Catalog models
- filter_listings: Pure catalog filter
- Listing exceptions: BidTooLowError, NotBuyableError, etc.
"""

from .interfaces import IListingService
from .models import (
    Category,
    ListingType,
    UnitKind,
    BathroomKind,
    RoommateIntent,
    AuctionState,
    SaleState,
    HousingDetails,
    ListingDraft,
    Listing,
    ListingFilter,
)
from .filters import filter_listings
from .exceptions import (
    ListingError,
    ListingValidationError,
    ListingNotFoundError,
    ListingAccessDeniedError,
    AuctionError,
    NotAnAuctionError,
    AuctionEndedError,
    BidTooLowError,
    SaleError,
    NotBuyableError,
)

__all__ = [
    # Interface
    "IListingService",
    # Models
    "Category",
    "ListingType",
    "UnitKind",
    "BathroomKind",
    "RoommateIntent",
    "AuctionState",
    "SaleState",
    "HousingDetails",
    "ListingDraft",
    "Listing",
    "ListingFilter",
    "filter_listings",
    # Exceptions
    "ListingError",
    "ListingValidationError",
    "ListingNotFoundError",
    "ListingAccessDeniedError",
    "AuctionError",
    "NotAnAuctionError",
    "AuctionEndedError",
    "BidTooLowError",
    "SaleError",
    "NotBuyableError",
]
