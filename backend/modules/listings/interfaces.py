"""
Listings module interface.

The front end depends on IListingService, not the concrete implementation.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from shared.models import SessionUser

from .models import Listing, ListingDraft, ListingFilter


@runtime_checkable
class IListingService(Protocol):
    """
    Interface for catalog operations.

    Operations that need an identity take the signed-in user explicitly;
    the service never looks the session up by itself.
    """

    def create(self, user: SessionUser, draft: ListingDraft) -> Listing:
        """
        Publish a new listing owned by user.

        Raises:
            ListingValidationError: With the first unmet constraint
        """
        ...

    def update(self, user: SessionUser, listing_id: str, draft: ListingDraft) -> Listing:
        """
        Replace a listing's editable fields.

        id, owner and created_at are preserved.

        Raises:
            ListingNotFoundError: If the listing does not exist
            ListingAccessDeniedError: If user is not the owner
            ListingValidationError: With the first unmet constraint
        """
        ...

    def delete(self, user: SessionUser, listing_id: str) -> None:
        """
        Remove a listing.

        Raises:
            ListingNotFoundError: If the listing does not exist
            ListingAccessDeniedError: If user is not the owner
        """
        ...

    def place_bid(self, listing_id: str, amount: Decimal) -> Listing:
        """
        Raise an auction's current bid to amount.

        Raises:
            ListingNotFoundError: If the listing does not exist
            NotAnAuctionError: If the listing is a buy-now listing
            AuctionEndedError: If the deadline has passed
            BidTooLowError: If amount does not beat the current bid
        """
        ...

    def buy_now(self, listing_id: str) -> Listing:
        """
        Mark a buy-now listing as sold. No payment is taken.

        Raises:
            ListingNotFoundError: If the listing does not exist
            NotBuyableError: If the listing is an auction or already sold
        """
        ...

    def get(self, listing_id: str) -> Listing:
        """Get one listing or raise ListingNotFoundError."""
        ...

    def list_all(self) -> list[Listing]:
        """Return the whole catalog in catalog order."""
        ...

    def browse(self, criteria: ListingFilter) -> list[Listing]:
        """Return the catalog narrowed by criteria."""
        ...
