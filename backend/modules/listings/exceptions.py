"""
Listings module exceptions.
"""

from decimal import Decimal

from shared.exceptions import (
    MarketError,
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class ListingError(MarketError):
    """Base exception for listing-related errors."""

    pass


class ListingValidationError(ValidationError):
    """Raised with the first constraint a listing draft fails."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            reason,
            code="LISTING_INVALID",
            details={"field": field, "reason": reason},
        )
        self.field = field


class ListingNotFoundError(NotFoundError):
    """Raised when a listing is not in the catalog."""

    def __init__(self, listing_id: str):
        super().__init__(
            f"Listing not found: {listing_id}",
            code="LISTING_NOT_FOUND",
            details={"listing_id": listing_id},
        )


class ListingAccessDeniedError(AuthorizationError):
    """Raised when someone other than the owner edits or deletes a listing."""

    def __init__(self, listing_id: str, email: str):
        super().__init__(
            "Only the seller can change this listing.",
            code="LISTING_ACCESS_DENIED",
            details={"listing_id": listing_id, "email": email},
        )


class AuctionError(ListingError):
    """Base exception for bidding failures."""

    pass


class NotAnAuctionError(AuctionError):
    """Raised when bidding on a buy-now listing."""

    def __init__(self, listing_id: str):
        super().__init__(
            "This listing is not an auction.",
            code="NOT_AN_AUCTION",
            details={"listing_id": listing_id},
        )


class AuctionEndedError(AuctionError):
    """Raised when bidding at or after the auction deadline."""

    def __init__(self, listing_id: str):
        super().__init__(
            "This auction has ended.",
            code="AUCTION_ENDED",
            details={"listing_id": listing_id},
        )


class BidTooLowError(AuctionError):
    """Raised when a bid does not beat the current bid."""

    def __init__(self, listing_id: str, amount: Decimal, floor: Decimal, minimum: Decimal):
        if minimum > floor:
            message = f"Bid must be at least ${minimum:.2f}."
        else:
            message = f"Bid must be more than ${floor:.2f}."
        super().__init__(
            message,
            code="BID_TOO_LOW",
            details={
                "listing_id": listing_id,
                "amount": str(amount),
                "current": str(floor),
                "minimum": str(minimum),
            },
        )


class SaleError(ListingError):
    """Base exception for buy-now failures."""

    pass


class NotBuyableError(SaleError):
    """Raised when buying an auction or an already sold listing."""

    def __init__(self, listing_id: str, reason: str):
        super().__init__(
            reason,
            code="NOT_BUYABLE",
            details={"listing_id": listing_id, "reason": reason},
        )
