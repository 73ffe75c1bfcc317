"""
Listings service implementation.

Publishes, edits and removes listings, and runs the bid and buy-now flows
against the stored catalog. New listings go to the front of the catalog.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable, Optional

from shared.config import Settings, get_settings
from shared.models import SessionUser
from shared.storage import KeyValueStore

from .filters import filter_listings
from .interfaces import IListingService
from .models import Category, Listing, ListingDraft, ListingFilter, ListingType
from .repository import ListingRepository
from .rules import bid_floor, is_acceptable_bid, minimum_next_bid
from .exceptions import (
    AuctionEndedError,
    BidTooLowError,
    ListingAccessDeniedError,
    ListingNotFoundError,
    ListingValidationError,
    NotAnAuctionError,
    NotBuyableError,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_listing_id(now: datetime) -> str:
    """Opaque id whose prefix sorts by creation time."""
    return f"l_{int(now.timestamp() * 1000):013d}_{uuid.uuid4().hex[:8]}"


def _is_finite(value: Optional[Decimal]) -> bool:
    return value is not None and value.is_finite()


class ListingService(IListingService):
    """
    Listing service backed by a key-value store.

    Implements IListingService. Every operation reloads the catalog,
    so the store stays the only authoritative copy.
    """

    def __init__(
        self,
        store: KeyValueStore,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ):
        self._settings = settings or get_settings()
        self._repo = ListingRepository(store)
        self._clock = clock

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _validate(self, draft: ListingDraft) -> dict[str, Any]:
        """
        Check a draft and return its normalized fields.

        Raises ListingValidationError for the first constraint that fails.
        """
        title = draft.title.strip()
        if not title:
            raise ListingValidationError("title", "Title is required.")

        try:
            category = Category(draft.category)
        except ValueError:
            raise ListingValidationError("category", "Choose a category.")

        if category == Category.HOUSING and draft.housing is None:
            raise ListingValidationError(
                "housing", "Housing listings need rent, unit, bathroom and roommate details."
            )
        if category != Category.HOUSING and draft.housing is not None:
            raise ListingValidationError("housing", "Only Housing listings carry housing details.")

        if not draft.images:
            raise ListingValidationError("images", "At least one photo is required.")
        max_images = self._settings.max_images
        if max_images is not None and len(draft.images) > max_images:
            raise ListingValidationError("images", f"At most {max_images} photos are allowed.")

        try:
            listing_type = ListingType(draft.type)
        except ValueError:
            raise ListingValidationError("type", "Choose auction or buy.")

        fields: dict[str, Any] = {
            "title": title,
            "category": category,
            "type": listing_type,
            "images": list(draft.images),
            "housing": draft.housing,
        }

        if listing_type == ListingType.BUY:
            if not _is_finite(draft.price) or draft.price <= 0:
                raise ListingValidationError("price", "Enter a valid price.")
            if draft.price > self._settings.max_amount:
                raise ListingValidationError("price", f"Price cannot exceed ${self._settings.max_amount:.2f}.")
            fields["price"] = draft.price
        else:
            if not _is_finite(draft.start_bid) or draft.start_bid < 0:
                raise ListingValidationError("start_bid", "Enter a valid starting bid.")
            if draft.start_bid > self._settings.max_amount:
                raise ListingValidationError(
                    "start_bid", f"Starting bid cannot exceed ${self._settings.max_amount:.2f}."
                )
            duration = draft.duration_hours
            if duration is None:
                duration = self._settings.default_auction_hours
            if duration < 1:
                raise ListingValidationError("duration_hours", "Auctions must run at least 1 hour.")
            if duration > self._settings.max_auction_hours:
                raise ListingValidationError(
                    "duration_hours",
                    f"Auctions can run at most {self._settings.max_auction_hours} hours.",
                )
            fields["start_bid"] = draft.start_bid
            fields["duration"] = timedelta(hours=duration)

        return fields

    # -------------------------------------------------------------------------
    # Catalog access
    # -------------------------------------------------------------------------

    def _locate(self, listings: list[Listing], listing_id: str) -> int:
        for index, listing in enumerate(listings):
            if listing.id == listing_id:
                return index
        raise ListingNotFoundError(listing_id)

    def _locate_owned(self, listings: list[Listing], user: SessionUser, listing_id: str) -> int:
        index = self._locate(listings, listing_id)
        if listings[index].owner != user.email:
            logger.debug("Rejected change to %s by %s", listing_id, user.email)
            raise ListingAccessDeniedError(listing_id, user.email)
        return index

    def get(self, listing_id: str) -> Listing:
        listings = self._repo.load_all()
        return listings[self._locate(listings, listing_id)]

    def list_all(self) -> list[Listing]:
        return self._repo.load_all()

    def browse(self, criteria: ListingFilter) -> list[Listing]:
        return filter_listings(self._repo.load_all(), criteria)

    # -------------------------------------------------------------------------
    # Owner operations
    # -------------------------------------------------------------------------

    def create(self, user: SessionUser, draft: ListingDraft) -> Listing:
        """Validate the draft, assign an id and prepend it to the catalog."""
        fields = self._validate(draft)
        now = self._clock()
        duration = fields.pop("duration", None)

        if fields["type"] == ListingType.AUCTION:
            fields["current_bid"] = fields["start_bid"]
            fields["ends_at"] = now + duration

        listing = Listing(
            id=new_listing_id(now),
            owner=user.email,
            created_at=now,
            **fields,
        )

        listings = self._repo.load_all()
        listings.insert(0, listing)
        self._repo.save_all(listings)
        logger.info("Created %s listing %s for %s", listing.type.value, listing.id, user.email)
        return listing

    def update(self, user: SessionUser, listing_id: str, draft: ListingDraft) -> Listing:
        """Re-validate and replace a listing in place, keeping id/owner/created_at."""
        listings = self._repo.load_all()
        index = self._locate_owned(listings, user, listing_id)
        existing = listings[index]

        fields = self._validate(draft)
        duration = fields.pop("duration", None)

        if fields["type"] == ListingType.AUCTION:
            if existing.type == ListingType.AUCTION:
                fields["current_bid"] = max(existing.current_bid, fields["start_bid"])
                fields["ends_at"] = existing.ends_at
            else:
                fields["current_bid"] = fields["start_bid"]
                fields["ends_at"] = self._clock() + duration
        elif existing.type == ListingType.BUY:
            fields["sold"] = existing.sold

        updated = Listing(
            id=existing.id,
            owner=existing.owner,
            created_at=existing.created_at,
            **fields,
        )
        listings[index] = updated
        self._repo.save_all(listings)
        logger.info("Updated listing %s", listing_id)
        return updated

    def delete(self, user: SessionUser, listing_id: str) -> None:
        listings = self._repo.load_all()
        index = self._locate_owned(listings, user, listing_id)
        del listings[index]
        self._repo.save_all(listings)
        logger.info("Deleted listing %s", listing_id)

    # -------------------------------------------------------------------------
    # Bid and buy flows
    # -------------------------------------------------------------------------

    def place_bid(self, listing_id: str, amount: Decimal) -> Listing:
        """Accept a bid that beats the current one while the auction is open."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        if not amount.is_finite():
            raise ListingValidationError("amount", "Enter a valid bid.")
        if amount > self._settings.max_amount:
            raise ListingValidationError("amount", f"Bids cannot exceed ${self._settings.max_amount:.2f}.")

        listings = self._repo.load_all()
        index = self._locate(listings, listing_id)
        listing = listings[index]

        if listing.type != ListingType.AUCTION:
            raise NotAnAuctionError(listing_id)
        if self._clock() >= listing.ends_at:
            raise AuctionEndedError(listing_id)

        increment = self._settings.bid_increment
        if not is_acceptable_bid(listing, amount, increment):
            logger.debug("Rejected bid of %s on %s", amount, listing_id)
            raise BidTooLowError(
                listing_id,
                amount,
                floor=bid_floor(listing),
                minimum=minimum_next_bid(listing, increment),
            )

        updated = listing.model_copy(update={"current_bid": amount})
        listings[index] = updated
        self._repo.save_all(listings)
        logger.info("Bid of %s accepted on %s", amount, listing_id)
        return updated

    def buy_now(self, listing_id: str) -> Listing:
        """Mark an available buy-now listing as sold."""
        listings = self._repo.load_all()
        index = self._locate(listings, listing_id)
        listing = listings[index]

        if listing.type != ListingType.BUY:
            raise NotBuyableError(listing_id, "Auctions cannot be bought outright.")
        if listing.sold:
            raise NotBuyableError(listing_id, "This item has already been sold.")

        updated = listing.model_copy(update={"sold": True})
        listings[index] = updated
        self._repo.save_all(listings)
        # Payment and hand-off happen off-platform.
        logger.info("Listing %s marked sold", listing_id)
        return updated


# Verify the implementation satisfies the interface
def _verify_interface(store: KeyValueStore) -> IListingService:
    """Type check that ListingService implements IListingService."""
    service: IListingService = ListingService(store)
    return service
