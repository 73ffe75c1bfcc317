"""
Listing repository for store access.

The whole catalog is stored as one JSON array under a single key, newest
listing first. Every operation reads the full array, changes it in memory
and writes the full array back.
"""

import logging

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from shared.repository import BaseRepository
from .models import Listing

logger = logging.getLogger(__name__)

LISTINGS_KEY = "campus_market.listings.v1"

_catalog_adapter = TypeAdapter(list[Listing])


class ListingRepository(BaseRepository[Listing]):
    """
    Repository for the listing catalog.

    Note: This repository does NOT perform ownership checks.
    The service layer is responsible for verifying the caller owns a listing.
    """

    def load_all(self) -> list[Listing]:
        """
        Load the catalog.

        Returns:
            Listings in catalog order, or [] if the stored data is unreadable.
        """
        data = self._read_json(LISTINGS_KEY, [])
        try:
            return _catalog_adapter.validate_python(data)
        except PydanticValidationError as e:
            logger.warning(
                "Discarding malformed listing data (%d errors)", e.error_count()
            )
            return []

    def save_all(self, listings: list[Listing]) -> None:
        """Replace the stored catalog."""
        self._write_json(LISTINGS_KEY, _catalog_adapter.dump_python(listings, mode="json"))
