"""Catalog filtering."""

from .models import Listing, ListingFilter
from .rules import display_amount


def matches(listing: Listing, criteria: ListingFilter) -> bool:
    """Return True if listing passes every facet set on criteria."""
    if criteria.category is not None and listing.category != criteria.category:
        return False
    if criteria.type is not None and listing.type != criteria.type:
        return False
    if criteria.owner is not None and listing.owner != criteria.owner.strip().lower():
        return False
    if criteria.hide_sold and listing.sold:
        return False

    amount = display_amount(listing)
    if criteria.min_amount is not None and amount < criteria.min_amount:
        return False
    if criteria.max_amount is not None and amount > criteria.max_amount:
        return False

    housing_facets = (criteria.unit_kind, criteria.bathroom, criteria.roommate_intent)
    if any(f is not None for f in housing_facets):
        housing = listing.housing
        if housing is None:
            return False
        if criteria.unit_kind is not None and housing.unit_kind != criteria.unit_kind:
            return False
        if criteria.bathroom is not None and housing.bathroom != criteria.bathroom:
            return False
        if criteria.roommate_intent is not None and housing.roommate_intent != criteria.roommate_intent:
            return False

    return True


def filter_listings(listings: list[Listing], criteria: ListingFilter) -> list[Listing]:
    """
    Select the listings matching criteria.

    Returns a new list in catalog order; the input list is left untouched.
    """
    return [listing for listing in listings if matches(listing, criteria)]
