"""Tests for auction and sale rules."""

import pytest
from datetime import timedelta
from decimal import Decimal

from modules.listings.models import AuctionState, SaleState
from modules.listings.rules import (
    auction_state,
    bid_floor,
    display_amount,
    is_acceptable_bid,
    listing_status,
    minimum_next_bid,
    remaining_ms,
    sale_state,
)
from tests.conftest import T0
from tests.modules.listings.factories import make_auction, make_listing


class TestBidFloor:
    def test_floor_is_start_bid_without_bids(self):
        assert bid_floor(make_auction()) == Decimal("50")

    def test_floor_is_current_bid_after_bids(self):
        assert bid_floor(make_auction(current_bid=Decimal("72"))) == Decimal("72")

    def test_minimum_next_bid_default(self):
        """With no increment the minimum is the floor itself (strictly greater rule)."""
        assert minimum_next_bid(make_auction()) == Decimal("50")

    def test_minimum_next_bid_with_increment(self):
        assert minimum_next_bid(make_auction(), Decimal("1")) == Decimal("51")


class TestIsAcceptableBid:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            ("49", False),
            ("50", False),
            ("50.01", True),
            ("75", True),
        ],
    )
    def test_strictly_greater(self, amount, expected):
        assert is_acceptable_bid(make_auction(), Decimal(amount)) is expected

    def test_increment(self):
        """With an increment of 1 the bid must reach floor + 1."""
        listing = make_auction()
        assert is_acceptable_bid(listing, Decimal("50.5"), Decimal("1")) is False
        assert is_acceptable_bid(listing, Decimal("51"), Decimal("1")) is True


class TestStates:
    def test_auction_open_before_deadline(self):
        listing = make_auction()
        assert auction_state(listing, T0) == AuctionState.OPEN
        assert auction_state(listing, listing.ends_at - timedelta(milliseconds=1)) == AuctionState.OPEN

    def test_auction_ended_at_deadline(self):
        """The deadline itself counts as ended."""
        listing = make_auction()
        assert auction_state(listing, listing.ends_at) == AuctionState.ENDED
        assert auction_state(listing, listing.ends_at + timedelta(days=3)) == AuctionState.ENDED

    def test_auction_state_of_buy_listing(self):
        with pytest.raises(ValueError):
            auction_state(make_listing(), T0)

    def test_sale_state(self):
        assert sale_state(make_listing()) == SaleState.AVAILABLE
        assert sale_state(make_listing(sold=True)) == SaleState.SOLD

    def test_sale_state_of_auction(self):
        with pytest.raises(ValueError):
            sale_state(make_auction())

    def test_listing_status(self):
        assert listing_status(make_auction(), T0) == "open"
        assert listing_status(make_listing(sold=True), T0) == "sold"


class TestDisplayHelpers:
    def test_remaining_ms(self):
        listing = make_auction()
        assert remaining_ms(listing, T0) == 24 * 60 * 60 * 1000
        assert remaining_ms(listing, listing.ends_at + timedelta(seconds=1)) == -1000

    def test_remaining_ms_buy_listing(self):
        assert remaining_ms(make_listing(), T0) is None

    def test_display_amount(self):
        assert display_amount(make_listing()) == Decimal("15")
        assert display_amount(make_auction(current_bid=Decimal("60"))) == Decimal("60")
