"""
Campus Market - a student-only marketplace in the terminal.

Students sign in with their campus email, publish auction or buy-now
listings, bid, buy and browse the catalog with filters. Everything is kept
in a local key-value store (see STORE_BACKEND / DATA_DIR).
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import ValidationError as PydanticValidationError
from rich.prompt import Confirm, Prompt

from core.container import ServiceContainer, get_container
from core.display import (
    build_listing_panel,
    build_listing_table,
    configure_logging,
    console,
    money,
    print_error,
    print_success,
)
from modules.accounts.exceptions import NotSignedInError
from modules.listings.exceptions import ListingValidationError
from modules.listings.models import (
    BathroomKind,
    Category,
    HousingDetails,
    Listing,
    ListingDraft,
    ListingFilter,
    ListingType,
    RoommateIntent,
    UnitKind,
)
from modules.listings.rules import bid_floor, minimum_next_bid
from modules.listings.service import utc_now
from shared.exceptions import MarketError
from shared.models import SessionUser

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value}")
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"not a number: {value}")
    return amount


def _require_user(container: ServiceContainer) -> SessionUser:
    user = container.accounts.current_user()
    if user is None:
        raise NotSignedInError()
    return user


def _password(args: argparse.Namespace) -> str:
    if args.password is not None:
        return args.password
    return Prompt.ask("Password", password=True, console=console)


# -----------------------------------------------------------------------------
# Account commands
# -----------------------------------------------------------------------------


def cmd_register(args: argparse.Namespace, container: ServiceContainer) -> int:
    user = container.accounts.register(args.email, _password(args))
    print_success(f"Welcome, {user.email}. You are signed in.")
    return 0


def cmd_login(args: argparse.Namespace, container: ServiceContainer) -> int:
    user = container.accounts.login(args.email, _password(args))
    print_success(f"Signed in as {user.email}.")
    return 0


def cmd_logout(args: argparse.Namespace, container: ServiceContainer) -> int:
    container.accounts.logout()
    console.print("Signed out.")
    return 0


def cmd_whoami(args: argparse.Namespace, container: ServiceContainer) -> int:
    user = container.accounts.current_user()
    if user is None:
        console.print("[dim]Not signed in.[/dim]")
    else:
        console.print(user.email)
    return 0


# -----------------------------------------------------------------------------
# Catalog commands
# -----------------------------------------------------------------------------


def cmd_list(args: argparse.Namespace, container: ServiceContainer) -> int:
    user = _require_user(container)
    criteria = ListingFilter(
        category=args.category,
        type=args.type,
        min_amount=args.min,
        max_amount=args.max,
        owner=user.email if args.mine else None,
        hide_sold=args.hide_sold,
        unit_kind=args.unit_kind,
        bathroom=args.bathroom,
        roommate_intent=args.roommates,
    )
    listings = container.listings.browse(criteria)
    if not listings:
        console.print("[dim]No listings match.[/dim]")
        return 0
    console.print(build_listing_table(listings, utc_now(), viewer=user.email))
    return 0


def cmd_show(args: argparse.Namespace, container: ServiceContainer) -> int:
    listing = container.listings.get(args.id)
    hint = None
    if listing.type == ListingType.AUCTION:
        increment = container.settings.bid_increment
        minimum = minimum_next_bid(listing, increment)
        if minimum > bid_floor(listing):
            hint = f"Minimum bid {money(minimum)}"
        else:
            hint = f"Bids must be more than {money(minimum)}"
    console.print(build_listing_panel(listing, utc_now(), minimum_bid=hint))
    return 0


def _housing(args: argparse.Namespace, category: str, base: Optional[Listing]) -> Optional[HousingDetails]:
    values: dict = {}
    if base is not None and base.housing is not None and category == Category.HOUSING.value:
        values = base.housing.model_dump()
    overrides = {
        "rent": args.rent,
        "unit_kind": args.unit_kind,
        "bathroom": args.bathroom,
        "roommate_intent": args.roommates,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    if not values:
        return None
    try:
        return HousingDetails(**values)
    except PydanticValidationError:
        raise ListingValidationError(
            "housing", "Housing listings need a positive rent, a unit kind and a bathroom kind."
        )


def _draft(args: argparse.Namespace, base: Optional[Listing] = None) -> ListingDraft:
    """Build a draft from command-line options, falling back to base's values."""

    def pick(value, fallback):
        return value if value is not None else fallback

    category = pick(args.category, base.category.value if base else "")
    return ListingDraft(
        title=pick(args.title, base.title if base else ""),
        category=category,
        type=pick(args.type, base.type.value if base else ListingType.AUCTION.value),
        price=pick(args.price, base.price if base else None),
        start_bid=pick(args.start_bid, base.start_bid if base else None),
        duration_hours=args.hours,
        images=args.image or (list(base.images) if base else []),
        housing=_housing(args, category, base),
    )


def cmd_sell(args: argparse.Namespace, container: ServiceContainer) -> int:
    user = _require_user(container)
    listing = container.listings.create(user, _draft(args))
    print_success(f"Published {listing.title} ({listing.id}).")
    return 0


def cmd_edit(args: argparse.Namespace, container: ServiceContainer) -> int:
    user = _require_user(container)
    existing = container.listings.get(args.id)
    listing = container.listings.update(user, args.id, _draft(args, base=existing))
    print_success(f"Updated {listing.title}.")
    return 0


def cmd_delete(args: argparse.Namespace, container: ServiceContainer) -> int:
    user = _require_user(container)
    if not args.yes and not Confirm.ask("Delete this listing?", console=console):
        console.print("Cancelled.")
        return 0
    container.listings.delete(user, args.id)
    print_success("Listing deleted.")
    return 0


def cmd_bid(args: argparse.Namespace, container: ServiceContainer) -> int:
    _require_user(container)
    listing = container.listings.place_bid(args.id, args.amount)
    print_success(f"Bid of {money(listing.current_bid)} placed on {listing.title}.")
    return 0


def cmd_buy(args: argparse.Namespace, container: ServiceContainer) -> int:
    _require_user(container)
    listing = container.listings.get(args.id)
    if not args.yes and listing.type == ListingType.BUY and not listing.sold:
        question = f"Buy {listing.title} for {money(listing.price)}?"
        if not Confirm.ask(question, console=console):
            console.print("Cancelled.")
            return 0
    listing = container.listings.buy_now(args.id)
    print_success(f"You bought {listing.title}. Meet on campus to complete the purchase.")
    return 0


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------


def _add_listing_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", help="Listing title")
    parser.add_argument(
        "--category",
        choices=[c.value for c in Category],
        help="Listing category",
    )
    parser.add_argument("--type", choices=[t.value for t in ListingType], help="auction or buy")
    parser.add_argument("--price", type=_amount, help="Buy-now price")
    parser.add_argument("--start-bid", type=_amount, help="Opening bid for auctions")
    parser.add_argument("--hours", type=int, help="Auction length in hours")
    parser.add_argument(
        "--image",
        action="append",
        help="Image reference (repeat for several photos)",
    )
    _add_housing_options(parser, rent=True)


def _add_housing_options(parser: argparse.ArgumentParser, rent: bool = False) -> None:
    if rent:
        parser.add_argument("--rent", type=_amount, help="Monthly rent (Housing)")
    parser.add_argument("--unit-kind", choices=[u.value for u in UnitKind], help="Housing unit kind")
    parser.add_argument("--bathroom", choices=[b.value for b in BathroomKind], help="Bathroom kind")
    parser.add_argument(
        "--roommates",
        choices=[r.value for r in RoommateIntent],
        help="Roommate situation",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus-market",
        description="Buy, sell and bid on the student marketplace",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the LOG_LEVEL setting",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("register", cmd_register, "Create an account and sign in"),
        ("login", cmd_login, "Sign in"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("email", help="Student email address")
        p.add_argument("--password", help="Password (prompted when omitted)")
        p.set_defaults(handler=handler)

    sub.add_parser("logout", help="Sign out").set_defaults(handler=cmd_logout)
    sub.add_parser("whoami", help="Show the signed-in account").set_defaults(handler=cmd_whoami)

    p = sub.add_parser("list", help="Browse listings")
    p.add_argument("--category", choices=[c.value for c in Category], help="Only this category")
    p.add_argument("--type", choices=[t.value for t in ListingType], help="auction or buy")
    p.add_argument("--min", type=_amount, help="Lowest price or current bid")
    p.add_argument("--max", type=_amount, help="Highest price or current bid")
    p.add_argument("--mine", action="store_true", help="Only your listings")
    p.add_argument("--hide-sold", action="store_true", help="Leave out sold items")
    _add_housing_options(p)
    p.set_defaults(handler=cmd_list)

    p = sub.add_parser("show", help="Show one listing")
    p.add_argument("id", help="Listing ID")
    p.set_defaults(handler=cmd_show)

    p = sub.add_parser("sell", help="Publish a listing")
    _add_listing_options(p)
    p.set_defaults(handler=cmd_sell)

    p = sub.add_parser("edit", help="Edit one of your listings")
    p.add_argument("id", help="Listing ID")
    _add_listing_options(p)
    p.set_defaults(handler=cmd_edit)

    p = sub.add_parser("delete", help="Delete one of your listings")
    p.add_argument("id", help="Listing ID")
    p.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")
    p.set_defaults(handler=cmd_delete)

    p = sub.add_parser("bid", help="Bid on an auction")
    p.add_argument("id", help="Listing ID")
    p.add_argument("amount", type=_amount, help="Bid amount")
    p.set_defaults(handler=cmd_bid)

    p = sub.add_parser("buy", help="Buy a buy-now listing")
    p.add_argument("id", help="Listing ID")
    p.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")
    p.set_defaults(handler=cmd_buy)

    return parser


def main(argv: Optional[list[str]] = None, container: Optional[ServiceContainer] = None) -> int:
    """Parse arguments, run one command and return the exit status."""
    args = build_parser().parse_args(argv)
    container = container or get_container()
    configure_logging(args.log_level or container.settings.log_level)

    try:
        return args.handler(args, container)
    except MarketError as e:
        print_error(e)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
