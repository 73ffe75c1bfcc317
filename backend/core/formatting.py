"""Time and money formatting helpers. Pure functions, no I/O."""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

CENTS = Decimal("0.01")

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def time_left(ms: int) -> str:
    """Format the time remaining before a deadline.

    Uses the largest units first and drops partial units:
    7_500_000 -> "2h 5m", 150_000 -> "2m", 42_900 -> "42s".

    Args:
        ms: Deadline minus now, in milliseconds

    Returns:
        "Ended" when ms <= 0, otherwise a compact duration
    """
    if ms <= 0:
        return "Ended"
    hours, rest = divmod(ms, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    if hours:
        return f"{hours}h {minutes}m"
    if minutes:
        return f"{minutes}m"
    return f"{rest // MS_PER_SECOND}s"


def format_currency(amount: Union[Decimal, int, float]) -> str:
    """Render an amount with exactly two decimal places.

    Example: 40 -> "40.00", Decimal("10.005") -> "10.01"

    Any finite amount renders, however many digits it has.
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))
