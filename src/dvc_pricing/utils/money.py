"""Integer-cent money helpers.

Money never travels as float: amounts are integer cents, dollar figures are
Decimal.
"""

from decimal import ROUND_HALF_UP, Decimal

CENTS_PER_DOLLAR = 100


def percent_of_cents(amount_cents: int, percent: int) -> int:
    """Percentage of an amount, rounded half up to the cent."""
    share = Decimal(amount_cents) * Decimal(percent) / Decimal(100)
    return int(share.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def dollars_to_cents(dollars: Decimal | int | str) -> int:
    """Convert dollars to cents, rounded half up."""
    cents = Decimal(str(dollars)) * CENTS_PER_DOLLAR
    return int(cents.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def cents_to_dollars(cents: int) -> Decimal:
    """Exact dollar value of an amount in cents."""
    return Decimal(cents) / CENTS_PER_DOLLAR


def mean_cents(values: list[int]) -> int:
    """Arithmetic mean of cent amounts, rounded half up."""
    if not values:
        raise ValueError("mean of an empty list")
    mean = Decimal(sum(values)) / Decimal(len(values))
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_dollars_from_cents(cents: int | None, whole: bool = True) -> str:
    """Format cents as US dollars, e.g. 310000 -> "$3,100".

    Args:
        cents: Amount in cents; None formats as $0
        whole: Round to whole dollars (default) or show cents
    """
    dollars = cents_to_dollars(cents or 0)
    sign = "-" if dollars < 0 else ""
    dollars = abs(dollars)
    if whole:
        return f"{sign}${dollars.quantize(Decimal(1), rounding=ROUND_HALF_UP):,}"
    return f"{sign}${dollars.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,}"
