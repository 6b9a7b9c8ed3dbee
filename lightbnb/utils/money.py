"""
Currency helpers. Amounts are stored as integer cents and supplied in dollars.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

CENTS_PER_DOLLAR = 100

Amount = Union[int, float, str, Decimal]


def dollars_to_cents(amount: Amount) -> int:
    """
    Convert a dollar amount to integer cents, rounding half up to the nearest cent.

    Args:
        amount: Dollar amount as int, float, numeric string or Decimal

    Returns:
        Amount in cents

    Raises:
        ValueError: If amount is not a finite number
    """
    if isinstance(amount, bool):
        raise ValueError("Amount must be a number, not a boolean")

    try:
        # str() first so 19.99 stays 19.99 instead of its binary expansion
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}")

    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")

    cents = (value * CENTS_PER_DOLLAR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


def cents_to_dollars(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal dollar amount."""
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(Decimal("0.01"))
