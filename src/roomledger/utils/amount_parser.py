"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

CENT = Decimal("0.01")


def quantize_amount(amount: Decimal | int | str) -> Decimal:
    """Round an amount to currency precision (two places, half-up).

    Raises:
        ValueError: If the value is not a finite number or is too large to round
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount}': {e}")
    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{amount}'")
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Amount '{amount}' is too large")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "300"
    - "300.50"
    - "€300.50" / "300.50 EUR"
    - "1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount rounded to two places

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency symbols and a trailing currency code
    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = re.sub(r"\s*[A-Za-z]{3}$", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    amount_str = amount_str.strip()

    try:
        return quantize_amount(Decimal(amount_str))
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
