#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Amounts are held as exact Decimal values so sums and comparisons never pick up
floating-point or rounding error. Rounding happens only for display.

Currency Representations:
- User input arrives as strings ("12.50", "$12.50", "1,250"), ints, floats or Decimals
- Internal values are exact Decimals: 12.345 stays 12.345
- Display uses a currency symbol plus a fixed two-decimal amount: "$12.35"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Convert user input through Decimal without rounding
- Round half-up to whole cents only when formatting
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

DEFAULT_CURRENCY_SYMBOL = "$"

_CENT = Decimal("0.01")


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a two-decimal string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted amount without currency symbol

    Example:
        cents_to_dollars_str(1250) -> "12.50"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def decimal_to_cents(amount: Decimal) -> int:
    """
    Round a Decimal amount half-up to whole cents.

    Example:
        decimal_to_cents(Decimal("12.345")) -> 1235
    """
    return int((amount.quantize(_CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value())


def format_amount(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount with two decimals (rounded half-up) and a currency symbol."""
    return f"{symbol}{cents_to_dollars_str(decimal_to_cents(amount))}"


def to_decimal(value: Union[str, int, float, Decimal]) -> Decimal:
    """
    Convert loosely-typed numeric input to a finite Decimal, without rounding.

    Strings may carry surrounding whitespace, a leading "$" and thousands
    separators. Floats go through their shortest repr so 12.1 stays 12.1.

    Examples:
        to_decimal("12.50") -> Decimal("12.50")
        to_decimal(" $1,234.5 ") -> Decimal("1234.5")
        to_decimal("0.004") -> Decimal("0.004")

    Raises:
        ValueError: If the input is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            result = Decimal(repr(value))
        else:
            clean = str(value).replace("$", "").replace(",", "").strip()
            result = Decimal(clean)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Not a number: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result
