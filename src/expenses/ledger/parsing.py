#!/usr/bin/env python3
"""
Input Parsing for Ledger Operations

Raw operator input (usually strings straight from a prompt) is parsed and
normalized here before the ledger touches its state. Each parser raises the
matching typed LedgerError so callers can tell failures apart.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from ..core.models import AmountInput, Category
from ..core.money import Money
from .errors import ExpenseNotFoundError, InvalidAmountError, InvalidCategoryError


def parse_amount(value: AmountInput) -> Money:
    """
    Parse a strictly positive amount.

    Accepts Money, Decimal, int, float, or strings such as "12.50" and "$1,200".
    The value is kept exactly, so "0.004" is a valid positive amount.

    Raises:
        InvalidAmountError: If the value is not numeric or not greater than zero
    """
    if isinstance(value, Money):
        amount = value
    else:
        try:
            amount = Money.from_dollars(value)
        except ValueError as e:
            raise InvalidAmountError() from e

    if not amount.is_positive():
        raise InvalidAmountError()
    return amount


def parse_bound(value: AmountInput) -> Money:
    """
    Parse a filter bound, which may be zero or negative.

    Raises:
        InvalidAmountError: If the value is not numeric
    """
    if isinstance(value, Money):
        return value
    try:
        return Money.from_dollars(value)
    except ValueError as e:
        raise InvalidAmountError() from e


def parse_category(value: Union[str, Category]) -> Category:
    """
    Parse a category label, ignoring case and surrounding whitespace.

    Raises:
        InvalidCategoryError: If the label is not in the fixed category set
    """
    if isinstance(value, Category):
        return value
    if not isinstance(value, str):
        raise InvalidCategoryError()

    category = Category.lookup(value)
    if category is None:
        raise InvalidCategoryError()
    return category


def parse_description(value: str | None) -> str:
    """Trim a description; None becomes the empty string."""
    if value is None:
        return ""
    return str(value).strip()


def parse_expense_id(value: Union[int, str]) -> int:
    """
    Parse an expense id.

    Raises:
        ExpenseNotFoundError: If the value cannot name any expense
    """
    if isinstance(value, bool):
        raise ExpenseNotFoundError()
    if isinstance(value, int):
        return value
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ExpenseNotFoundError() from e

    # Whole values such as "3.0" name expense 3
    if not number.is_finite() or number != number.to_integral_value():
        raise ExpenseNotFoundError()
    return int(number)
