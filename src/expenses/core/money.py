#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper around an exact Decimal amount.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .currency import DEFAULT_CURRENCY_SYMBOL, format_amount, to_decimal


@dataclass(frozen=True)
class Money:
    """
    Immutable, exact money value.

    Sums and comparisons use the full Decimal amount; only formatting rounds
    to cents. Currency-agnostic: the symbol is applied when formatting.

    Examples:
        >>> lunch = Money.from_dollars("12.50")
        >>> str(lunch)
        '$12.50'
        >>> lunch.format("€")
        '€12.50'
        >>> Money.from_dollars("12.345") + Money.from_dollars("12.345")
        Money(amount=Decimal('24.690'))
        >>> str(Money.from_dollars("17.50") / 2)
        '$8.75'
    """

    amount: Decimal

    @classmethod
    def zero(cls) -> "Money":
        """The additive identity."""
        return cls(amount=Decimal(0))

    @classmethod
    def from_dollars(cls, dollars: Union[str, int, float, Decimal]) -> "Money":
        """
        Parse from a dollar amount like "$123.45", 12, 12.5 or Decimal("12.50").

        The value is kept exactly; sub-cent precision is not rounded away.

        Raises:
            ValueError: If the input is not a finite number
        """
        return cls(amount=to_decimal(dollars))

    @classmethod
    def sum(cls, values) -> "Money":
        """Sum an iterable of Money values, returning zero when empty."""
        total = cls.zero()
        for value in values:
            total = total + value
        return total

    def format(self, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        """Format with a fixed two decimals and the given currency symbol."""
        return format_amount(self.amount, symbol)

    def is_positive(self) -> bool:
        """True when strictly greater than zero."""
        return self.amount > 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(amount=self.amount + other.amount)

    def __truediv__(self, count: int) -> "Money":
        """Divide by a positive integer count, for averages."""
        if count <= 0:
            raise ValueError("count must be positive")
        return Money(amount=self.amount / count)

    def __eq__(self, other: object) -> bool:
        """Check equality of the exact amounts."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount == other.amount

    def __hash__(self) -> int:
        return hash(self.amount)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.amount < other.amount

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.amount > other.amount

    def __str__(self) -> str:
        """Format with the default currency symbol."""
        return self.format()

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(amount={self.amount!r})"
