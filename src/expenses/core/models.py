#!/usr/bin/env python3
"""
Core Data Models for the Expense Tracker

Data structures shared between the ledger and the CLI: the expense record,
partial updates, filter criteria, and report summaries.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from .dates import FinancialDate
from .money import Money

# Loose amount input accepted at the ledger boundary
AmountInput = Union[str, int, float, Decimal, Money]


class Category(Enum):
    """
    Fixed, closed set of expense categories.

    Declaration order is the order used for report breakdowns.
    """

    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    OTHER = "other"

    @classmethod
    def labels(cls) -> list[str]:
        """Category labels in declared order."""
        return [category.value for category in cls]

    @classmethod
    def normalize(cls, label: str) -> str:
        """Trim and lowercase a raw category label without validating it."""
        return label.strip().lower()

    @classmethod
    def lookup(cls, label: str) -> Optional["Category"]:
        """Find the category for a raw label, or None when unknown."""
        try:
            return cls(cls.normalize(label))
        except ValueError:
            return None


@dataclass
class Expense:
    """
    One recorded transaction.

    Ids are assigned by the ledger. Records are mutated only through
    Ledger.edit, which revalidates amount and category.
    """

    id: int
    amount: Money
    category: Category
    description: str = ""
    date: FinancialDate = field(default_factory=FinancialDate.today)

    @property
    def date_str(self) -> str:
        """ISO-8601 date string."""
        return self.date.to_iso_string()


@dataclass(frozen=True)
class ExpenseUpdate:
    """
    Partial update applied by Ledger.edit.

    Fields left as None are not touched.
    """

    amount: Optional[AmountInput] = None
    category: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class FilterCriteria:
    """
    Optional constraints for Ledger.filter, combined with logical AND.

    min and max bounds are inclusive. date is matched against the ISO string.
    """

    category: Optional[str] = None
    min: Optional[AmountInput] = None
    max: Optional[AmountInput] = None
    date: Optional[str] = None


@dataclass(frozen=True)
class CategorySummary:
    """Aggregate for one category within a report."""

    category: Category
    total: Money
    count: int


@dataclass(frozen=True)
class ExpenseReport:
    """Per-category and overall aggregate summary of a non-empty ledger."""

    categories: list[CategorySummary]
    total: Money
    count: int
    average: Money
    generated_on: FinancialDate = field(default_factory=FinancialDate.today)
