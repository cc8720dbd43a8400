#!/usr/bin/env python3
"""
Ledger Error Types

Every ledger failure is a LedgerError subclass carrying a message suitable for
showing directly to the operator. None of them is fatal to the process.
"""

from ..core.models import Category


class LedgerError(Exception):
    """Base class for ledger operation failures."""

    default_message = "Ledger operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidAmountError(LedgerError):
    """Raised when an amount is non-numeric or not strictly positive."""

    default_message = "Amount must be a positive number"


class InvalidCategoryError(LedgerError):
    """Raised when a category is not in the fixed category set."""

    default_message = f"Category must be one of: {', '.join(Category.labels())}"


class ExpenseNotFoundError(LedgerError):
    """Raised when no expense has the requested id."""

    default_message = "Expense ID not found"


class EmptyLedgerError(LedgerError):
    """Raised when a view or report is requested from a ledger with no expenses."""

    default_message = "No expenses recorded."
