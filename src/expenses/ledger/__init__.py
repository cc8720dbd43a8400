"""
Expense Ledger Package

The in-memory expense store and its query engine.

This package provides:
- Ledger: add, edit, remove, filter, total and report over expense records
- Typed errors for every failure an operator can cause
- Parsing of raw operator input into validated amounts, categories and ids
"""

from .errors import (
    EmptyLedgerError,
    ExpenseNotFoundError,
    InvalidAmountError,
    InvalidCategoryError,
    LedgerError,
)
from .ledger import Ledger
from .parsing import parse_amount, parse_category, parse_description, parse_expense_id

__all__ = [
    "EmptyLedgerError",
    "ExpenseNotFoundError",
    "InvalidAmountError",
    "InvalidCategoryError",
    "Ledger",
    "LedgerError",
    "parse_amount",
    "parse_category",
    "parse_description",
    "parse_expense_id",
]
