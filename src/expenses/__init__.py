"""
Expense Tracker - Personal Expense Ledger

Records expenses in memory, categorizes them, and produces aggregate reports.

Key Features:
- Fixed category set with case-insensitive input
- Integer-cent arithmetic for exact totals and averages
- Filtering by category, amount range and date
- Per-category reports
- Interactive menu-driven CLI

Domain Packages:
- core: Money, dates, data models, configuration
- ledger: The expense store and its query operations
- cli: Command-line interface

Example Usage:
    from expenses import Ledger
    ledger = Ledger()
    ledger.add("12.50", "Food", "lunch")
    print(ledger.report().total)
"""

__version__ = "0.1.0"
__author__ = "Expense Tracker Developers"

# Export core primitives for easy access
from .core.config import Environment, get_config
from .core.models import Category, Expense, ExpenseReport, ExpenseUpdate, FilterCriteria
from .core.money import Money

# Export the ledger
from .ledger import (
    EmptyLedgerError,
    ExpenseNotFoundError,
    InvalidAmountError,
    InvalidCategoryError,
    Ledger,
    LedgerError,
)

__all__ = [
    # Core models
    "Category",
    "Expense",
    "ExpenseReport",
    "ExpenseUpdate",
    "FilterCriteria",
    "Money",
    # Ledger
    "Ledger",
    "LedgerError",
    "EmptyLedgerError",
    "ExpenseNotFoundError",
    "InvalidAmountError",
    "InvalidCategoryError",
    # Configuration
    "get_config",
    "Environment",
]
