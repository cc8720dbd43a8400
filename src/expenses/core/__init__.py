"""
Core Utilities Package

Shared primitives used by the ledger and the CLI.

This package provides:
- Currency handling with exact Decimal amounts
- Calendar dates with consistent ISO formatting
- Data models for expenses, updates, filters and reports
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_currency_symbol,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    DEFAULT_CURRENCY_SYMBOL,
    cents_to_dollars_str,
    format_amount,
    to_decimal,
)
from .dates import FinancialDate
from .models import (
    Category,
    CategorySummary,
    Expense,
    ExpenseReport,
    ExpenseUpdate,
    FilterCriteria,
)
from .money import Money

__all__ = [
    "Category",
    "CategorySummary",
    # Configuration
    "Config",
    "DEFAULT_CURRENCY_SYMBOL",
    "Environment",
    # Data models
    "Expense",
    "ExpenseReport",
    "ExpenseUpdate",
    "FilterCriteria",
    "FinancialDate",
    "Money",
    # Currency utilities
    "cents_to_dollars_str",
    "format_amount",
    "get_config",
    "get_currency_symbol",
    "is_development",
    "is_production",
    "is_test",
    "to_decimal",
    "reload_config",
]
