"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from datetime import date
from decimal import Decimal

import pytest

from expenses.core.config import reload_config
from expenses.core.dates import FinancialDate
from expenses.ledger import Ledger


@pytest.fixture
def ledger() -> Ledger:
    """An empty ledger."""
    return Ledger()


@pytest.fixture
def populated_ledger() -> Ledger:
    """Ledger with one expense in most categories, on two distinct dates."""
    ledger = Ledger()
    first_day = FinancialDate(date=date(2024, 8, 15))
    second_day = FinancialDate(date=date(2024, 8, 16))

    ledger.add("12.50", "Food", "lunch", date=first_day)  # id 1
    ledger.add(5, "transport", "bus fare", date=first_day)  # id 2
    ledger.add("45.00", "entertainment", "concert", date=second_day)  # id 3
    ledger.add("120.99", "utilities", "electric bill", date=second_day)  # id 4
    ledger.add("8.25", "food", "coffee and bagel", date=second_day)  # id 5
    return ledger


@pytest.fixture
def currency_test_cases() -> list[dict]:
    """Test cases for amount parsing."""
    return [
        {"input": "$45.99", "amount": Decimal("45.99")},
        {"input": "0.05", "amount": Decimal("0.05")},
        {"input": "1", "amount": Decimal("1")},
        {"input": "1,234.50", "amount": Decimal("1234.50")},
        {"input": "0.004", "amount": Decimal("0.004")},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and a fresh configuration."""
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_CURRENCY", "$")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("DEBUG", raising=False)
    reload_config()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the installed CLI"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "ledger: Tests for ledger operations"
    )
