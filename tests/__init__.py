"""
Test Suite for the Expense Tracker

Test Structure:
- fixtures/: Shared test data and utilities
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests through click's test runner
- e2e/: Tests that run the CLI as a subprocess

Test Categories:
- Core utilities (currency, money, dates, models, config)
- Ledger operations and validation
- Interactive menu

Test Data:
All test data is synthetic.
"""
