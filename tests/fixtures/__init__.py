"""
Test Fixtures and Utilities

Shared synthetic test data for ledger and CLI tests.

All test data is synthetic and does not contain real financial information.
"""
