"""
Command Line Interface Package

This package provides:
- Main CLI entry point (expenses) with utility commands (version, config)
- Interactive menu over an in-memory ledger (expenses run)

Command Structure:
- expenses: Main entry point with global options (--config-env, --verbose, --debug)
- expenses run: Add, view, total, remove and report on expenses until exit
"""
