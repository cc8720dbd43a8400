#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable calendar date wrapper with consistent ISO-8601 formatting.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def month_year(self) -> str:
        """Format as full month name and year, e.g. "October 2026"."""
        return self.date.strftime("%B %Y")

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"
