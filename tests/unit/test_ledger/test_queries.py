#!/usr/bin/env python3
"""Tests for ledger totals, filters and reports."""

from datetime import date
from decimal import Decimal

import pytest

from expenses.core import Category, FilterCriteria, FinancialDate, Money
from expenses.ledger import EmptyLedgerError, Ledger
from tests.fixtures.synthetic_data import generate_synthetic_expenses


@pytest.mark.ledger
class TestLedgerTotal:
    """Test Ledger.total."""

    def test_empty_total_is_zero(self, ledger):
        """Test the additive identity."""
        assert ledger.total() == Money.zero()
        assert ledger.total("food") == Money.zero()

    def test_scenario_totals(self, ledger):
        """Test the lunch and bus scenario."""
        ledger.add(12.50, "Food", "lunch")
        ledger.add(5, "transport")

        assert ledger.total() == Money.from_dollars("17.50")
        assert ledger.total("food") == Money.from_dollars("12.50")

    def test_category_match_is_normalized(self, populated_ledger):
        """Test case and whitespace are ignored."""
        assert populated_ledger.total("  FOOD ") == Money.from_dollars("20.75")

    def test_unknown_category_totals_zero(self, populated_ledger):
        """Test unknown categories are not validated."""
        assert populated_ledger.total("groceries") == Money.zero()

    def test_blank_category_sums_everything(self, populated_ledger):
        """Test a blank category means all expenses."""
        assert populated_ledger.total("") == populated_ledger.total()
        assert populated_ledger.total() == Money.from_dollars("191.74")

    def test_category_total_is_exact(self, ledger):
        """Test per-category totals equal the exact sum of their amounts."""
        data = generate_synthetic_expenses(num_expenses=200)
        for raw in data:
            ledger.add(raw["amount"], raw["category"], raw["description"])

        for label in Category.labels():
            expected = sum(
                (Decimal(r["amount"]) for r in data if r["category"].strip().lower() == label),
                Decimal(0),
            )
            assert ledger.total(label).amount == expected
        assert ledger.total().amount == sum((Decimal(r["amount"]) for r in data), Decimal(0))


@pytest.mark.ledger
class TestLedgerFilter:
    """Test Ledger.filter."""

    def test_amount_range_inclusive(self, populated_ledger):
        """Test min and max bounds include their endpoints."""
        populated_ledger.add(10, "other")  # id 6
        populated_ledger.add(50, "other")  # id 7

        matches = populated_ledger.filter(FilterCriteria(min=10, max=50))

        assert [e.id for e in matches] == [1, 3, 6, 7]
        assert all(Decimal(10) <= e.amount.amount <= Decimal(50) for e in matches)

    def test_empty_criteria_returns_everything(self, populated_ledger):
        """Test absent fields impose no constraint."""
        assert [e.id for e in populated_ledger.filter(FilterCriteria())] == [1, 2, 3, 4, 5]

    def test_category_and_date_combined(self, populated_ledger):
        """Test multiple fields are ANDed."""
        matches = populated_ledger.filter(FilterCriteria(category="Food", date="2024-08-16"))
        assert [e.id for e in matches] == [5]

    def test_min_only(self, populated_ledger):
        """Test a lower bound alone."""
        assert [e.id for e in populated_ledger.filter(FilterCriteria(min="45"))] == [3, 4]

    def test_max_only_with_string_bound(self, populated_ledger):
        """Test an upper bound typed at a prompt."""
        assert [e.id for e in populated_ledger.filter(FilterCriteria(max="$8.25"))] == [2, 5]

    def test_blank_fields_are_ignored(self, populated_ledger):
        """Test blank strings behave like absent fields."""
        criteria = FilterCriteria(category=" ", min="", max="", date="")
        assert len(populated_ledger.filter(criteria)) == 5

    def test_unknown_category_matches_nothing(self, populated_ledger):
        """Test filter does not validate categories."""
        assert populated_ledger.filter(FilterCriteria(category="groceries")) == []

    def test_no_match_for_date(self, populated_ledger):
        """Test exact date matching."""
        assert populated_ledger.filter(FilterCriteria(date="2024-08-17")) == []

    @pytest.mark.parametrize(
        "criteria",
        [FilterCriteria(min="lots"), FilterCriteria(max="plenty"), FilterCriteria(category="food", min="NaN")],
    )
    def test_non_numeric_bound_matches_nothing(self, populated_ledger, criteria):
        """Test a bound that is not a number yields an empty result."""
        assert populated_ledger.filter(criteria) == []
        assert len(populated_ledger) == 5

    def test_sub_cent_min_bound(self, ledger):
        """Test a lower bound just above an amount excludes it."""
        ledger.add("10.00", "food")
        ledger.add("10.005", "food")

        assert [e.id for e in ledger.filter(FilterCriteria(min="10.004"))] == [2]

    def test_sub_cent_max_bound(self, ledger):
        """Test an upper bound just below an amount excludes it."""
        ledger.add("10.00", "food")
        ledger.add("10.005", "food")

        assert [e.id for e in ledger.filter(FilterCriteria(max="10.004"))] == [1]

    def test_filter_does_not_mutate(self, populated_ledger):
        """Test the ledger is unchanged by filtering."""
        populated_ledger.filter(FilterCriteria(category="food"))
        assert len(populated_ledger) == 5
        assert populated_ledger.last_action == "Added expense ID 5"


@pytest.mark.ledger
class TestLedgerReport:
    """Test Ledger.report."""

    def test_empty_ledger_has_no_report(self, ledger):
        """Test report on an empty ledger."""
        with pytest.raises(EmptyLedgerError, match="No expenses to report."):
            ledger.report()

    def test_scenario_report(self, ledger):
        """Test the lunch and bus scenario."""
        ledger.add(12.50, "Food", "lunch")
        ledger.add(5, "transport")

        report = ledger.report()

        assert [(s.category, s.total, s.count) for s in report.categories] == [
            (Category.FOOD, Money.from_dollars("12.50"), 1),
            (Category.TRANSPORT, Money.from_dollars("5.00"), 1),
        ]
        assert report.total == Money.from_dollars("17.50")
        assert report.count == 2
        assert report.average == Money.from_dollars("8.75")

    def test_breakdown_follows_category_order(self, ledger):
        """Test order is the fixed category order, not insertion order."""
        ledger.add(1, "other")
        ledger.add(1, "utilities")
        ledger.add(1, "food")

        report = ledger.report()

        assert [s.category for s in report.categories] == [
            Category.FOOD,
            Category.UTILITIES,
            Category.OTHER,
        ]

    def test_empty_categories_omitted(self, populated_ledger):
        """Test categories without expenses do not appear."""
        report = populated_ledger.report()
        assert Category.OTHER not in [s.category for s in report.categories]
        assert sum(s.count for s in report.categories) == report.count == 5

    def test_average_is_exact_and_displays_rounded(self, ledger):
        """Test the average keeps full precision and formats half-up to the cent."""
        for _ in range(3):
            ledger.add(1, "food")
        ledger.add("0.01", "food")

        report = ledger.report()

        assert report.total == Money.from_dollars("3.01")
        assert report.average == Money.from_dollars("0.7525")
        assert report.average.format() == "$0.75"

    def test_report_date(self):
        """Test the report is stamped with today's date."""
        ledger = Ledger()
        ledger.add(1, "food", date=FinancialDate(date=date(2020, 1, 1)))
        assert ledger.report().generated_on == FinancialDate.today()
