#!/usr/bin/env python3
"""
Expense Ledger

In-memory store of expense records plus the operations over them: add, edit,
remove, filter, total and report.

The ledger is process-scoped and single-threaded. It performs unguarded
read-modify-write on its record list and id counter, so callers that share one
ledger between threads must synchronize externally.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Optional, Union

from ..core.dates import FinancialDate
from ..core.models import (
    AmountInput,
    Category,
    CategorySummary,
    Expense,
    ExpenseReport,
    ExpenseUpdate,
    FilterCriteria,
)
from ..core.money import Money
from .errors import (
    EmptyLedgerError,
    ExpenseNotFoundError,
    InvalidAmountError,
    InvalidCategoryError,
)
from .parsing import (
    parse_amount,
    parse_bound,
    parse_category,
    parse_description,
    parse_expense_id,
)

logger = logging.getLogger(__name__)

ExpenseId = Union[int, str]


class Ledger:
    """
    Ordered collection of expenses with a monotonically increasing id counter.

    Ids start at 1 and are never reused, even after removal. Records keep
    insertion order for every query.

    Example:
        >>> ledger = Ledger()
        >>> lunch = ledger.add("12.50", "Food", "lunch")
        >>> ledger.add(5, "transport").id
        2
        >>> str(ledger.total())
        '$17.50'
    """

    def __init__(self) -> None:
        self._expenses: list[Expense] = []
        self._next_id = 1
        self.last_action: Optional[str] = None

    @property
    def expenses(self) -> tuple[Expense, ...]:
        """Snapshot of all records in insertion order."""
        return tuple(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(tuple(self._expenses))

    def get(self, expense_id: ExpenseId) -> Expense:
        """
        Look up one expense by id.

        Raises:
            ExpenseNotFoundError: If no expense has the id
        """
        parsed_id = parse_expense_id(expense_id)
        for expense in self._expenses:
            if expense.id == parsed_id:
                return expense
        raise ExpenseNotFoundError()

    def add(
        self,
        amount: AmountInput,
        category: str,
        description: Optional[str] = "",
        date: Optional[FinancialDate] = None,
    ) -> Expense:
        """
        Record a new expense.

        Args:
            amount: Positive amount, numeric or numeric string
            category: Category label, case-insensitive
            description: Optional free text, trimmed
            date: Expense date (default: today)

        Returns:
            The created expense

        Raises:
            InvalidAmountError: If amount is non-numeric or not positive
            InvalidCategoryError: If category is not in the fixed set
        """
        parsed_amount = parse_amount(amount)
        parsed_category = parse_category(category)

        expense = Expense(
            id=self._next_id,
            amount=parsed_amount,
            category=parsed_category,
            description=parse_description(description),
            date=date or FinancialDate.today(),
        )
        self._next_id += 1
        self._expenses.append(expense)

        self.last_action = f"Added expense ID {expense.id}"
        logger.info(f"Added expense {expense.id}: {expense.amount} {expense.category.value}")
        return expense

    def remove(self, expense_id: ExpenseId) -> Expense:
        """
        Remove exactly one expense.

        Returns:
            The removed expense

        Raises:
            ExpenseNotFoundError: If no expense has the id
        """
        expense = self.get(expense_id)
        self._expenses = [e for e in self._expenses if e.id != expense.id]

        self.last_action = f"Removed expense ID {expense.id}"
        logger.info(f"Removed expense {expense.id}")
        return expense

    def edit(self, expense_id: ExpenseId, updates: Sequence[ExpenseUpdate]) -> Expense:
        """
        Apply partial updates to one expense, in order.

        An invalid amount or category in an update is skipped on its own;
        the other fields of that update and all later updates still apply.

        Returns:
            The edited expense

        Raises:
            ExpenseNotFoundError: If no expense has the id
        """
        expense = self.get(expense_id)

        for update in updates:
            if update.amount is not None:
                try:
                    expense.amount = parse_amount(update.amount)
                except InvalidAmountError:
                    logger.warning(f"Skipped invalid amount {update.amount!r} for expense {expense.id}")

            if update.category is not None:
                try:
                    expense.category = parse_category(update.category)
                except InvalidCategoryError:
                    logger.warning(
                        f"Skipped invalid category {update.category!r} for expense {expense.id}"
                    )

            if update.description is not None:
                expense.description = parse_description(update.description)

        self.last_action = f"Edited expense ID {expense.id}"
        logger.info(f"Edited expense {expense.id}")
        return expense

    def total(self, category: Optional[str] = None) -> Money:
        """
        Sum expense amounts, optionally for one category.

        The category is matched by plain normalized equality and is not
        validated: an unknown category matches nothing and totals zero.
        None or a blank string sums every expense.
        """
        if category is None or not category.strip():
            return Money.sum(e.amount for e in self._expenses)

        label = Category.normalize(category)
        total = Money.sum(e.amount for e in self._expenses if e.category.value == label)
        logger.debug(f"Total for {label!r}: {total}")
        return total

    def filter(self, criteria: FilterCriteria) -> list[Expense]:
        """
        Return expenses matching every provided criterion, in insertion order.

        A non-numeric min or max bound can never be satisfied, so it matches
        nothing and the result is empty.
        """
        label = _present(criteria.category)
        date_str = _present(criteria.date)
        try:
            min_amount = parse_bound(criteria.min) if _present(criteria.min) is not None else None
            max_amount = parse_bound(criteria.max) if _present(criteria.max) is not None else None
        except InvalidAmountError:
            logger.debug(f"Filter {criteria} has a non-numeric bound; nothing matches")
            return []

        if label is not None:
            label = Category.normalize(label)
        if date_str is not None:
            date_str = date_str.strip()

        matches = []
        for expense in self._expenses:
            if label is not None and expense.category.value != label:
                continue
            if min_amount is not None and expense.amount < min_amount:
                continue
            if max_amount is not None and expense.amount > max_amount:
                continue
            if date_str is not None and expense.date_str != date_str:
                continue
            matches.append(expense)

        logger.debug(f"Filter {criteria} matched {len(matches)} of {len(self)} expenses")
        return matches

    def by_category(self, category: str) -> list[Expense]:
        """
        Expenses in one category, validating the label first.

        Raises:
            InvalidCategoryError: If category is not in the fixed set
        """
        parsed = parse_category(category)
        return [e for e in self._expenses if e.category is parsed]

    def require_expenses(self) -> tuple[Expense, ...]:
        """
        All expenses, refusing an empty ledger.

        Raises:
            EmptyLedgerError: If no expenses are recorded
        """
        if not self._expenses:
            raise EmptyLedgerError()
        return self.expenses

    def report(self) -> ExpenseReport:
        """
        Summarize expenses per category (in fixed category order) and overall.

        Raises:
            EmptyLedgerError: If no expenses are recorded
        """
        if not self._expenses:
            raise EmptyLedgerError("No expenses to report.")

        summaries = []
        for category in Category:
            in_category = [e for e in self._expenses if e.category is category]
            if in_category:
                summaries.append(
                    CategorySummary(
                        category=category,
                        total=Money.sum(e.amount for e in in_category),
                        count=len(in_category),
                    )
                )

        total = self.total()
        count = len(self._expenses)
        return ExpenseReport(
            categories=summaries,
            total=total,
            count=count,
            average=total / count,
        )


def _present(value):
    """Treat None and blank strings as an absent criterion."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value
