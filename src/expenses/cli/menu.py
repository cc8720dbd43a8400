#!/usr/bin/env python3
"""
Interactive Expense Menu

Menu-driven shell over a single in-memory Ledger. Each choice prompts for its
inputs, passes the raw strings to the ledger, and prints the result. Ledger
errors are shown to the operator and the loop continues.
"""

from typing import Optional

import click

from ..core.config import get_config
from ..core.models import Category, Expense, ExpenseReport
from ..ledger import Ledger, LedgerError

MENU_TITLE = "=== EXPENSE TRACKER ==="
MENU_OPTIONS = [
    "Add Expense",
    "View All Expenses",
    "View by Category",
    "Calculate Total",
    "Remove Expense",
    "Generate Report",
    "Exit",
]
SEPARATOR = "=" * 32


def format_expense_line(expense: Expense, symbol: str, include_category: bool = True) -> str:
    """Render one expense as a single display line."""
    parts = [f"ID: {expense.id}", expense.amount.format(symbol)]
    if include_category:
        parts.append(expense.category.value.upper())
    parts.extend([expense.description, expense.date_str])
    return " | ".join(parts)


def render_report(report: ExpenseReport, symbol: str) -> list[str]:
    """Render a report as display lines."""
    lines = [f"EXPENSE REPORT - {report.generated_on.month_year()}", SEPARATOR]
    for summary in report.categories:
        lines.append(
            f"{summary.category.value.upper()}: {summary.total.format(symbol)} "
            f"({summary.count} expenses)"
        )
    lines.append(SEPARATOR)
    lines.append(f"TOTAL: {report.total.format(symbol)} ({report.count} expenses)")
    lines.append(f"AVERAGE: {report.average.format(symbol)} per expense")
    return lines


def _ask(question: str) -> Optional[str]:
    """Prompt for a line of input; None when input has ended."""
    try:
        return click.prompt(question, default="", show_default=False, type=str)
    except click.Abort:
        return None


def _category_prompt() -> str:
    return f"Enter category ({', '.join(Category.labels())})"


def _show_menu() -> None:
    click.echo(f"\n{MENU_TITLE}")
    for number, label in enumerate(MENU_OPTIONS, start=1):
        click.echo(f"{number}. {label}")


def _add_expense(ledger: Ledger, symbol: str) -> None:
    amount = _ask("Enter amount") or ""
    category = _ask(_category_prompt()) or ""
    description = _ask("Enter description (optional)") or ""
    expense = ledger.add(amount, category, description)
    click.echo(f"Expense added successfully! ID: {expense.id}")


def _view_all(ledger: Ledger, symbol: str) -> None:
    expenses = ledger.require_expenses()
    click.echo("All Expenses:")
    for expense in expenses:
        click.echo(format_expense_line(expense, symbol))
    click.echo(f"Total: {ledger.total().format(symbol)}")


def _view_by_category(ledger: Ledger, symbol: str) -> None:
    category = _ask(_category_prompt()) or ""
    expenses = ledger.by_category(category)
    if not expenses:
        click.echo(f"No expenses found for category: {category.strip()}")
        return

    click.echo(f"\n{category.strip().upper()} Expenses:")
    for expense in expenses:
        click.echo(format_expense_line(expense, symbol, include_category=False))
    click.echo(f"Category Total: {ledger.total(category).format(symbol)}")


def _calculate_total(ledger: Ledger, symbol: str) -> None:
    category = (_ask("Enter category for total (leave blank for all)") or "").strip()
    total = ledger.total(category or None)
    label = f" for {category}" if category else ""
    click.echo(f"Total{label}: {total.format(symbol)}")


def _remove_expense(ledger: Ledger, symbol: str) -> None:
    expense_id = _ask("Enter expense ID to remove") or ""
    expense = ledger.remove(expense_id)
    click.echo(f"Expense ID {expense.id} removed.")


def _generate_report(ledger: Ledger, symbol: str) -> None:
    click.echo()
    for line in render_report(ledger.report(), symbol):
        click.echo(line)


ACTIONS = {
    "1": _add_expense,
    "2": _view_all,
    "3": _view_by_category,
    "4": _calculate_total,
    "5": _remove_expense,
    "6": _generate_report,
}
EXIT_CHOICE = "7"


def run_menu(ledger: Ledger, symbol: str) -> None:
    """Loop over the menu until the operator exits or input runs out."""
    while True:
        _show_menu()
        choice = _ask(f"Choose option (1-{len(MENU_OPTIONS)})")
        if not choice:
            break

        choice = choice.strip()
        if choice == EXIT_CHOICE:
            click.echo("Exiting Expense Tracker. Goodbye!")
            break

        action = ACTIONS.get(choice)
        if action is None:
            click.echo(f"Invalid option. Please choose 1-{len(MENU_OPTIONS)}.", err=True)
            continue

        try:
            action(ledger, symbol)
        except LedgerError as e:
            click.echo(f"Error: {e}", err=True)


@click.command()
@click.option("--currency", help="Currency symbol for amounts (default: from configuration)")
@click.pass_context
def run(ctx: click.Context, currency: Optional[str]) -> None:
    """
    Start the interactive expense tracker.

    Expenses live only in memory and are discarded on exit.

    Example:
      expenses run --currency €
    """
    ctx.ensure_object(dict)
    config = ctx.obj.get("config") or get_config()
    symbol = currency if currency else config.currency_symbol

    if ctx.obj.get("verbose", False):
        click.echo(f"Currency symbol: {symbol}")

    run_menu(Ledger(), symbol)
