"""Expense management commands (add, remove, list)."""

import sqlite3
import sys
from datetime import date

import pandas as pd
from rich.table import Table

from minledger.commands.common import console, format_money, load_cli_settings, open_ledger, resolve_month
from minledger.domain.expenses import normalize_category, resolve_expense_id
from minledger.domain.models import CATEGORIES, ExpenseDraft


def normalize_date(raw_date: str, today: date) -> date:
    """Parse a user-entered date and cap it at today.

    Uses pandas.to_datetime so ISO, European and other common formats are
    all accepted.

    Args:
        raw_date: Date text (YYYY-MM-DD, DD/MM/YYYY, etc.).
        today: Latest allowed date.

    Returns:
        Parsed calendar date.

    Raises:
        ValueError: If the date cannot be parsed or lies in the future.
    """
    try:
        parsed = pd.to_datetime(raw_date, dayfirst=True).date()
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e

    # "NaT" and similar inputs parse to a missing value instead of raising
    if pd.isna(parsed):
        raise ValueError(f"Could not parse date '{raw_date}'")

    if parsed > today:
        raise ValueError(f"Date {parsed.isoformat()} is in the future")
    return parsed


def add_command(
    label: str,
    amount: str,
    category: str | None = None,
    expense_date: str | None = None,
) -> None:
    """Log a new expense.

    Args:
        label: What the money was spent on.
        amount: Amount in major units (e.g., "12.50").
        category: Category name, matched case-insensitively.
        expense_date: Date of the expense; defaults to today.
    """
    settings = load_cli_settings()
    today = date.today()

    if expense_date:
        try:
            day = normalize_date(expense_date, today)
        except ValueError as e:
            console.print(f"[red]Invalid date: {e}[/red]")
            console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
            sys.exit(1)
    else:
        day = today

    if category is not None and normalize_category(category) is None:
        console.print(f"[red]Unknown category '{category}'[/red]")
        console.print(f"[dim]Choose from: {', '.join(CATEGORIES)}[/dim]")
        sys.exit(1)

    draft = ExpenseDraft(label=label, amount=amount, category=category or CATEGORIES[0], date=day)

    try:
        ledger = open_ledger(settings)
        expense = ledger.create(draft)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if expense is None:
        console.print("[yellow]Expense not logged: enter a description and a positive amount[/yellow]")
        return

    console.print("[green]✓[/green] Expense logged:")
    console.print(f"  Date: {expense.date.isoformat()}")
    console.print(f"  Description: {expense.label}")
    console.print(f"  Amount: {format_money(expense.amount, settings.currency)}")
    console.print(f"  Category: {expense.category}")
    console.print(f"  [dim]ID: {expense.id}[/dim]")


def remove_command(expense_id: str) -> None:
    """Remove an expense by id or unambiguous id prefix."""
    settings = load_cli_settings()

    try:
        ledger = open_ledger(settings)
        resolved, error = resolve_expense_id(ledger.expenses, expense_id)
        if resolved is None:
            console.print(f"[yellow]{error}[/yellow]")
            return

        expense = next(e for e in ledger.expenses if e.id == resolved)
        ledger.delete(resolved)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(
        f"[green]✓[/green] Removed {expense.label} "
        f"({format_money(expense.amount, settings.currency)}, {expense.date.isoformat()})"
    )


def list_command(month: str | None = None) -> None:
    """List a month's expenses, newest first."""
    settings = load_cli_settings()

    try:
        ledger = open_ledger(settings)
        selected = resolve_month(ledger, month)
        summary = ledger.summary(selected)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if not summary.expenses:
        console.print(f"[yellow]No expenses recorded for {summary.label} yet[/yellow]")
        return

    table = Table(title=f"{summary.label} ({summary.entry_count} entries)")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("ID", style="dim")

    for expense in summary.expenses:
        table.add_row(
            expense.date.strftime("%b %d"),
            expense.label,
            expense.category,
            format_money(expense.amount, settings.currency),
            expense.id[:8],
        )

    console.print(table)
