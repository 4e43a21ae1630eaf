"""Pure functions for creating and removing expense records.

This module contains the functional core for ledger mutations:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

import math
from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from minledger.dates import parse_iso_date
from minledger.domain.models import CATEGORIES, CategoryName, Expense, ExpenseDraft, ExpenseId, Money

def to_cents(amount: str | int | float | Decimal) -> Money | None:
    """Convert a decimal amount to cents, rounded half-up to 2 digits.

    Args:
        amount: Amount in major units, as text or a number.

    Returns:
        Amount in cents, or None if the input is not a finite number or is
        too large to be stored as a JSON number.
    """
    if isinstance(amount, bool):
        return None
    try:
        value = Decimal(amount.strip()) if isinstance(amount, str) else Decimal(str(amount))
    except InvalidOperation:
        return None
    if not value.is_finite() or math.isinf(float(value)):
        return None
    # to_integral_value rounds without trapping on the context precision
    return Money(int((value * 100).to_integral_value(rounding=ROUND_HALF_UP)))


def from_cents(amount: Money) -> Decimal:
    """Convert cents back to a 2-digit decimal amount."""
    return Decimal(amount).scaleb(-2)


def normalize_category(category: str) -> CategoryName | None:
    """Match a category name case-insensitively against the fixed set.

    Returns:
        The canonical category name, or None if unknown.
    """
    wanted = category.strip().lower()
    for name in CATEGORIES:
        if name.lower() == wanted:
            return name
    return None


def validate_draft(draft: ExpenseDraft) -> tuple[str, Money, CategoryName, date] | str:
    """Validate a draft and normalize its fields.

    Args:
        draft: Unvalidated user input.

    Returns:
        Tuple of (label, amount, category, date) on success, otherwise an
        error message.
    """
    label = draft.label.strip()
    if not label:
        return "Label must not be blank"

    amount = to_cents(draft.amount)
    if amount is None:
        return "Amount must be a number"
    if amount <= 0:
        return "Amount must be positive"

    category = normalize_category(draft.category)
    if category is None:
        return f"Unknown category: {draft.category}"

    if isinstance(draft.date, date):
        expense_date = draft.date
    else:
        try:
            expense_date = parse_iso_date(draft.date)
        except ValueError:
            return f"Invalid date: {draft.date}"

    return label, amount, category, expense_date


def build_expense(draft: ExpenseDraft, expense_id: ExpenseId) -> tuple[Expense | None, str | None]:
    """Build an expense record from a draft.

    Args:
        draft: Unvalidated user input.
        expense_id: Fresh identifier for the new record.

    Returns:
        Tuple of (expense, error). Exactly one of them is None.
    """
    validated = validate_draft(draft)
    if isinstance(validated, str):
        return None, validated

    label, amount, category, expense_date = validated
    return Expense(id=expense_id, label=label, category=category, amount=amount, date=expense_date), None


def sort_by_date_desc(expenses: Iterable[Expense]) -> list[Expense]:
    """Sort expenses newest first.

    The sort is stable, so records sharing a date keep their relative order.
    """
    return sorted(expenses, key=lambda e: e.date, reverse=True)


def insert_expense(expenses: Iterable[Expense], expense: Expense) -> list[Expense]:
    """Insert an expense and re-sort the whole ledger by date descending.

    The new record goes first, so it leads among records with the same date.
    """
    return sort_by_date_desc([expense, *expenses])


def remove_expense(expenses: Iterable[Expense], expense_id: ExpenseId) -> tuple[list[Expense], bool]:
    """Remove the expense with a matching id.

    Args:
        expenses: Current ledger.
        expense_id: Identifier to remove.

    Returns:
        Tuple of (remaining_expenses, removed). Removing an unknown id is a
        no-op, not an error.
    """
    current = list(expenses)
    remaining = [e for e in current if e.id != expense_id]
    return remaining, len(remaining) != len(current)


def resolve_expense_id(expenses: Iterable[Expense], id_or_prefix: str) -> tuple[ExpenseId | None, str | None]:
    """Resolve a full id or an unambiguous id prefix.

    Returns:
        Tuple of (expense_id, error).
    """
    ids = [e.id for e in expenses]
    if id_or_prefix in ids:
        return ExpenseId(id_or_prefix), None

    matches = [i for i in ids if i.startswith(id_or_prefix)] if id_or_prefix else []
    if not matches:
        return None, f"No expense with id '{id_or_prefix}'"
    if len(matches) > 1:
        return None, f"Id prefix '{id_or_prefix}' matches {len(matches)} expenses"
    return matches[0], None
