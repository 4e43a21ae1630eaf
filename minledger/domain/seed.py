"""Starter dataset for an empty ledger."""

from collections.abc import Callable
from datetime import date

from minledger.domain.expenses import sort_by_date_desc
from minledger.domain.models import CategoryName, Expense, ExpenseId, Money

# (label, category, amount in cents, day of month)
SEED_ROWS: tuple[tuple[str, str, int, int], ...] = (
    ("Morning coffee", "Food", 450, 2),
    ("Weekly groceries", "Food", 8620, 3),
    ("Metro pass", "Transport", 2800, 5),
    ("Electric bill", "Utilities", 6475, 7),
    ("Yoga class", "Health", 2200, 10),
)


def seed_expenses(today: date, new_id: Callable[[], ExpenseId]) -> list[Expense]:
    """Create the starter expenses anchored to the current month.

    Args:
        today: Current date; only its year and month are used.
        new_id: Factory for fresh expense ids.

    Returns:
        Seed expenses sorted by date descending.
    """
    return sort_by_date_desc(
        Expense(
            id=new_id(),
            label=label,
            category=CategoryName(category),
            amount=Money(amount),
            date=today.replace(day=day),
        )
        for label, category, amount, day in SEED_ROWS
    )
