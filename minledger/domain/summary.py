"""Pure functions for monthly summaries and category rankings.

This module contains the functional core for derived views:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from minledger.dates import days_in_month, month_key, month_label
from minledger.domain.models import CATEGORIES, CategoryName, Expense, Money, Month

TOP_CATEGORY_LIMIT = 3


@dataclass(frozen=True)
class MonthOption:
    """A month present in the ledger, with its display label."""

    key: Month
    label: str


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable per-category spending for a month."""

    category: CategoryName
    amount: Money
    percentage: float = 0.0


@dataclass(frozen=True)
class MonthSummary:
    """Immutable summary of one month of expenses."""

    month: Month
    label: str
    expenses: tuple[Expense, ...]
    total: Money
    weekly_average: Money
    entry_count: int
    top_categories: tuple[CategoryTotal, ...]


def grouped_months(expenses: Iterable[Expense]) -> list[MonthOption]:
    """List the distinct months present in the ledger, most recent first.

    Args:
        expenses: Ledger snapshot.

    Returns:
        One MonthOption per distinct month.
    """
    # YYYY-MM keys sort chronologically as strings
    keys = sorted({month_key(e.date) for e in expenses}, reverse=True)
    return [MonthOption(key=key, label=month_label(key)) for key in keys]


def month_expenses(expenses: Iterable[Expense], month: Month) -> list[Expense]:
    """Filter the ledger to one month, preserving order."""
    return [e for e in expenses if month_key(e.date) == month]


def month_total(expenses: Iterable[Expense]) -> Money:
    """Sum expense amounts. Zero for no expenses."""
    return Money(sum(e.amount for e in expenses))


def weekly_average(month: Month, total: Money) -> Money:
    """Calculate the average spend per week over a month.

    Args:
        month: Month in YYYY-MM format.
        total: Total spend for the month in cents.

    Returns:
        Total divided by the month's length in weeks, rounded half-up to
        whole cents. Returns total unchanged if the month has no days.
    """
    weeks = Decimal(days_in_month(month)) / 7
    if weeks <= 0:
        return total
    return Money(int((Decimal(total) / weeks).quantize(Decimal(1), rounding=ROUND_HALF_UP)))


def category_totals(expenses: Iterable[Expense]) -> dict[CategoryName, Money]:
    """Sum amounts per category."""
    totals: dict[CategoryName, Money] = {}
    for expense in expenses:
        totals[expense.category] = Money(totals.get(expense.category, 0) + expense.amount)
    return totals


def _category_rank(category: CategoryName) -> int:
    try:
        return CATEGORIES.index(category)
    except ValueError:
        return len(CATEGORIES)


def rank_categories(
    totals: dict[CategoryName, Money],
    limit: int = TOP_CATEGORY_LIMIT,
) -> list[tuple[CategoryName, Money]]:
    """Pick the highest-spend categories.

    Args:
        totals: Dictionary of category amounts.
        limit: Maximum number of entries to return.

    Returns:
        Up to `limit` (category, amount) tuples sorted by amount descending.
        Equal amounts are ordered by category enumeration order.
    """
    ranked = sorted(totals.items(), key=lambda item: (-item[1], _category_rank(item[0])))
    return ranked[:limit]


def calculate_share(amount: Money, total: Money) -> float:
    """Calculate an amount's share of a total as a percentage (0-100)."""
    if total <= 0:
        return 0.0
    return (amount / total) * 100


def top_categories(expenses: Sequence[Expense], limit: int = TOP_CATEGORY_LIMIT) -> list[CategoryTotal]:
    """Rank a month's categories by spend.

    Args:
        expenses: Expenses for a single month.
        limit: Maximum number of categories to return.

    Returns:
        Up to `limit` CategoryTotal entries, highest spend first.
    """
    total = month_total(expenses)
    return [
        CategoryTotal(category=category, amount=amount, percentage=calculate_share(amount, total))
        for category, amount in rank_categories(category_totals(expenses), limit)
    ]


def default_month(expenses: Sequence[Expense], today: date) -> Month:
    """Pick the month to show when none is selected.

    Returns:
        Month of the most recent expense, or the current month for an empty
        ledger.
    """
    if not expenses:
        return month_key(today)
    return month_key(max(e.date for e in expenses))


def build_month_summary(expenses: Iterable[Expense], month: Month) -> MonthSummary:
    """Create the full summary for one month.

    Args:
        expenses: Ledger snapshot.
        month: Month in YYYY-MM format.

    Returns:
        MonthSummary with totals, weekly pace and top categories.
    """
    selected = month_expenses(expenses, month)
    total = month_total(selected)

    return MonthSummary(
        month=month,
        label=month_label(month),
        expenses=tuple(selected),
        total=total,
        weekly_average=weekly_average(month, total),
        entry_count=len(selected),
        top_categories=tuple(top_categories(selected)),
    )


def calculate_histogram_bar_length(percentage: float, bar_width: int) -> int:
    """Calculate histogram bar length for a share of the month total.

    Args:
        percentage: Share of the total (0-100).
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if percentage <= 0:
        return 0
    return int(min(percentage, 100.0) / 100 * bar_width)
