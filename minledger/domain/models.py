"""Domain type definitions for minledger.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- Month: Month in YYYY-MM format
- CategoryName: One of the fixed expense categories
- ExpenseId: Opaque unique identifier of an expense
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

CategoryName = NewType("CategoryName", str)

ExpenseId = NewType("ExpenseId", str)

# Enumeration order doubles as the tie-break order when ranking categories
CATEGORIES: tuple[CategoryName, ...] = (
    CategoryName("Housing"),
    CategoryName("Food"),
    CategoryName("Transport"),
    CategoryName("Utilities"),
    CategoryName("Health"),
    CategoryName("Leisure"),
    CategoryName("Other"),
)


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: ExpenseId
    label: str
    category: CategoryName
    amount: Money
    date: date


@dataclass(frozen=True)
class ExpenseDraft:
    """Unvalidated user input for a new expense.

    Amount is kept as entered (text or number) so validation can reject
    non-numeric input instead of the caller having to.
    """

    label: str
    amount: str | int | float
    category: str
    date: date | str
