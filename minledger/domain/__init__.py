"""Domain models and types for minledger.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Ledger logic separated from storage and presentation
"""

from minledger.domain.models import CATEGORIES, CategoryName, Expense, ExpenseDraft, ExpenseId, Money, Month

__all__ = ["CATEGORIES", "CategoryName", "Expense", "ExpenseDraft", "ExpenseId", "Money", "Month"]
