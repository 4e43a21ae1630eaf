"""Database store layer - provides persistence for the application.

This module re-exports the public storage API for easy importing.
"""

from minledger.store.codec import ParseError, ParseResult, parse_expenses, serialize_expenses
from minledger.store.ledger import DEFAULT_STORAGE_KEY, CorruptDataPolicy, Ledger, new_expense_id
from minledger.store.queries import get_item, set_item
from minledger.store.schema import get_db_path, init_database

__all__ = [
    # Schema
    "get_db_path",
    "init_database",
    # Queries
    "get_item",
    "set_item",
    # Codec
    "ParseError",
    "ParseResult",
    "parse_expenses",
    "serialize_expenses",
    # Ledger
    "DEFAULT_STORAGE_KEY",
    "CorruptDataPolicy",
    "Ledger",
    "new_expense_id",
]
