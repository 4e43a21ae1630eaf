"""JSON encoding of the persisted expense list.

The stored value is a JSON array of objects:
    [{"id": ..., "label": ..., "category": ..., "amount": 4.5, "date": "YYYY-MM-DD"}, ...]

Parsing never raises. Callers get a ParseResult and decide themselves what a
malformed value means for them.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from minledger.dates import parse_iso_date
from minledger.domain.expenses import from_cents, to_cents
from minledger.domain.models import CATEGORIES, CategoryName, Expense, ExpenseId

REQUIRED_FIELDS = ("id", "label", "category", "amount", "date")


@dataclass(frozen=True)
class ParseError:
    """Why a stored value could not be decoded."""

    reason: str


@dataclass(frozen=True)
class ParseResult:
    """Outcome of decoding a stored value: either expenses or an error."""

    expenses: list[Expense] = field(default_factory=list)
    error: ParseError | None = None


def _parse_record(index: int, item: Any) -> Expense | ParseError:
    if not isinstance(item, dict):
        return ParseError(f"Entry {index} is not an object")

    missing = [name for name in REQUIRED_FIELDS if name not in item]
    if missing:
        return ParseError(f"Entry {index} is missing: {', '.join(missing)}")

    expense_id, label, category = item["id"], item["label"], item["category"]
    if not isinstance(expense_id, str) or not expense_id:
        return ParseError(f"Entry {index} has an invalid id")
    if not isinstance(label, str) or not label.strip():
        return ParseError(f"Entry {index} has a blank label")
    if category not in CATEGORIES:
        return ParseError(f"Entry {index} has unknown category {category!r}")

    raw_amount = item["amount"]
    amount = to_cents(raw_amount) if isinstance(raw_amount, (int, float)) else None
    if amount is None or amount <= 0:
        return ParseError(f"Entry {index} has an invalid amount {raw_amount!r}")

    if not isinstance(item["date"], str):
        return ParseError(f"Entry {index} has an invalid date")
    try:
        expense_date = parse_iso_date(item["date"])
    except ValueError:
        return ParseError(f"Entry {index} has an invalid date {item['date']!r}")

    return Expense(
        id=ExpenseId(expense_id),
        label=label,
        category=CategoryName(category),
        amount=amount,
        date=expense_date,
    )


def parse_expenses(raw: str | bytes) -> ParseResult:
    """Decode a stored expense list.

    Args:
        raw: JSON text as stored.

    Returns:
        ParseResult with the expenses in stored order, or with an error.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return ParseResult(error=ParseError(f"Invalid JSON: {e}"))

    if not isinstance(data, list):
        return ParseResult(error=ParseError("Top-level value is not an array"))

    expenses: list[Expense] = []
    seen: set[str] = set()
    for index, item in enumerate(data):
        parsed = _parse_record(index, item)
        if isinstance(parsed, ParseError):
            return ParseResult(error=parsed)
        if parsed.id in seen:
            return ParseResult(error=ParseError(f"Duplicate id {parsed.id!r}"))
        seen.add(parsed.id)
        expenses.append(parsed)

    return ParseResult(expenses=expenses)


def expense_to_dict(expense: Expense) -> dict[str, Any]:
    """Convert an expense to its stored JSON shape."""
    return {
        "id": expense.id,
        "label": expense.label,
        "category": expense.category,
        "amount": float(from_cents(expense.amount)),
        "date": expense.date.isoformat(),
    }


def serialize_expenses(expenses: Iterable[Expense]) -> str:
    """Encode expenses as a JSON array."""
    return json.dumps([expense_to_dict(e) for e in expenses])
