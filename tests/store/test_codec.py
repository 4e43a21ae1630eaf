"""Tests for minledger.store.codec."""

import json
from datetime import date

from minledger.domain.models import CategoryName, Expense, ExpenseId, Money
from minledger.store.codec import parse_expenses, serialize_expenses


def record(**overrides: object) -> dict[str, object]:
    base: dict[str, object] = {
        "id": "a1",
        "label": "Morning coffee",
        "category": "Food",
        "amount": 4.5,
        "date": "2024-01-02",
    }
    base.update(overrides)
    return base


class TestParseExpenses:
    """Tests for parse_expenses."""

    def test_parses_valid_array(self) -> None:
        """Should decode records in stored order."""
        raw = json.dumps([record(), record(id="b2", label="Metro pass", category="Transport", amount=28)])

        result = parse_expenses(raw)

        assert result.error is None
        assert result.expenses == [
            Expense(
                id=ExpenseId("a1"),
                label="Morning coffee",
                category=CategoryName("Food"),
                amount=Money(450),
                date=date(2024, 1, 2),
            ),
            Expense(
                id=ExpenseId("b2"),
                label="Metro pass",
                category=CategoryName("Transport"),
                amount=Money(2800),
                date=date(2024, 1, 2),
            ),
        ]

    def test_empty_array(self) -> None:
        """Should accept an empty ledger."""
        result = parse_expenses("[]")

        assert result.error is None
        assert result.expenses == []

    def test_accepts_bytes(self) -> None:
        """Should decode UTF-8 bytes."""
        assert parse_expenses(json.dumps([record()]).encode()).error is None

    def test_invalid_json(self) -> None:
        """Should report invalid JSON instead of raising."""
        result = parse_expenses("{not json")

        assert result.error is not None
        assert result.error.reason.startswith("Invalid JSON")
        assert result.expenses == []

    def test_top_level_not_array(self) -> None:
        """Should reject objects at the top level."""
        result = parse_expenses(json.dumps({"expenses": []}))

        assert result.error is not None
        assert result.error.reason == "Top-level value is not an array"

    def test_missing_fields(self) -> None:
        """Should name the missing fields."""
        item = record()
        del item["amount"]

        result = parse_expenses(json.dumps([item]))

        assert result.error is not None
        assert "missing: amount" in result.error.reason

    def test_rejects_invalid_values(self) -> None:
        """Should reject records that break ledger invariants."""
        bad_records = [
            record(category="Snacks"),
            record(amount=0),
            record(amount=-3),
            record(amount="12"),
            record(amount=True),
            record(label="   "),
            record(id=""),
            record(date="2024-13-01"),
            record(date=20240102),
            "not an object",
        ]

        for item in bad_records:
            assert parse_expenses(json.dumps([item])).error is not None, item

    def test_rejects_nan_amount(self) -> None:
        """Should reject NaN written by a lenient encoder."""
        raw = '[{"id": "a1", "label": "x", "category": "Food", "amount": NaN, "date": "2024-01-02"}]'

        assert parse_expenses(raw).error is not None

    def test_large_amount(self) -> None:
        """Should decode amounts wider than the decimal context precision."""
        result = parse_expenses(json.dumps([record(amount=1e30)]))

        assert result.error is None
        assert result.expenses[0].amount == 10**32

    def test_rejects_infinite_amount(self) -> None:
        """Should report an amount that overflows to infinity instead of raising."""
        raw = '[{"id": "a1", "label": "x", "category": "Food", "amount": 1e400, "date": "2024-01-02"}]'

        assert parse_expenses(raw).error is not None

    def test_rejects_duplicate_ids(self) -> None:
        """Should reject ledgers with repeated ids."""
        result = parse_expenses(json.dumps([record(), record(label="Again")]))

        assert result.error is not None
        assert "Duplicate id" in result.error.reason


class TestSerializeExpenses:
    """Tests for serialize_expenses."""

    def test_stored_shape(self) -> None:
        """Should write the JSON array shape with decimal amounts and ISO dates."""
        expenses = [
            Expense(
                id=ExpenseId("a1"),
                label="Electric bill",
                category=CategoryName("Utilities"),
                amount=Money(6475),
                date=date(2024, 1, 7),
            )
        ]

        assert json.loads(serialize_expenses(expenses)) == [
            {"id": "a1", "label": "Electric bill", "category": "Utilities", "amount": 64.75, "date": "2024-01-07"}
        ]

    def test_large_amount_survives(self) -> None:
        """Should write and read back an amount beyond the decimal context precision."""
        expenses = [
            Expense(
                id=ExpenseId("a1"),
                label="Yacht",
                category=CategoryName("Leisure"),
                amount=Money(10**32),
                date=date(2024, 1, 3),
            )
        ]

        assert parse_expenses(serialize_expenses(expenses)).expenses == expenses

    def test_parse_restores_serialized(self) -> None:
        """Should read back what it wrote."""
        expenses = [
            Expense(
                id=ExpenseId("a1"),
                label="Weekly groceries",
                category=CategoryName("Food"),
                amount=Money(8620),
                date=date(2024, 1, 3),
            )
        ]

        assert parse_expenses(serialize_expenses(expenses)).expenses == expenses
