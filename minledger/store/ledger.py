"""The expense ledger: in-memory records mirrored to key-value storage."""

import logging
import uuid
from collections.abc import Callable
from datetime import date
from enum import Enum
from pathlib import Path

from minledger.domain.expenses import build_expense, insert_expense, remove_expense
from minledger.domain.models import Expense, ExpenseDraft, ExpenseId, Month
from minledger.domain.seed import seed_expenses
from minledger.domain.summary import MonthOption, MonthSummary, build_month_summary, default_month, grouped_months
from minledger.store.codec import parse_expenses, serialize_expenses
from minledger.store.queries import get_item, set_item

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "minimal-expense-tracker"


class CorruptDataPolicy(str, Enum):
    """What to do when the stored value cannot be parsed."""

    RESEED = "reseed"
    EMPTY = "empty"


def new_expense_id() -> ExpenseId:
    """Generate a fresh random expense id."""
    return ExpenseId(str(uuid.uuid4()))


class Ledger:
    """Owns the expense list and keeps its stored mirror in sync.

    Every mutation replaces the list, bumps `version` and writes the whole
    list back to storage.
    """

    def __init__(
        self,
        db_path: Path | None = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        on_corrupt: CorruptDataPolicy = CorruptDataPolicy.RESEED,
        today: Callable[[], date] = date.today,
        new_id: Callable[[], ExpenseId] = new_expense_id,
    ) -> None:
        self.db_path = db_path
        self.storage_key = storage_key
        self.on_corrupt = on_corrupt
        self._today = today
        self._new_id = new_id
        self._expenses: list[Expense] = []
        self._version = 0
        self._summaries: dict[tuple[int, Month], MonthSummary] = {}

    @property
    def expenses(self) -> tuple[Expense, ...]:
        """Snapshot of the current records, newest first."""
        return tuple(self._expenses)

    @property
    def version(self) -> int:
        """Counter bumped on every change to the records."""
        return self._version

    def __len__(self) -> int:
        return len(self._expenses)

    def _replace(self, expenses: list[Expense]) -> None:
        self._expenses = expenses
        self._version += 1
        self._summaries.clear()

    def load(self) -> None:
        """Load records from storage.

        Absent data is replaced by seed data, which is persisted right away.
        Malformed data is logged and handled according to `on_corrupt`.

        Raises:
            sqlite3.Error: If storage cannot be read or written.
        """
        raw = get_item(self.storage_key, self.db_path)
        if raw is None:
            logger.info("No stored expenses under %r, seeding", self.storage_key)
            self._replace(seed_expenses(self._today(), self._new_id))
            self.persist()
            return

        result = parse_expenses(raw)
        if result.error is not None:
            logger.warning("Failed to parse stored expenses: %s", result.error.reason)
            if self.on_corrupt is CorruptDataPolicy.RESEED:
                self._replace(seed_expenses(self._today(), self._new_id))
                self.persist()
            else:
                self._replace([])
            return

        self._replace(result.expenses)
        logger.debug("Loaded %d expenses", len(result.expenses))

    def persist(self) -> None:
        """Write all records to storage under the ledger's key.

        Raises:
            sqlite3.Error: If storage cannot be written.
        """
        set_item(self.storage_key, serialize_expenses(self._expenses), self.db_path)
        logger.debug("Persisted %d expenses", len(self._expenses))

    def create(self, draft: ExpenseDraft) -> Expense | None:
        """Add a new expense from user input.

        Invalid drafts are rejected without raising: the ledger is left
        untouched and None is returned.

        Returns:
            The stored expense, or None if the draft was rejected.
        """
        expense, error = build_expense(draft, self._new_id())
        if expense is None:
            logger.debug("Rejected expense draft: %s", error)
            return None

        self._replace(insert_expense(self._expenses, expense))
        self.persist()
        return expense

    def delete(self, expense_id: ExpenseId) -> bool:
        """Remove an expense by id. Unknown ids are a no-op.

        The ledger is persisted either way.

        Returns:
            True if a record was removed.
        """
        remaining, removed = remove_expense(self._expenses, expense_id)
        if removed:
            self._replace(remaining)
        self.persist()
        return removed

    def months(self) -> list[MonthOption]:
        """Distinct months in the ledger, most recent first."""
        return grouped_months(self._expenses)

    def default_month(self) -> Month:
        """Month of the latest expense, or the current month when empty."""
        return default_month(self._expenses, self._today())

    def summary(self, month: Month) -> MonthSummary:
        """Summarize one month, reusing the result until the records change."""
        cache_key = (self._version, month)
        if cache_key not in self._summaries:
            self._summaries[cache_key] = build_month_summary(self._expenses, month)
        return self._summaries[cache_key]
