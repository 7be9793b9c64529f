"""In-memory, append-only expense store."""

import threading
import uuid
from collections.abc import Callable, Iterable

from spendsnap.domain.expenses import Expense, ExpenseDraft, build_expense


def new_expense_id() -> str:
    """Generate a new unique expense identifier."""
    return str(uuid.uuid4())


class ExpenseStore:
    """Holds expense records for the lifetime of a session.

    Records can only be added, never changed or removed. The most recently
    added record comes first. Reads return snapshots, so derived views are
    always computed from a single consistent state.
    """

    def __init__(
        self,
        initial: Iterable[ExpenseDraft] = (),
        id_factory: Callable[[], str] = new_expense_id,
    ) -> None:
        self._lock = threading.Lock()
        self._expenses: list[Expense] = []
        self._ids: set[str] = set()
        self._id_factory = id_factory

        for draft in initial:
            self.add(draft)

    def add(self, draft: ExpenseDraft) -> tuple[Expense | None, str | None]:
        """Validate a draft and add it to the store.

        Args:
            draft: Raw expense input.

        Returns:
            Tuple of (expense, error):
            - expense: The added record, or None if the draft was rejected
            - error: Reason for rejection, or None if the record was added
        """
        with self._lock:
            expense_id = self._id_factory()
            if expense_id in self._ids:
                return None, f"Duplicate expense id '{expense_id}'"

            expense, error = build_expense(draft, expense_id)
            if expense is None:
                return None, error

            self._ids.add(expense_id)
            self._expenses.insert(0, expense)
            return expense, None

    def all(self) -> tuple[Expense, ...]:
        """Get a snapshot of every expense, most recently added first."""
        with self._lock:
            return tuple(self._expenses)

    def __len__(self) -> int:
        with self._lock:
            return len(self._expenses)
