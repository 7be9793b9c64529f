"""Pure functions for selecting the expenses in a month scope."""

from collections.abc import Iterable
from datetime import datetime

from spendsnap.domain.expenses import Expense
from spendsnap.domain.models import ALL_MONTHS, Month, Scope
from spendsnap.domain.months import month_key


def parse_scope(raw: str | None) -> Scope:
    """Parse a month filter value.

    Args:
        raw: "all", a month in YYYY-MM format, or None/empty for all months.

    Returns:
        ALL_MONTHS or the validated month.

    Raises:
        ValueError: If the value is neither "all" nor a valid YYYY-MM month.
    """
    if raw is None:
        return ALL_MONTHS

    value = raw.strip()
    if not value or value.lower() == ALL_MONTHS:
        return ALL_MONTHS

    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError as e:
        raise ValueError(f"Invalid month '{raw}' (expected YYYY-MM or 'all')") from e

    return Month(parsed.strftime("%Y-%m"))


def select_expenses(expenses: Iterable[Expense], scope: Scope) -> tuple[Expense, ...]:
    """Select the expenses in scope, newest first.

    Expenses sharing a date keep their incoming order.

    Args:
        expenses: Expense records.
        scope: ALL_MONTHS or a month in YYYY-MM format.

    Returns:
        Expenses in scope sorted by date, most recent first.
    """
    if scope == ALL_MONTHS:
        selected = list(expenses)
    else:
        selected = [expense for expense in expenses if month_key(expense.date) == scope]

    return tuple(sorted(selected, key=lambda expense: expense.date, reverse=True))
