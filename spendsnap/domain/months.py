"""Pure functions for deriving calendar-month keys from expenses."""

from collections.abc import Iterable
from datetime import date

from spendsnap.domain.expenses import Expense
from spendsnap.domain.models import Month


def month_key(day: date) -> Month:
    """Get the month key for a date.

    Args:
        day: Calendar date.

    Returns:
        Month in YYYY-MM format.
    """
    return Month(f"{day.year:04d}-{day.month:02d}")


def months_present(expenses: Iterable[Expense]) -> list[Month]:
    """Get the distinct months that have at least one expense.

    Args:
        expenses: Expense records.

    Returns:
        Unique months, most recent first.
    """
    return sorted({month_key(expense.date) for expense in expenses}, reverse=True)
