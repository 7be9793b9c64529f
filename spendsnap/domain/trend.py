"""Pure functions for the month-over-month spending trend.

All monetary amounts are in cents (Money type).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from spendsnap.domain.expenses import Expense
from spendsnap.domain.models import Money, Month
from spendsnap.domain.months import month_key

DEFAULT_TREND_MONTHS = 4


@dataclass(frozen=True)
class TrendPoint:
    """Immutable total spend for one month, relative to the series peak."""

    month: Month
    amount: Money
    percentage: int


def calculate_trend_percentage(amount: Money, max_amount: Money) -> int:
    """Calculate an amount as a whole percentage of the largest amount.

    Args:
        amount: Month total in cents.
        max_amount: Largest month total in the series.

    Returns:
        Percentage (0-100) rounded half-up, or 0 if max_amount is not positive.
    """
    if max_amount <= 0:
        return 0
    return (amount * 200 + max_amount) // (max_amount * 2)


def group_by_month(expenses: Iterable[Expense]) -> dict[Month, Money]:
    """Sum expense amounts per month.

    Args:
        expenses: Expense records.

    Returns:
        Dictionary of month totals.
    """
    totals: dict[Month, Money] = {}
    for expense in expenses:
        key = month_key(expense.date)
        totals[key] = Money(totals.get(key, 0) + expense.amount)
    return totals


def monthly_trend(expenses: Iterable[Expense], limit: int = DEFAULT_TREND_MONTHS) -> tuple[TrendPoint, ...]:
    """Build the total spend series for the most recent months.

    Args:
        expenses: All expense records, regardless of the active month filter.
        limit: Maximum number of months to include.

    Returns:
        Trend points, most recent month first. Each percentage is relative
        to the largest total among the returned months.
    """
    if limit <= 0:
        return ()

    recent = sorted(group_by_month(expenses).items(), reverse=True)[:limit]
    if not recent:
        return ()

    max_amount = Money(max(amount for _, amount in recent))

    return tuple(
        TrendPoint(month=month, amount=amount, percentage=calculate_trend_percentage(amount, max_amount))
        for month, amount in recent
    )
