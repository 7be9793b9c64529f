"""Pure functions for summarizing a set of expenses.

This module contains the functional core for the summary cards:
- No I/O operations (no storage, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType

from spendsnap.domain.expenses import Expense
from spendsnap.domain.models import CATEGORIES, CategoryName, Money


@dataclass(frozen=True)
class Summary:
    """Immutable summary of a set of expenses.

    by_category is a read-only view.
    """

    total: Money = Money(0)
    count: int = 0
    by_category: Mapping[CategoryName, Money] = field(default_factory=lambda: MappingProxyType({}))
    top_category: CategoryName | None = None
    top_amount: Money = Money(0)
    active_days: int = 0
    average: Money = Money(0)


def divide_money(amount: Money, divisor: int) -> Money:
    """Divide an amount, rounding half-up to the cent.

    Args:
        amount: Amount in cents.
        divisor: Number to divide by.

    Returns:
        Rounded quotient in cents, or 0 if divisor is not positive.
    """
    if divisor <= 0:
        return Money(0)
    quotient, remainder = divmod(amount, divisor)
    if remainder * 2 >= divisor:
        quotient += 1
    return Money(quotient)


def order_categories(totals: dict[CategoryName, Money]) -> dict[CategoryName, Money]:
    """Order category totals by the fixed category order.

    Args:
        totals: Category totals in any order.

    Returns:
        Category totals following CATEGORIES order.
    """
    return {category: totals[category] for category in CATEGORIES if category in totals}


def find_top_category(by_category: Mapping[CategoryName, Money]) -> tuple[CategoryName | None, Money]:
    """Find the category with the largest total.

    Ties go to the category seen first when iterating by_category.

    Args:
        by_category: Category totals.

    Returns:
        Tuple of (category, amount), or (None, 0) if there are no totals.
    """
    top_category: CategoryName | None = None
    top_amount = Money(0)

    for category, amount in by_category.items():
        if top_category is None or amount > top_amount:
            top_category = category
            top_amount = amount

    return top_category, top_amount


def summarize(expenses: Iterable[Expense]) -> Summary:
    """Summarize expenses into totals, category breakdown and daily average.

    The average is per active day: total divided by the number of distinct
    dates that have an expense, not by the days elapsed in the period.

    Args:
        expenses: Expense records (typically one month scope).

    Returns:
        Summary with all calculations. Empty input gives the zero Summary.
    """
    total = 0
    count = 0
    totals: dict[CategoryName, Money] = {}
    days: set[date] = set()

    for expense in expenses:
        total += expense.amount
        count += 1
        totals[expense.category] = Money(totals.get(expense.category, 0) + expense.amount)
        days.add(expense.date)

    if not count:
        return Summary()

    by_category = order_categories(totals)
    top_category, top_amount = find_top_category(by_category)

    return Summary(
        total=Money(total),
        count=count,
        by_category=MappingProxyType(by_category),
        top_category=top_category,
        top_amount=top_amount,
        active_days=len(days),
        average=divide_money(Money(total), len(days)),
    )
