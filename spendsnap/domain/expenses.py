"""Pure functions for creating and validating expense records.

This module contains the functional core for expense input:
- No I/O operations (no storage, no console, no files)
- No side effects
- Invalid input is reported as an error message, never raised

All monetary amounts are in cents (Money type).
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import TypedDict

from spendsnap.domain.models import CATEGORIES, CategoryName, Description, Money

CENT = Decimal("0.01")


class ExpenseDraft(TypedDict, total=False):
    """Raw expense input, as collected by a form or read from a file."""

    description: str
    category: str
    amount: str | int | float | Decimal
    date: str | date
    note: str | None


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: str
    description: Description
    category: CategoryName
    amount: Money
    date: date
    note: str = ""


def parse_amount(raw: object) -> Money | None:
    """Parse a raw amount into cents.

    Args:
        raw: Amount in currency units (e.g., "12.50", 12.5, Decimal("12.5")).

    Returns:
        Amount in cents rounded half-up, or None if the value is not a
        finite number that stays above zero after rounding.
    """
    if isinstance(raw, bool) or raw is None:
        return None

    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        raw = repr(raw)

    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None

    if not value.is_finite() or value <= 0:
        return None

    # Amounts too large to hold at cent precision can't be quantized
    try:
        cents = int(value.quantize(CENT, rounding=ROUND_HALF_UP).scaleb(2))
    except InvalidOperation:
        return None

    if cents <= 0:
        return None

    return Money(cents)


def parse_expense_date(raw: object) -> date | None:
    """Parse an expense date.

    Args:
        raw: A date, a datetime (truncated to its date) or an ISO string (YYYY-MM-DD).

    Returns:
        The calendar date, or None if it cannot be parsed.
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        return None

    try:
        return datetime.strptime(raw.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_category(raw: object) -> CategoryName | None:
    """Match a raw category against the closed category set.

    Args:
        raw: Category name. None selects the first category.

    Returns:
        The category name, or None if it is not a known category.
    """
    if raw is None:
        return CATEGORIES[0]
    if not isinstance(raw, str):
        return None

    name = CategoryName(raw.strip())
    return name if name in CATEGORIES else None


def build_expense(draft: ExpenseDraft, expense_id: str) -> tuple[Expense | None, str | None]:
    """Validate a draft and build an expense record from it.

    Args:
        draft: Raw expense input.
        expense_id: Identifier to assign to the new record.

    Returns:
        Tuple of (expense, error):
        - expense: The new record, or None if the draft was rejected
        - error: Reason for rejection, or None if the record was built
    """
    description = str(draft.get("description") or "").strip()
    if not description:
        return None, "Description is required"

    amount = parse_amount(draft.get("amount"))
    if amount is None:
        return None, "Amount must be a positive number"

    raw_date = draft.get("date")
    expense_date = parse_expense_date(raw_date)
    if expense_date is None:
        return None, f"Invalid date '{raw_date}' (expected YYYY-MM-DD)"

    raw_category = draft.get("category")
    category = parse_category(raw_category)
    if category is None:
        return None, f"Unknown category '{raw_category}'"

    note = str(draft.get("note") or "").strip()

    expense = Expense(
        id=expense_id,
        description=Description(description),
        category=category,
        amount=amount,
        date=expense_date,
        note=note,
    )
    return expense, None
