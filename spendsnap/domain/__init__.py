"""Domain models and types for spendsnap.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Aggregation logic separated from storage and presentation
"""

from spendsnap.domain.expenses import Expense, ExpenseDraft, build_expense, parse_amount
from spendsnap.domain.filters import parse_scope, select_expenses
from spendsnap.domain.models import ALL_MONTHS, CATEGORIES, CategoryName, Description, Money, Month, Scope
from spendsnap.domain.months import month_key, months_present
from spendsnap.domain.summary import Summary, summarize
from spendsnap.domain.trend import TrendPoint, monthly_trend

__all__ = [
    # Types
    "ALL_MONTHS",
    "CATEGORIES",
    "CategoryName",
    "Description",
    "Money",
    "Month",
    "Scope",
    # Records
    "Expense",
    "ExpenseDraft",
    "build_expense",
    "parse_amount",
    # Views
    "Summary",
    "TrendPoint",
    "month_key",
    "monthly_trend",
    "months_present",
    "parse_scope",
    "select_expenses",
    "summarize",
]
