"""Expense store layer - holds records and supplies them to the core.

This module re-exports the public store functions for easy importing.
"""

from spendsnap.store.memory import ExpenseStore, new_expense_id
from spendsnap.store.sources import load_expenses_csv, parse_csv_row, sample_expenses

__all__ = [
    "ExpenseStore",
    "load_expenses_csv",
    "new_expense_id",
    "parse_csv_row",
    "sample_expenses",
]
