"""Suppliers of expense drafts: bundled sample data and CSV files."""

import csv
from collections.abc import Iterator
from pathlib import Path

from spendsnap.dates import normalize_date
from spendsnap.domain.expenses import ExpenseDraft

CSV_COLUMNS = ("date", "description", "category", "amount", "note")


def sample_expenses() -> list[ExpenseDraft]:
    """Get the bundled sample expenses.

    Returns:
        Drafts for a handful of March and April 2024 expenses.
    """
    return [
        ExpenseDraft(
            description="Groceries",
            category="Food",
            amount="68.45",
            date="2024-04-06",
            note="Weekly supermarket run",
        ),
        ExpenseDraft(description="Gym Membership", category="Health", amount="39.99", date="2024-04-01", note=""),
        ExpenseDraft(description="Metro card", category="Transport", amount="25.50", date="2024-04-08", note="Top-up"),
        ExpenseDraft(description="Streaming service", category="Leisure", amount="12.99", date="2024-03-29", note=""),
        ExpenseDraft(
            description="Electricity",
            category="Utilities",
            amount="91.20",
            date="2024-03-18",
            note="March bill",
        ),
    ]


def parse_csv_row(row: dict[str, str | None]) -> ExpenseDraft:
    """Parse a CSV row into an expense draft.

    Dates are normalized to YYYY-MM-DD where possible. Anything else is
    passed through as-is and validated when the draft is added to a store.

    Args:
        row: CSV row as dictionary.

    Returns:
        ExpenseDraft with the row's values.
    """
    raw_date = (row.get("date") or "").strip()
    try:
        expense_date = normalize_date(raw_date)
    except ValueError:
        expense_date = raw_date

    return ExpenseDraft(
        description=row.get("description") or "",
        category=(row.get("category") or "").strip(),
        amount=(row.get("amount") or "").strip().replace(",", ""),
        date=expense_date,
        note=row.get("note") or "",
    )


def load_expenses_csv(csv_path: Path) -> Iterator[ExpenseDraft]:
    """Read expense drafts from a CSV file.

    Args:
        csv_path: Path to a CSV file with date, description, category, amount
            and note columns (note is optional).

    Yields:
        One ExpenseDraft per row.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If a required column is missing.
    """
    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        headers = [h.strip().lower() for h in reader.fieldnames or []]
        missing = [col for col in CSV_COLUMNS if col != "note" and col not in headers]
        if missing:
            raise ValueError(f"CSV is missing required columns: {', '.join(missing)}")

        for row in reader:
            yield parse_csv_row({(k or "").strip().lower(): v for k, v in row.items()})
