"""Tests for spendsnap.store.sources record suppliers."""

from pathlib import Path

import pytest

from spendsnap.domain.models import Money
from spendsnap.store.memory import ExpenseStore
from spendsnap.store.sources import load_expenses_csv, parse_csv_row, sample_expenses


class TestSampleExpenses:
    """Tests for sample_expenses."""

    def test_all_samples_are_valid(self) -> None:
        """Should only contain drafts the store accepts."""
        store = ExpenseStore()

        for draft in sample_expenses():
            _, error = store.add(draft)
            assert error is None

    def test_returns_fresh_list(self) -> None:
        """Should not share state between calls."""
        first = sample_expenses()
        first.clear()

        assert len(sample_expenses()) == 5


class TestParseCsvRow:
    """Tests for parse_csv_row."""

    def test_parses_row(self) -> None:
        """Should map CSV columns to draft fields."""
        row = {
            "date": "2024-04-06",
            "description": "Groceries",
            "category": "Food",
            "amount": "68.45",
            "note": "Weekly",
        }

        draft = parse_csv_row(row)

        assert draft == {
            "date": "2024-04-06",
            "description": "Groceries",
            "category": "Food",
            "amount": "68.45",
            "note": "Weekly",
        }

    def test_normalizes_day_first_date(self) -> None:
        """Should read ambiguous dates day first."""
        draft = parse_csv_row({"date": "06/04/2024", "description": "x", "category": "Food", "amount": "1"})

        assert draft["date"] == "2024-04-06"

    def test_strips_thousands_separator(self) -> None:
        """Should remove commas from amounts."""
        draft = parse_csv_row({"date": "2024-04-06", "description": "Rent", "category": "Housing", "amount": "1,200.00"})

        assert draft["amount"] == "1200.00"

    def test_keeps_unparseable_date(self) -> None:
        """Should pass an unparseable date through for the store to reject."""
        draft = parse_csv_row({"date": "someday", "description": "x", "category": "Food", "amount": "1"})

        assert draft["date"] == "someday"

    def test_missing_note(self) -> None:
        """Should default a missing note to empty."""
        draft = parse_csv_row({"date": "2024-04-06", "description": "x", "category": "Food", "amount": "1"})

        assert draft["note"] == ""


class TestLoadExpensesCsv:
    """Tests for load_expenses_csv."""

    def test_reads_rows(self, tmp_path: Path) -> None:
        """Should yield one draft per row."""
        csv_path = tmp_path / "expenses.csv"
        csv_path.write_text(
            "Date,Description,Category,Amount,Note\n"
            "2024-05-02,Rent,Housing,1200.00,May\n"
            "2024-05-03,Bus,Transport,2.75,\n"
        )

        drafts = list(load_expenses_csv(csv_path))

        assert len(drafts) == 2
        assert drafts[0]["description"] == "Rent"
        assert drafts[1]["amount"] == "2.75"

    def test_invalid_rows_rejected_by_store(self, tmp_path: Path) -> None:
        """Should leave invalid rows for the store to reject."""
        csv_path = tmp_path / "expenses.csv"
        csv_path.write_text(
            "date,description,category,amount\n"
            "2024-05-02,Rent,Housing,1200.00\n"
            "2024-05-03,,Transport,2.75\n"
            "2024-05-04,Gift,Presents,10\n"
            "2024-05-05,Refund,Other,-5\n"
        )
        store = ExpenseStore()

        errors = [store.add(draft)[1] for draft in load_expenses_csv(csv_path)]

        assert len(store) == 1
        assert store.all()[0].amount == Money(120000)
        assert sum(1 for error in errors if error) == 3

    def test_too_large_amount_rejected_by_store(self, tmp_path: Path) -> None:
        """Should let the store reject an amount too large to hold in cents."""
        csv_path = tmp_path / "expenses.csv"
        csv_path.write_text("date,description,category,amount\n2024-05-02,Yacht,Leisure,1e30\n")
        store = ExpenseStore()

        errors = [store.add(draft)[1] for draft in load_expenses_csv(csv_path)]

        assert errors == ["Amount must be a positive number"]
        assert len(store) == 0

    def test_missing_column_raises_valueerror(self, tmp_path: Path) -> None:
        """Should raise ValueError if a required column is missing."""
        csv_path = tmp_path / "expenses.csv"
        csv_path.write_text("date,description,amount\n2024-05-02,Rent,1200.00\n")

        with pytest.raises(ValueError, match="category"):
            list(load_expenses_csv(csv_path))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            list(load_expenses_csv(tmp_path / "missing.csv"))
