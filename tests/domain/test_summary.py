"""Tests for spendsnap.domain.summary pure functions."""

import random
from datetime import date

import pytest

from spendsnap.domain.expenses import Expense
from spendsnap.domain.models import CategoryName, Description, Money
from spendsnap.domain.summary import (
    Summary,
    divide_money,
    find_top_category,
    order_categories,
    summarize,
)


def make_expense(expense_id: str, category: str, cents: int, day: date) -> Expense:
    return Expense(
        id=expense_id,
        description=Description(f"Expense {expense_id}"),
        category=CategoryName(category),
        amount=Money(cents),
        date=day,
    )


APRIL = [
    make_expense("1", "Food", 6845, date(2024, 4, 6)),
    make_expense("2", "Health", 3999, date(2024, 4, 1)),
    make_expense("3", "Transport", 2550, date(2024, 4, 8)),
]


class TestDivideMoney:
    """Tests for divide_money."""

    def test_exact_division(self) -> None:
        """Should divide evenly."""
        assert divide_money(Money(3000), 2) == Money(1500)

    def test_rounds_half_up(self) -> None:
        """Should round the remainder half up."""
        assert divide_money(Money(13394), 3) == Money(4465)  # 4464.67
        assert divide_money(Money(5), 2) == Money(3)  # 2.5
        assert divide_money(Money(4), 3) == Money(1)  # 1.33

    def test_zero_divisor(self) -> None:
        """Should return 0 instead of dividing by zero."""
        assert divide_money(Money(1000), 0) == Money(0)


class TestOrderCategories:
    """Tests for order_categories."""

    def test_follows_fixed_category_order(self) -> None:
        """Should order keys by the category set, not insertion."""
        totals = {
            CategoryName("Other"): Money(1),
            CategoryName("Housing"): Money(2),
            CategoryName("Food"): Money(3),
        }

        assert list(order_categories(totals)) == ["Housing", "Food", "Other"]


class TestFindTopCategory:
    """Tests for find_top_category."""

    def test_largest_total_wins(self) -> None:
        """Should pick the category with the largest total."""
        by_category = {CategoryName("Food"): Money(100), CategoryName("Health"): Money(300)}

        assert find_top_category(by_category) == ("Health", Money(300))

    def test_tie_goes_to_first_seen(self) -> None:
        """Should keep the first category on a tie."""
        by_category = {
            CategoryName("Food"): Money(300),
            CategoryName("Transport"): Money(300),
            CategoryName("Health"): Money(100),
        }

        assert find_top_category(by_category) == ("Food", Money(300))

    def test_empty(self) -> None:
        """Should return no category for no totals."""
        assert find_top_category({}) == (None, Money(0))


class TestSummarize:
    """Tests for summarize."""

    def test_empty_input(self) -> None:
        """Should return the zero summary."""
        summary = summarize([])

        assert summary == Summary()
        assert summary.total == 0
        assert summary.count == 0
        assert summary.by_category == {}
        assert summary.average == 0
        assert summary.top_category is None

    def test_april_scenario(self) -> None:
        """Should total, average per active day and rank categories."""
        summary = summarize(APRIL)

        assert summary.total == Money(13394)
        assert summary.count == 3
        assert summary.active_days == 3
        assert summary.average == Money(4465)
        assert summary.top_category == "Food"
        assert summary.top_amount == Money(6845)
        assert summary.by_category == {
            "Food": Money(6845),
            "Transport": Money(2550),
            "Health": Money(3999),
        }

    def test_average_uses_distinct_dates(self) -> None:
        """Should divide by active days, not by expense count."""
        same_day = date(2024, 4, 6)
        expenses = [
            make_expense("1", "Food", 1000, same_day),
            make_expense("2", "Leisure", 2000, same_day),
        ]

        summary = summarize(expenses)

        assert summary.active_days == 1
        assert summary.average == Money(3000)

    def test_categories_partition_total(self) -> None:
        """Should have category totals that add up to the total."""
        expenses = APRIL + [
            make_expense("4", "Food", 1250, date(2024, 4, 9)),
            make_expense("5", "Utilities", 9120, date(2024, 3, 18)),
        ]

        summary = summarize(expenses)

        assert sum(summary.by_category.values()) == summary.total
        assert summary.by_category[CategoryName("Food")] == Money(8095)

    def test_category_totals_are_read_only(self) -> None:
        """Should not let callers change the category totals."""
        summary = summarize(APRIL)

        with pytest.raises(TypeError):
            summary.by_category[CategoryName("Food")] = Money(1)  # type: ignore[index]
        with pytest.raises(TypeError):
            Summary().by_category[CategoryName("Food")] = Money(1)  # type: ignore[index]

    def test_absent_categories_not_listed(self) -> None:
        """Should leave out categories without expenses."""
        summary = summarize(APRIL)

        assert CategoryName("Housing") not in summary.by_category

    def test_total_independent_of_order(self) -> None:
        """Should give the same summary for any input order."""
        shuffled = list(APRIL)
        random.Random(7).shuffle(shuffled)

        assert summarize(shuffled) == summarize(APRIL)

    def test_tie_broken_by_category_order(self) -> None:
        """Should pick the earlier category in the fixed order on a tie."""
        expenses = [
            make_expense("1", "Leisure", 2000, date(2024, 4, 1)),
            make_expense("2", "Transport", 2000, date(2024, 4, 2)),
        ]

        assert summarize(expenses).top_category == "Transport"

    def test_idempotent(self) -> None:
        """Should give equal results when called twice."""
        assert summarize(APRIL) == summarize(APRIL)
