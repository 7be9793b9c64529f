"""Rendering helpers shared by the report and session commands."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spendsnap.dates import month_label
from spendsnap.domain.expenses import Expense
from spendsnap.domain.models import ALL_MONTHS, Money, Scope
from spendsnap.domain.summary import Summary
from spendsnap.domain.trend import TrendPoint

console = Console()

TREND_BAR_WIDTH = 30


def format_money(amount: Money, symbol: str = "$") -> str:
    """Format money amount for display.

    Args:
        amount: Amount in cents.
        symbol: Currency symbol.

    Returns:
        Formatted string (e.g., "$1,234.56").
    """
    formatted = f"{symbol}{abs(amount) / 100:,.2f}"
    return f"-{formatted}" if amount < 0 else formatted


def format_count(count: int) -> str:
    """Format a transaction count (e.g., "1 transaction", "3 transactions")."""
    return f"{count} {'transaction' if count == 1 else 'transactions'}"


def format_scope(scope: Scope) -> str:
    """Format the active month filter for display."""
    if scope == ALL_MONTHS:
        return "All months"
    return month_label(scope)


def calculate_bar_length(percentage: int, bar_width: int) -> int:
    """Calculate trend bar length.

    Args:
        percentage: Share of the largest month (0-100).
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if percentage <= 0:
        return 0
    return min(bar_width, percentage * bar_width // 100)


def render_summary(summary: Summary, scope: Scope, symbol: str = "$") -> None:
    """Render the total, average and top category cards.

    Args:
        summary: Summary of the expenses in scope.
        scope: Active month filter.
        symbol: Currency symbol.
    """
    console.print(f"[bold cyan]{format_scope(scope)}[/bold cyan]\n")

    console.print(f"  [bold]Total spent:[/bold] {format_money(summary.total, symbol)}")
    console.print(f"  [dim]{format_count(summary.count)}[/dim]")

    console.print(f"  [bold]Average per day:[/bold] {format_money(summary.average, symbol)}")
    console.print("  [dim]Based on active days[/dim]")

    if summary.top_category is not None:
        console.print(f"  [bold]Top category:[/bold] {summary.top_category}")
        console.print(f"  [dim]{format_money(summary.top_amount, symbol)}[/dim]")
    else:
        console.print("  [bold]Top category:[/bold] —")
        console.print("  [dim]Add an expense to see data[/dim]")

    console.print()


def render_categories(summary: Summary, symbol: str = "$") -> None:
    """Render spending by category.

    Args:
        summary: Summary of the expenses in scope.
        symbol: Currency symbol.
    """
    if not summary.by_category:
        return

    console.print("[bold]Spending by category:[/bold]\n")
    for category, amount in summary.by_category.items():
        console.print(f"  {category:12} {format_money(amount, symbol):>12}")
    console.print()


def render_expenses(expenses: Sequence[Expense], scope: Scope, symbol: str = "$") -> None:
    """Render the recent activity table.

    Args:
        expenses: Expenses in scope, in display order.
        scope: Active month filter.
        symbol: Currency symbol.
    """
    if not expenses:
        console.print("[dim]No expenses for this selection yet.[/dim]\n")
        return

    table = Table(title=f"Recent activity - {format_scope(scope)} ({format_count(len(expenses))})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Category")
    table.add_column("Note", style="dim")
    table.add_column("Amount", justify="right")

    for idx, expense in enumerate(expenses, 1):
        table.add_row(
            str(idx),
            expense.date.isoformat(),
            escape(expense.description),
            expense.category,
            escape(expense.note) if expense.note else "-",
            format_money(expense.amount, symbol),
        )

    console.print(table)
    console.print()


def render_trend(points: Sequence[TrendPoint], symbol: str = "$") -> None:
    """Render the monthly trend with proportional bars.

    Args:
        points: Trend series, most recent month first.
        symbol: Currency symbol.
    """
    console.print("[bold]Monthly trend:[/bold]\n")

    if not points:
        console.print("  [dim]No expenses yet[/dim]\n")
        return

    for point in points:
        bar = "█" * calculate_bar_length(point.percentage, TREND_BAR_WIDTH)
        amount_display = format_money(point.amount, symbol)
        console.print(f"  {month_label(point.month):10} {amount_display:>12} {bar}")

    console.print()
