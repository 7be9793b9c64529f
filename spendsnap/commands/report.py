"""Report, list, months and trend commands for viewing expense data."""

import sys
from pathlib import Path

from spendsnap.commands.render import (
    console,
    render_categories,
    render_expenses,
    render_summary,
    render_trend,
)
from spendsnap.config import Settings, load_settings
from spendsnap.dates import month_label
from spendsnap.domain.filters import parse_scope, select_expenses
from spendsnap.domain.models import Scope
from spendsnap.domain.months import months_present
from spendsnap.domain.summary import summarize
from spendsnap.domain.trend import monthly_trend
from spendsnap.store.memory import ExpenseStore
from spendsnap.store.sources import load_expenses_csv, sample_expenses


def load_store(settings: Settings, csv_file: str | None = None) -> ExpenseStore:
    """Build an expense store from the configured record suppliers.

    Args:
        settings: Application settings.
        csv_file: Optional CSV file to load (overrides expenses_file from config).

    Returns:
        Store holding the sample data (if enabled) and the CSV expenses.

    Raises:
        OSError: If the CSV file cannot be read.
        ValueError: If the CSV file is missing required columns.
    """
    store = ExpenseStore(sample_expenses() if settings.load_sample_data else ())

    path = csv_file or settings.expenses_file
    if not path:
        return store

    rejected = 0
    for draft in load_expenses_csv(Path(path).expanduser()):
        _, error = store.add(draft)
        if error:
            rejected += 1

    if rejected:
        console.print(f"[yellow]Skipped {rejected} invalid row(s) in {path}[/yellow]")

    return store


def open_store(csv_file: str | None) -> tuple[Settings, ExpenseStore]:
    """Load settings and the expense store, exiting on failure."""
    try:
        settings = load_settings()
        store = load_store(settings, csv_file)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error loading expenses: {e}[/red]", style="bold")
        sys.exit(1)

    return settings, store


def resolve_scope(month: str | None) -> Scope:
    """Parse the --month option, exiting if it is invalid."""
    try:
        return parse_scope(month)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def report_command(
    month: str | None = None,
    categories: bool = True,
    csv_file: str | None = None,
) -> None:
    """Show the spending summary for a month and the monthly trend."""
    scope = resolve_scope(month)
    settings, store = open_store(csv_file)

    snapshot = store.all()
    summary = summarize(select_expenses(snapshot, scope))

    render_summary(summary, scope, settings.currency_symbol)
    if categories:
        render_categories(summary, settings.currency_symbol)
    render_trend(monthly_trend(snapshot, settings.trend_months), settings.currency_symbol)


def list_command(month: str | None = None, csv_file: str | None = None) -> None:
    """List expenses for a month, newest first."""
    scope = resolve_scope(month)
    settings, store = open_store(csv_file)

    render_expenses(select_expenses(store.all(), scope), scope, settings.currency_symbol)


def months_command(csv_file: str | None = None) -> None:
    """List the months that have expenses."""
    _, store = open_store(csv_file)

    months = months_present(store.all())
    if not months:
        console.print("[dim]No expenses yet[/dim]")
        return

    console.print("[bold]Months with expenses:[/bold]\n")
    for month in months:
        console.print(f"  {month}  [dim]{month_label(month)}[/dim]")


def trend_command(limit: int | None = None, csv_file: str | None = None) -> None:
    """Show total spend for the most recent months."""
    settings, store = open_store(csv_file)

    months = settings.trend_months if limit is None else limit
    render_trend(monthly_trend(store.all(), months), settings.currency_symbol)
