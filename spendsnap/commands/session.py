"""Interactive session for logging expenses and watching the summaries update."""

import typer
from rich.columns import Columns

from spendsnap.commands.render import (
    console,
    format_money,
    format_scope,
    render_expenses,
    render_summary,
    render_trend,
)
from spendsnap.commands.report import open_store, resolve_scope
from spendsnap.config import Settings
from spendsnap.dates import month_label, normalize_date, today
from spendsnap.domain.expenses import ExpenseDraft
from spendsnap.domain.filters import select_expenses
from spendsnap.domain.models import ALL_MONTHS, CATEGORIES, CategoryName, Scope
from spendsnap.domain.months import months_present
from spendsnap.domain.summary import summarize
from spendsnap.domain.trend import monthly_trend
from spendsnap.store.memory import ExpenseStore


def render_snapshot(store: ExpenseStore, scope: Scope, settings: Settings) -> None:
    """Render every view from a single snapshot of the store."""
    snapshot = store.all()
    selected = select_expenses(snapshot, scope)

    render_summary(summarize(selected), scope, settings.currency_symbol)
    render_expenses(selected, scope, settings.currency_symbol)
    render_trend(monthly_trend(snapshot, settings.trend_months), settings.currency_symbol)


def prompt_category() -> CategoryName | None:
    """Display categories and prompt for a choice.

    Returns:
        Selected category, or None if the choice was invalid.
    """
    console.print("[cyan]Categories:[/cyan]")
    category_items = [f"{idx}. {cat}" for idx, cat in enumerate(CATEGORIES, 1)]
    console.print(Columns(category_items, equal=True, expand=False, column_first=True))

    choice: str = typer.prompt(f"Select category (1-{len(CATEGORIES)})", type=str, default="1")
    try:
        idx = int(choice) - 1
    except ValueError:
        return None
    if 0 <= idx < len(CATEGORIES):
        return CATEGORIES[idx]
    return None


def prompt_expense() -> ExpenseDraft | None:
    """Prompt for the fields of a new expense.

    Returns:
        Draft to add, or None if the date or category could not be read.
    """
    description: str = typer.prompt("Description", type=str, default="", show_default=False)
    amount: str = typer.prompt("Amount", type=str, default="", show_default=False)
    raw_date: str = typer.prompt("Date", type=str, default=today())

    try:
        expense_date = normalize_date(raw_date)
    except ValueError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return None

    category = prompt_category()
    if category is None:
        console.print("[yellow]Invalid category selection[/yellow]")
        return None

    note: str = typer.prompt("Note", type=str, default="", show_default=False)

    return ExpenseDraft(
        description=description,
        category=category,
        amount=amount,
        date=expense_date,
        note=note,
    )


def add_expense(store: ExpenseStore, settings: Settings) -> None:
    """Prompt for an expense and add it to the store."""
    draft = prompt_expense()
    if draft is None:
        return

    expense, error = store.add(draft)
    if expense is None:
        console.print(f"[yellow]Expense not added: {error}[/yellow]\n")
        return

    console.print(
        f"[green]✓[/green] Added {expense.description} "
        f"({expense.category}, {format_money(expense.amount, settings.currency_symbol)}) on {expense.date}\n"
    )


def choose_scope(store: ExpenseStore, current: Scope) -> Scope:
    """Prompt for a month filter.

    Args:
        store: Expense store to take the months from.
        current: Active month filter, kept if the choice is invalid.

    Returns:
        Selected month filter.
    """
    months = months_present(store.all())

    console.print("[cyan]Months:[/cyan]")
    console.print("  0. All months")
    for idx, month in enumerate(months, 1):
        console.print(f"  {idx}. {month_label(month)}")

    choice: str = typer.prompt(f"Select month (0-{len(months)})", type=str, default="0")
    try:
        idx = int(choice)
    except ValueError:
        console.print("[red]Invalid input[/red]")
        return current

    if idx == 0:
        return ALL_MONTHS
    if 1 <= idx <= len(months):
        return months[idx - 1]

    console.print("[red]Invalid selection[/red]")
    return current


def session_command(month: str | None = None, csv_file: str | None = None) -> None:
    """Run an interactive session: add expenses and switch months."""
    scope = resolve_scope(month)
    settings, store = open_store(csv_file)

    while True:
        render_snapshot(store, scope, settings)

        action: str = typer.prompt(
            f"[{format_scope(scope)}] a to add an expense, m to change month, q to quit",
            type=str,
            default="q",
        )
        action = action.strip().lower()

        if action == "q":
            break
        elif action == "a":
            add_expense(store, settings)
        elif action == "m":
            scope = choose_scope(store, scope)
            console.print()
        else:
            console.print("[red]Invalid choice[/red]\n")

    console.print(f"[dim]Session ended with {len(store)} expense(s)[/dim]")
