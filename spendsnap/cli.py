"""CLI entry point for spendsnap."""

import typer

from spendsnap.commands.admin import config_command, init_command
from spendsnap.commands.report import list_command, months_command, report_command, trend_command
from spendsnap.commands.session import session_command

app = typer.Typer(
    name="spendsnap",
    help="Spending Snapshot - track where your money goes",
    add_completion=False,
)

FILE_HELP = "CSV file of expenses to load (date, description, category, amount, note)"
MONTH_HELP = "Month to show (YYYY-MM, or 'all')"


@app.callback()
def main() -> None:
    """Spending Snapshot - track where your money goes."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the spendsnap configuration file."""
    init_command(force)


@app.command(name="config")
def config() -> None:
    """Show your active settings."""
    config_command()


@app.command(name="months")
def months(
    file: str = typer.Option(None, "--file", help=FILE_HELP),
) -> None:
    """List the months that have expenses."""
    months_command(file)


@app.command(name="list")
def list_expenses(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
    file: str = typer.Option(None, "--file", help=FILE_HELP),
) -> None:
    """List your expenses, newest first."""
    list_command(month, file)


@app.command(name="report")
def report(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
    categories: bool = typer.Option(True, help="Show spending by category"),
    file: str = typer.Option(None, "--file", help=FILE_HELP),
) -> None:
    """Show your total, daily average, top category and monthly trend."""
    report_command(month, categories, file)


@app.command(name="trend")
def trend(
    limit: int = typer.Option(None, "--limit", "-n", help="Number of months to show (overrides config)"),
    file: str = typer.Option(None, "--file", help=FILE_HELP),
) -> None:
    """Show your total spend for the most recent months."""
    trend_command(limit, file)


@app.command(name="session")
def session(
    month: str = typer.Option(None, "--month", "-m", help=MONTH_HELP),
    file: str = typer.Option(None, "--file", help=FILE_HELP),
) -> None:
    """Log expenses interactively and watch your summary update."""
    session_command(month, file)


if __name__ == "__main__":
    app()
