"""Admin commands for initializing and showing configuration."""

import sys

from spendsnap.commands.render import console
from spendsnap.config import create_default_config, get_config_path, load_settings


def init_command(force: bool = False) -> None:
    """Create the default spendsnap configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'spendsnap init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Initialization failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")


def config_command() -> None:
    """Show the active settings."""
    config_path = get_config_path()

    try:
        settings = load_settings(config_path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    if config_path.exists():
        console.print(f"[dim]Config: {config_path}[/dim]\n")
    else:
        console.print(f"[dim]Using defaults (no config at {config_path})[/dim]\n")

    console.print(f"  currency_symbol:  {settings.currency_symbol}")
    console.print(f"  trend_months:     {settings.trend_months}")
    console.print(f"  load_sample_data: {str(settings.load_sample_data).lower()}")
    console.print(f"  expenses_file:    {settings.expenses_file or '-'}")
