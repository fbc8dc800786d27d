"""Balance, chart and dashboard commands."""

import sqlite3
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from moneyjar.commands.common import print_errors, require_database, require_login
from moneyjar.domain.models import Category, MoneyRecord
from moneyjar.domain.report import (
    ChartPoint,
    calculate_histogram_bar_length,
    chart_series,
    create_dashboard,
    current_balance,
    random_color,
)
from moneyjar.domain.validation import parse_record_type
from moneyjar.store.entities import open_category_store, open_record_store
from moneyjar.store.slots import SlotDecodeError

console = Console()

BAR_WIDTH = 30


def load_collections(db_path: Path) -> tuple[list[MoneyRecord], list[Category]]:
    """Load records and categories, exiting on database errors."""
    try:
        return open_record_store(db_path).list(), open_category_store(db_path).list()
    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def format_balance(balance: float) -> str:
    """Format a balance with colour by sign."""
    if balance < 0:
        return f"[red]-{abs(balance):,.2f}[/red]"
    return f"[green]{balance:,.2f}[/green]"


def render_series(title: str, series: list[ChartPoint], histogram: bool) -> None:
    """Render one chart series, one line per category.

    Args:
        title: Heading printed above the series.
        series: Chart points in category order.
        histogram: Whether to draw bars next to the values.
    """
    console.print(f"[bold]{title}[/bold]\n")

    if not series:
        console.print("  [dim]No data.[/dim]\n")
        return

    max_value = max(point.value for point in series)
    for point in series:
        value_display = f"{point.value:,.2f}"
        if histogram:
            bar = "█" * calculate_histogram_bar_length(point.value, max_value, BAR_WIDTH)
            label = escape(f"{point.category:20}")
            console.print(f"  {label} {value_display:>12} [{random_color()}]{bar}[/]")
        else:
            console.print(f"  {escape(point.category)}: {value_display}")
    console.print()


def balance_command() -> None:
    """Show the current balance."""
    db_path = require_database()
    require_login(db_path)

    records, _ = load_collections(db_path)
    console.print(f"[bold]Current balance:[/bold] {format_balance(current_balance(records))}")
    console.print("[dim]As of today[/dim]")


def chart_command(type: str = "expense", histogram: bool = True) -> None:
    """Show the per-category breakdown for one record type."""
    db_path = require_database()
    require_login(db_path)

    record_type = parse_record_type(type)
    if record_type is None:
        print_errors(["Type must be one of: expense, income"])

    records, categories = load_collections(db_path)
    series = chart_series(records, categories, record_type)
    render_series(f"{record_type.value.capitalize()} by category", series, histogram)


def dashboard_command(histogram: bool = True) -> None:
    """Show balance, totals and both category breakdowns."""
    db_path = require_database()
    user = require_login(db_path)

    records, categories = load_collections(db_path)
    dashboard = create_dashboard(records, categories)

    console.print(f"[bold cyan]Dashboard for {escape(user.username)}[/bold cyan]\n")
    console.print(f"[bold]Current balance:[/bold] {format_balance(dashboard.balance)}")
    console.print(f"[bold]Total income:[/bold] [green]{dashboard.income_total:,.2f}[/green]")
    console.print(f"[bold]Total expenses:[/bold] [red]{dashboard.expense_total:,.2f}[/red]\n")

    render_series("Expenses by category", dashboard.expenses, histogram)
    render_series("Income by category", dashboard.income, histogram)
