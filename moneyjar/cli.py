"""CLI entry point for moneyjar."""

import typer

from moneyjar.commands.admin import backup_command, init_command
from moneyjar.commands.auth import adduser_command, login_command, logout_command, whoami_command
from moneyjar.commands.categories import (
    add_category_command,
    edit_category_command,
    list_categories_command,
    remove_category_command,
)
from moneyjar.commands.records import (
    add_record_command,
    edit_record_command,
    list_records_command,
    remove_record_command,
)
from moneyjar.commands.report import balance_command, chart_command, dashboard_command

app = typer.Typer(
    name="moneyjar",
    help="Personal finance tracker - categories, money records and balances",
    add_completion=False,
)
category_app = typer.Typer(help="Manage your categories.", no_args_is_help=True)
record_app = typer.Typer(help="Manage your money records.", no_args_is_help=True)
app.add_typer(category_app, name="category")
app.add_typer(record_app, name="record")


@app.callback()
def main() -> None:
    """Personal finance tracker - categories, money records and balances."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize moneyjar database and configuration."""
    init_command(force)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.moneyjar/backups)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command()
def login(email: str) -> None:
    """Log in with your email."""
    login_command(email)


@app.command()
def logout() -> None:
    """Log out."""
    logout_command()


@app.command()
def whoami() -> None:
    """Show who is logged in."""
    whoami_command()


@app.command()
def adduser(email: str, username: str) -> None:
    """Add a user to the users directory."""
    adduser_command(email, username)


@category_app.command(name="list")
def category_list() -> None:
    """List your categories."""
    list_categories_command()


@category_app.command(name="add")
def category_add(name: str, label: str) -> None:
    """Add a category (NAME is one lowercase word, LABEL is display text)."""
    add_category_command(name, label)


@category_app.command(name="edit")
def category_edit(
    category_id: int,
    name: str = typer.Option(None, "--name", help="New name"),
    label: str = typer.Option(None, "--label", help="New label"),
) -> None:
    """Edit a category."""
    edit_category_command(category_id, name, label)


@category_app.command(name="remove")
def category_remove(category_id: int) -> None:
    """Remove a category."""
    remove_category_command(category_id)


@record_app.command(name="list")
def record_list() -> None:
    """List your money records."""
    list_records_command()


@record_app.command(name="add")
def record_add(
    type: str,
    value: float,
    category_id: int,
    date: str = typer.Option(None, "--date", help="Record date (YYYY-MM-DD, default: today)"),
    info: str = typer.Option("", "--info", "-i", help="What the money was for"),
) -> None:
    """Add a money record (TYPE is 'expense' or 'income')."""
    add_record_command(type, value, category_id, date, info)


@record_app.command(name="edit")
def record_edit(
    record_id: int,
    type: str = typer.Option(None, "--type", help="'expense' or 'income'"),
    value: float = typer.Option(None, "--value", help="New value"),
    category_id: int = typer.Option(None, "--category", help="New category id"),
    date: str = typer.Option(None, "--date", help="New date (YYYY-MM-DD)"),
    info: str = typer.Option(None, "--info", "-i", help="New info"),
) -> None:
    """Edit a money record."""
    edit_record_command(record_id, type, value, category_id, date, info)


@record_app.command(name="remove")
def record_remove(record_id: int) -> None:
    """Remove a money record."""
    remove_record_command(record_id)


@app.command()
def balance() -> None:
    """Show your current balance."""
    balance_command()


@app.command()
def chart(
    type: str = typer.Option("expense", "--type", "-t", help="'expense' or 'income'"),
    histogram: bool = typer.Option(True, help="Show histogram bars"),
) -> None:
    """Show your per-category breakdown."""
    chart_command(type, histogram)


@app.command()
def dashboard(
    histogram: bool = typer.Option(True, help="Show histogram bars"),
) -> None:
    """Show your balance, totals and category breakdowns."""
    dashboard_command(histogram)


if __name__ == "__main__":
    app()
