"""Category commands: list, add, edit and remove categories."""

import sqlite3
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from moneyjar.commands.common import print_errors, require_database, require_login
from moneyjar.domain.models import Category
from moneyjar.domain.validation import validate_category
from moneyjar.store.entities import open_category_store
from moneyjar.store.slots import SlotDecodeError

console = Console()


def list_categories_command() -> None:
    """List categories."""
    db_path = require_database()
    require_login(db_path)

    try:
        categories = open_category_store(db_path).list()
    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if not categories:
        console.print("[yellow]No categories yet[/yellow]")
        return

    table = Table(title=f"Categories ({len(categories)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Label", style="magenta")

    for category in categories:
        table.add_row(str(category.id), escape(category.name), escape(category.label))

    console.print(table)


def add_category_command(name: str, label: str) -> None:
    """Add a category."""
    db_path = require_database()
    require_login(db_path)

    errors = validate_category(name, label)
    if errors:
        print_errors(errors)

    try:
        store = open_category_store(db_path)
        category = store.add(Category(id=0, name=name, label=label))
        console.print(f"[green]✓[/green] Added category [bold]{escape(category.label)}[/bold] (id {category.id})")

    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def edit_category_command(category_id: int, name: str | None, label: str | None) -> None:
    """Edit a category's name and/or label."""
    db_path = require_database()
    require_login(db_path)

    try:
        store = open_category_store(db_path)
        current = store.get(category_id)
        if current is None:
            console.print(f"[red]No category with id {category_id}[/red]")
            sys.exit(1)

        updated = Category(
            id=current.id,
            name=current.name if name is None else name,
            label=current.label if label is None else label,
        )
        errors = validate_category(updated.name, updated.label)
        if errors:
            print_errors(errors)

        store.update(updated)
        console.print(f"[green]✓[/green] Updated category [bold]{escape(updated.label)}[/bold]")

    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def remove_category_command(category_id: int) -> None:
    """Remove a category. Money records pointing at it are kept."""
    db_path = require_database()
    require_login(db_path)

    try:
        store = open_category_store(db_path)
        category = store.get(category_id)
        if category is None:
            console.print(f"[red]No category with id {category_id}[/red]")
            sys.exit(1)

        store.remove(category)
        console.print(f"[green]✓[/green] Removed category [bold]{escape(category.label)}[/bold]")

    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
