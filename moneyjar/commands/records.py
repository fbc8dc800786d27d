"""Money record commands: list, add, edit and remove records."""

import sqlite3
import sys
from datetime import date

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from moneyjar.commands.common import print_errors, require_database, require_login
from moneyjar.domain.models import CategoryId, MoneyRecord, RecordType
from moneyjar.domain.report import find_category_by_id, is_expense
from moneyjar.domain.validation import parse_record_type, validate_record
from moneyjar.store.entities import open_category_store, open_record_store
from moneyjar.store.slots import SlotDecodeError

console = Console()


def format_value(record: MoneyRecord) -> str:
    """Format a record value with its sign and colour."""
    if is_expense(record):
        return f"[red]-{record.value:,.2f}[/red]"
    return f"[green]+{record.value:,.2f}[/green]"


def _parse_type_or_exit(raw: str) -> RecordType:
    record_type = parse_record_type(raw)
    if record_type is None:
        print_errors([f"Type must be one of: {', '.join(t.value for t in RecordType)}"])
    return record_type


def list_records_command() -> None:
    """List money records."""
    db_path = require_database()
    require_login(db_path)

    try:
        records = open_record_store(db_path).list()
        categories = open_category_store(db_path).list()
    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if not records:
        console.print("[yellow]No records yet[/yellow]")
        return

    table = Table(title=f"Records ({len(records)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Info", style="white")
    table.add_column("Value", justify="right")

    for record in records:
        category = find_category_by_id(categories, record.category)
        category_display = escape(category.label) if category else "[dim]-[/dim]"
        table.add_row(
            str(record.id), escape(record.date), category_display, escape(record.info), format_value(record)
        )

    console.print(table)


def add_record_command(
    type: str,
    value: float,
    category_id: int,
    record_date: str | None,
    info: str,
) -> None:
    """Add a money record."""
    db_path = require_database()
    require_login(db_path)

    record_type = _parse_type_or_exit(type)
    if record_date is None:
        record_date = date.today().isoformat()

    errors = validate_record(value, category_id, record_date, info)
    if errors:
        print_errors(errors)

    try:
        store = open_record_store(db_path)
        record = store.add(
            MoneyRecord(
                id=0,
                type=record_type,
                date=record_date,
                info=info,
                value=value,
                category=CategoryId(category_id),
            )
        )
        console.print(f"[green]✓[/green] Added {record.type.value} {format_value(record)} (id {record.id})")

    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def edit_record_command(
    record_id: int,
    type: str | None,
    value: float | None,
    category_id: int | None,
    record_date: str | None,
    info: str | None,
) -> None:
    """Edit fields of a money record."""
    db_path = require_database()
    require_login(db_path)

    try:
        store = open_record_store(db_path)
        current = store.get(record_id)
        if current is None:
            console.print(f"[red]No record with id {record_id}[/red]")
            sys.exit(1)

        updated = MoneyRecord(
            id=current.id,
            type=current.type if type is None else _parse_type_or_exit(type),
            date=current.date if record_date is None else record_date,
            info=current.info if info is None else info,
            value=current.value if value is None else value,
            category=current.category if category_id is None else CategoryId(category_id),
        )
        errors = validate_record(updated.value, updated.category, updated.date, updated.info)
        if errors:
            print_errors(errors)

        store.update(updated)
        console.print(f"[green]✓[/green] Updated record {updated.id}")

    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def remove_record_command(record_id: int) -> None:
    """Remove a money record."""
    db_path = require_database()
    require_login(db_path)

    try:
        store = open_record_store(db_path)
        record = store.get(record_id)
        if record is None:
            console.print(f"[red]No record with id {record_id}[/red]")
            sys.exit(1)

        store.remove(record)
        console.print(f"[green]✓[/green] Removed record {record_id}")

    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
