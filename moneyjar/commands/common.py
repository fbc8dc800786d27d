"""Guards shared by commands that read or write the stores."""

import sqlite3
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from moneyjar.domain.models import User
from moneyjar.session import open_session
from moneyjar.store.schema import get_db_path
from moneyjar.store.slots import SlotDecodeError

console = Console()


def require_database() -> Path:
    """Get the database path, exiting if it has not been initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        console.print("[red]Database not found. Run 'moneyjar init' first.[/red]", style="bold")
        sys.exit(1)
    return db_path


def require_login(db_path: Path) -> User:
    """Get the logged-in user, exiting if nobody is logged in."""
    try:
        user = open_session(db_path).current_user
    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if user is None:
        console.print("[red]Not logged in.[/red] [dim]Run 'moneyjar login EMAIL' first.[/dim]")
        sys.exit(1)
    return user


def print_errors(errors: list[str]) -> NoReturn:
    """Print validation errors and exit."""
    for error in errors:
        console.print(f"[red]✗[/red] {error}")
    sys.exit(1)
