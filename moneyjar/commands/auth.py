"""Session commands: login, logout, whoami and adding users."""

import sqlite3
import sys

from rich.console import Console
from rich.markup import escape

from moneyjar.commands.common import require_database
from moneyjar.config import add_user, get_users
from moneyjar.session import UserNotFoundError, open_session
from moneyjar.store.slots import SlotDecodeError

console = Console()


def login_command(email: str) -> None:
    """Log in with an email from the users directory."""
    db_path = require_database()

    try:
        session = open_session(db_path)
        user = session.login(email)
        console.print(f"[green]✓[/green] Logged in as [bold]{escape(user.username)}[/bold] ({escape(user.email)})")

    except UserNotFoundError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def logout_command() -> None:
    """Log out the current user."""
    db_path = require_database()

    try:
        session = open_session(db_path)
        if session.current_user is None:
            console.print("[dim]Nobody is logged in[/dim]")
            return
        session.logout()
        console.print("[green]✓[/green] Logged out")

    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def whoami_command() -> None:
    """Show the logged-in user."""
    db_path = require_database()

    try:
        user = open_session(db_path).current_user
    except (sqlite3.Error, SlotDecodeError) as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if user is None:
        console.print("[yellow]Not logged in[/yellow]")
        return
    console.print(f"[bold]{escape(user.username)}[/bold] ({escape(user.email)})")


def adduser_command(email: str, username: str) -> None:
    """Add a user to the users directory (or rename an existing one)."""
    try:
        users = get_users()
        existing = next((user for user in users if user.get("email") == email), None)
        user_id = existing["id"] if existing else max((int(user["id"]) for user in users), default=0) + 1

        add_user({"id": user_id, "username": username, "email": email})
        console.print(f"[green]✓[/green] User [bold]{escape(username)}[/bold] ({escape(email)}) saved")

    except FileNotFoundError:
        console.print("[red]Config not found. Run 'moneyjar init' first.[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
