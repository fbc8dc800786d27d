"""Admin commands for backup and init."""

import shutil
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from moneyjar.config import create_default_config, get_config_path
from moneyjar.store.schema import get_db_path, init_database

console = Console()


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup database and configuration files."""
    db_path = get_db_path()
    config_path = get_config_path()

    if not db_path.exists():
        console.print("[red]Database not found. Run 'moneyjar init' first.[/red]", style="bold")
        sys.exit(1)

    if not config_path.exists():
        console.print("[red]Config not found. Run 'moneyjar init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = Path.home() / ".moneyjar" / "backups"

    backup_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    db_backup = backup_dir / f"moneyjar_{timestamp}.db"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        shutil.copy2(db_path, db_backup)
        console.print(f"[green]✓[/green] Database backed up to: {db_backup}")

        shutil.copy2(config_path, config_backup)
        console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def run_full_init(db_path: Path, config_path: Path) -> None:
    """Initialize new database and config."""
    console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
    if db_path.exists():
        db_path.unlink()
    init_database(db_path)
    console.print("[green]✓[/green] Database initialized")

    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize moneyjar database and configuration."""
    db_path = get_db_path()
    config_path = get_config_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'moneyjar init --force' to overwrite[/yellow]")
            sys.exit(1)

        run_full_init(db_path, config_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
