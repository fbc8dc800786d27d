"""Persisted slots: one JSON value stored under a fixed key."""

import json
import sqlite3
from pathlib import Path
from typing import Any, Protocol

from moneyjar.store.schema import get_db_path


class SlotDecodeError(ValueError):
    """Stored slot content is not valid JSON."""


class Slot(Protocol):
    """Persistence dependency of a store: load and save one JSON value."""

    def load(self) -> Any: ...

    def save(self, value: Any) -> None: ...

    def clear(self) -> None: ...


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def _decode(key: str, raw: str | None) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise SlotDecodeError(f"Slot '{key}' does not hold valid JSON: {e}") from e


class SqliteSlot:
    """Slot backed by a row of the slots table."""

    def __init__(self, key: str, db_path: Path | None = None) -> None:
        self.key = key
        self.db_path = db_path

    def load(self) -> Any:
        """Load the stored value.

        Returns:
            Decoded JSON value, or None if the slot has never been written.

        Raises:
            SlotDecodeError: If the stored text is not valid JSON.
            sqlite3.Error: If database operation fails.
        """
        conn = _connect(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM slots WHERE key = ?", (self.key,))
            row = cursor.fetchone()
        finally:
            conn.close()
        return _decode(self.key, row["value"] if row else None)

    def save(self, value: Any) -> None:
        """Replace the stored value.

        Args:
            value: JSON-serializable value.

        Raises:
            sqlite3.Error: If database operation fails.
        """
        conn = _connect(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO slots (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (self.key, json.dumps(value)),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def clear(self) -> None:
        """Delete the stored value.

        Raises:
            sqlite3.Error: If database operation fails.
        """
        conn = _connect(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM slots WHERE key = ?", (self.key,))
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()


class MemorySlot:
    """In-process slot holding serialized JSON text."""

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw

    def load(self) -> Any:
        return _decode("memory", self.raw)

    def save(self, value: Any) -> None:
        self.raw = json.dumps(value)

    def clear(self) -> None:
        self.raw = None
