"""Database store layer - provides persistence for the application.

This module re-exports all public store classes and functions for easy importing.
"""

from moneyjar.store.entities import (
    CATEGORIES_KEY,
    RECORDS_KEY,
    EntityNotFoundError,
    EntityStore,
    open_category_store,
    open_record_store,
)
from moneyjar.store.schema import database_exists, get_db_path, init_database
from moneyjar.store.slots import MemorySlot, Slot, SlotDecodeError, SqliteSlot

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Slots
    "MemorySlot",
    "Slot",
    "SlotDecodeError",
    "SqliteSlot",
    # Entities
    "CATEGORIES_KEY",
    "RECORDS_KEY",
    "EntityNotFoundError",
    "EntityStore",
    "open_category_store",
    "open_record_store",
]
