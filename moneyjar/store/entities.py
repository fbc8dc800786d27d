"""Entity stores: in-memory collections saved whole to a slot on every change."""

import dataclasses
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

from moneyjar.domain.ids import next_id
from moneyjar.domain.models import Category, MoneyRecord
from moneyjar.store.slots import Slot, SlotDecodeError, SqliteSlot

CATEGORIES_KEY = "categories"
RECORDS_KEY = "moneyRecords"

E = TypeVar("E", Category, MoneyRecord)


class EntityNotFoundError(LookupError):
    """No entity with the given id exists in the store."""


class EntityStore(Generic[E]):
    """Ordered collection of one entity kind, backed by a slot.

    The collection is loaded once at construction; a missing or empty slot
    gives an empty collection. Each mutation saves the full collection.
    Insertion order is list order is persisted order.
    """

    def __init__(
        self,
        slot: Slot,
        decode: Callable[[dict[str, Any]], E],
        encode: Callable[[E], dict[str, Any]],
    ) -> None:
        self._slot = slot
        self._encode = encode
        self._entities = self._decode_all(slot.load() or [], decode)

    @staticmethod
    def _decode_all(stored: Any, decode: Callable[[dict[str, Any]], E]) -> list[E]:
        if not isinstance(stored, list):
            raise SlotDecodeError(f"Expected a JSON array, got {type(stored).__name__}")
        try:
            return [decode(item) for item in stored]
        except (KeyError, TypeError, ValueError) as e:
            raise SlotDecodeError(f"Stored entity has the wrong shape: {e!r}") from e

    def _save(self) -> None:
        self._slot.save([self._encode(entity) for entity in self._entities])

    def _index_of(self, entity_id: int) -> int:
        for index, entity in enumerate(self._entities):
            if entity.id == entity_id:
                return index
        raise EntityNotFoundError(f"No entity with id {entity_id}")

    def get(self, entity_id: int) -> E | None:
        """Get the first entity with the given id, or None."""
        for entity in self._entities:
            if entity.id == entity_id:
                return entity
        return None

    def add(self, entity: E) -> E:
        """Append an entity under a freshly assigned id.

        Whatever id the argument carries is ignored; the argument itself is
        left unchanged.

        Args:
            entity: Entity to add.

        Returns:
            The stored entity, carrying its assigned id.
        """
        stored = dataclasses.replace(entity, id=next_id(self._entities))
        self._entities.append(stored)
        self._save()
        return stored

    def remove(self, entity: E) -> None:
        """Remove the entity with the same id.

        Args:
            entity: Entity to remove (matched by id only).

        Raises:
            EntityNotFoundError: If no entity has that id. Nothing is saved.
        """
        del self._entities[self._index_of(entity.id)]
        self._save()

    def update(self, entity: E) -> None:
        """Replace the entity with the same id, keeping its position.

        Args:
            entity: New version of the entity.

        Raises:
            EntityNotFoundError: If no entity has that id. Nothing is saved.
        """
        self._entities[self._index_of(entity.id)] = entity
        self._save()

    def list(self) -> list[E]:
        """Get the current collection in insertion order."""
        return list(self._entities)


def open_category_store(db_path: Path | None = None) -> EntityStore[Category]:
    """Open the category store.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Raises:
        SlotDecodeError: If the stored collection is not a valid JSON array of entities.
        sqlite3.Error: If database operation fails.
    """
    return EntityStore(SqliteSlot(CATEGORIES_KEY, db_path), Category.from_dict, Category.to_dict)


def open_record_store(db_path: Path | None = None) -> EntityStore[MoneyRecord]:
    """Open the money record store.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Raises:
        SlotDecodeError: If the stored collection is not a valid JSON array of entities.
        sqlite3.Error: If database operation fails.
    """
    return EntityStore(SqliteSlot(RECORDS_KEY, db_path), MoneyRecord.from_dict, MoneyRecord.to_dict)
