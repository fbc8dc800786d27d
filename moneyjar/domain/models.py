"""Domain type definitions for moneyjar.

These types are shared by the stores, the aggregation functions and the CLI:
- Category: a user-defined label for classifying money records
- MoneyRecord: a dated, typed, valued record linked to a category id
- User: an entry of the configured users directory
- RecordType: expense or income

Values are positive magnitudes; the direction of a record comes from its type.
"""

from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any, NewType, Protocol

# Category id as stored on a MoneyRecord (soft reference, never validated)
CategoryId = NewType("CategoryId", int)


class RecordType(StrEnum):
    """Direction of a money record."""

    EXPENSE = "expense"
    INCOME = "income"


class Identified(Protocol):
    """Anything carrying an integer id."""

    @property
    def id(self) -> int: ...


@dataclass(frozen=True)
class Category:
    """Immutable category data."""

    id: int
    name: str
    label: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Category":
        return cls(id=int(data["id"]), name=str(data["name"]), label=str(data["label"]))


@dataclass(frozen=True)
class MoneyRecord:
    """Immutable money record data."""

    id: int
    type: RecordType
    date: str
    info: str
    value: float
    category: CategoryId

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MoneyRecord":
        return cls(
            id=int(data["id"]),
            type=RecordType(data["type"]),
            date=str(data["date"]),
            info=str(data["info"]),
            value=data["value"],
            category=CategoryId(int(data["category"])),
        )


@dataclass(frozen=True)
class User:
    """Immutable user data."""

    id: int
    username: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(id=int(data["id"]), username=str(data["username"]), email=str(data["email"]))
