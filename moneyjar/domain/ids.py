"""Identifier assignment for stored entities."""

from collections.abc import Sequence

from moneyjar.domain.models import Identified


def next_id(records: Sequence[Identified]) -> int:
    """Compute the id for the next entity added to a collection.

    Ids are derived from the current maximum rather than a persisted counter,
    so deleting the highest-id entity frees that id for the next add.

    Args:
        records: Entities currently in the collection.

    Returns:
        0 for an empty collection, otherwise one more than the highest id.
    """
    if not records:
        return 0
    return max(record.id for record in records) + 1
