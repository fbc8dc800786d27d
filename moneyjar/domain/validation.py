"""Pure input validation for categories and money records.

The stores accept whatever they are given; these checks belong to the
presentation layer, which runs them before calling into a store.
"""

import math
import re
from datetime import date as date_type

from moneyjar.domain.models import RecordType

CATEGORY_NAME_PATTERN = re.compile(r"[a-z]+")
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_iso_date(value: str) -> bool:
    """Check that a string is a real calendar date written as YYYY-MM-DD."""
    if not ISO_DATE_PATTERN.fullmatch(value):
        return False
    try:
        date_type.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_category(name: str, label: str) -> list[str]:
    """Validate category form input.

    Args:
        name: Category name (one lowercase word).
        label: Display label.

    Returns:
        List of error messages, empty when the input is valid.
    """
    errors = []
    if not name:
        errors.append("Please enter the category name")
    elif not CATEGORY_NAME_PATTERN.fullmatch(name):
        errors.append("Name must be one lowercase word")

    if not label.strip():
        errors.append("Please enter the category label")

    return errors


def validate_record(value: float, category: int | None, date: str, info: str) -> list[str]:
    """Validate money record form input.

    Args:
        value: Record value (must be positive).
        category: Selected category id.
        date: Record date (YYYY-MM-DD).
        info: Free-text memo.

    Returns:
        List of error messages, empty when the input is valid.
    """
    errors = []
    if not math.isfinite(value) or value <= 0:
        errors.append("You must enter positive, non-zero value")

    if category is None:
        errors.append("Please select a category")

    if not date:
        errors.append("Please enter the date")
    elif not is_iso_date(date):
        errors.append("Date must be in YYYY-MM-DD format")

    if not info.strip():
        errors.append("Please enter the info")

    return errors


def parse_record_type(raw: str) -> RecordType | None:
    """Parse a record type from user input.

    Args:
        raw: Type as typed by the user (case-insensitive).

    Returns:
        RecordType or None if the input is not a known type.
    """
    try:
        return RecordType(raw.strip().lower())
    except ValueError:
        return None
