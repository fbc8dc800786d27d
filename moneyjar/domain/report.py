"""Pure functions for balance and category aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Records whose category id matches no known category are excluded from every
per-category figure but still count towards the balance.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass

from moneyjar.domain.models import Category, MoneyRecord, RecordType


@dataclass(frozen=True)
class ChartPoint:
    """One slice of a category chart."""

    category: str
    value: float


@dataclass(frozen=True)
class Dashboard:
    """Immutable dashboard data: balance, totals and both chart series."""

    balance: float
    income_total: float
    expense_total: float
    expenses: list[ChartPoint]
    income: list[ChartPoint]


def is_expense(record: MoneyRecord) -> bool:
    """Check whether a record is an expense."""
    return record.type == RecordType.EXPENSE


def signed_value(record: MoneyRecord) -> float:
    """Get the record value with its direction applied.

    Args:
        record: Money record.

    Returns:
        The value for income, the negated value for expenses.
    """
    if record.type == RecordType.INCOME:
        return record.value
    return -record.value


def current_balance(records: Sequence[MoneyRecord]) -> float:
    """Calculate the running balance over all records.

    Args:
        records: Money records.

    Returns:
        Sum of signed values (0 for no records).
    """
    return sum((signed_value(record) for record in records), 0)


def find_category_by_id(categories: Sequence[Category], category_id: int) -> Category | None:
    """Find the first category with the given id.

    Args:
        categories: Categories to search.
        category_id: Id to look for.

    Returns:
        Matching category or None if no category has that id.
    """
    for category in categories:
        if category.id == category_id:
            return category
    return None


def sum_by_category_and_type(
    records: Sequence[MoneyRecord],
    category: Category,
    record_type: RecordType,
) -> float:
    """Sum record values for one category and one record type.

    Args:
        records: Money records.
        category: Category whose records are summed.
        record_type: Only records of this type are summed.

    Returns:
        Sum of matching values (0 if none match).
    """
    return sum(
        (record.value for record in records if record.category == category.id and record.type == record_type),
        0,
    )


def total_by_type(records: Sequence[MoneyRecord], record_type: RecordType) -> float:
    """Sum record values of one type regardless of category."""
    return sum((record.value for record in records if record.type == record_type), 0)


def chart_series(
    records: Sequence[MoneyRecord],
    categories: Sequence[Category],
    record_type: RecordType,
) -> list[ChartPoint]:
    """Build chart data for one record type.

    Args:
        records: Money records.
        categories: Categories, in display order.
        record_type: Record type to chart.

    Returns:
        One point per category with a non-zero sum, in category order.
    """
    series = []
    for category in categories:
        total = sum_by_category_and_type(records, category, record_type)
        if total != 0:
            series.append(ChartPoint(category=category.label, value=total))
    return series


def create_dashboard(records: Sequence[MoneyRecord], categories: Sequence[Category]) -> Dashboard:
    """Create dashboard data for the given records and categories.

    Args:
        records: Money records.
        categories: Categories, in display order.

    Returns:
        Dashboard with balance, per-type totals and both chart series.
    """
    return Dashboard(
        balance=current_balance(records),
        income_total=total_by_type(records, RecordType.INCOME),
        expense_total=total_by_type(records, RecordType.EXPENSE),
        expenses=chart_series(records, categories, RecordType.EXPENSE),
        income=chart_series(records, categories, RecordType.INCOME),
    )


def random_color() -> str:
    """Pick a random colour for a chart entry.

    Returns:
        Colour in #RRGGBB form.
    """
    return f"#{random.randint(0, 0xFFFFFF):06X}"


def calculate_histogram_bar_length(
    value: float,
    max_value: float,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        value: Value to display.
        max_value: Maximum value in the series.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_value <= 0:
        return 0
    return int((abs(value) / max_value) * bar_width)
