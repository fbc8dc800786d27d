"""Tests for moneyjar.domain.report pure functions."""

import re

import pytest

from moneyjar.domain.models import Category, CategoryId, MoneyRecord, RecordType
from moneyjar.domain.report import (
    ChartPoint,
    calculate_histogram_bar_length,
    chart_series,
    create_dashboard,
    current_balance,
    find_category_by_id,
    is_expense,
    random_color,
    signed_value,
    sum_by_category_and_type,
    total_by_type,
)

FOOD = Category(id=0, name="food", label="Food")
TRANSPORT = Category(id=1, name="transport", label="Transport")
ENTERTAINMENT = Category(id=2, name="entertainment", label="Entertainment")


def record(record_id: int, record_type: RecordType, value: float, category: int, info: str = "") -> MoneyRecord:
    return MoneyRecord(
        id=record_id,
        type=record_type,
        date="2024-01-01",
        info=info,
        value=value,
        category=CategoryId(category),
    )


@pytest.fixture
def expense_records() -> list[MoneyRecord]:
    return [
        record(0, RecordType.EXPENSE, 5, 0, "Coffee"),
        record(1, RecordType.EXPENSE, 15, 0, "Lunch"),
        record(2, RecordType.EXPENSE, 10, 1, "Ticket"),
    ]


class TestIsExpense:
    """Tests for is_expense."""

    def test_expense_record(self) -> None:
        """Should return True for expense records."""
        assert is_expense(record(0, RecordType.EXPENSE, 5, 0)) is True

    def test_income_record(self) -> None:
        """Should return False for income records."""
        assert is_expense(record(0, RecordType.INCOME, 1000, 0)) is False


class TestSignedValue:
    """Tests for signed_value."""

    def test_income_is_positive(self) -> None:
        """Should keep income values positive."""
        assert signed_value(record(0, RecordType.INCOME, 1000, 0)) == 1000

    def test_expense_is_negative(self) -> None:
        """Should negate expense values."""
        assert signed_value(record(0, RecordType.EXPENSE, 5, 0)) == -5


class TestCurrentBalance:
    """Tests for current_balance."""

    def test_expenses_and_income(self) -> None:
        """Should subtract expenses from income."""
        records = [
            record(0, RecordType.INCOME, 1000, 0, "Salary"),
            record(1, RecordType.EXPENSE, 5, 1, "Coffee"),
            record(2, RecordType.EXPENSE, 15, 1, "Lunch"),
        ]
        assert current_balance(records) == 980

    def test_empty(self) -> None:
        """Should return 0 for no records."""
        assert current_balance([]) == 0

    def test_only_income(self) -> None:
        """Should handle only income."""
        assert current_balance([record(0, RecordType.INCOME, 1000, 0)]) == 1000

    def test_only_expenses(self) -> None:
        """Should go negative with only expenses."""
        assert current_balance([record(0, RecordType.EXPENSE, 5, 0)]) == -5

    def test_dangling_category_still_counts(self) -> None:
        """Should include records whose category no longer exists."""
        assert current_balance([record(0, RecordType.EXPENSE, 7.5, 99)]) == -7.5


class TestFindCategoryById:
    """Tests for find_category_by_id."""

    def test_finds_category(self) -> None:
        """Should find a category by id."""
        assert find_category_by_id([FOOD, TRANSPORT, ENTERTAINMENT], 1) == TRANSPORT

    def test_missing_returns_none(self) -> None:
        """Should return None when no category matches."""
        assert find_category_by_id([FOOD], 999) is None

    def test_finds_id_zero(self) -> None:
        """Should find the category with id 0."""
        assert find_category_by_id([FOOD], 0) == FOOD

    def test_empty_categories(self) -> None:
        """Should return None for an empty list."""
        assert find_category_by_id([], 0) is None

    def test_first_match_wins(self) -> None:
        """Should return the first category when ids are duplicated."""
        duplicate = Category(id=0, name="groceries", label="Groceries")
        assert find_category_by_id([FOOD, duplicate], 0) == FOOD


class TestSumByCategoryAndType:
    """Tests for sum_by_category_and_type."""

    @pytest.fixture
    def records(self, expense_records: list[MoneyRecord]) -> list[MoneyRecord]:
        return [*expense_records, record(3, RecordType.INCOME, 100, 0, "Bonus")]

    def test_sums_expenses(self, records: list[MoneyRecord]) -> None:
        """Should sum expenses for a category."""
        assert sum_by_category_and_type(records, FOOD, RecordType.EXPENSE) == 20

    def test_sums_income(self, records: list[MoneyRecord]) -> None:
        """Should sum income for a category."""
        assert sum_by_category_and_type(records, FOOD, RecordType.INCOME) == 100

    def test_category_without_records(self, records: list[MoneyRecord]) -> None:
        """Should return 0 for a category with no records."""
        assert sum_by_category_and_type(records, ENTERTAINMENT, RecordType.EXPENSE) == 0

    def test_other_type(self, records: list[MoneyRecord]) -> None:
        """Should return 0 when the category has only the other type."""
        assert sum_by_category_and_type(records, TRANSPORT, RecordType.INCOME) == 0


class TestTotalByType:
    """Tests for total_by_type."""

    def test_sums_across_categories(self, expense_records: list[MoneyRecord]) -> None:
        """Should sum all records of a type, including dangling ones."""
        records = [*expense_records, record(3, RecordType.EXPENSE, 1, 42)]
        assert total_by_type(records, RecordType.EXPENSE) == 31
        assert total_by_type(records, RecordType.INCOME) == 0


class TestChartSeries:
    """Tests for chart_series."""

    @pytest.fixture
    def categories(self) -> list[Category]:
        return [FOOD, TRANSPORT, ENTERTAINMENT]

    def test_expense_series(self, expense_records: list[MoneyRecord], categories: list[Category]) -> None:
        """Should produce one point per category with spending."""
        result = chart_series(expense_records, categories, RecordType.EXPENSE)

        assert result == [
            ChartPoint(category="Food", value=20),
            ChartPoint(category="Transport", value=10),
        ]

    def test_excludes_zero_values(self, expense_records: list[MoneyRecord], categories: list[Category]) -> None:
        """Should never include a zero entry."""
        result = chart_series(expense_records, categories, RecordType.EXPENSE)

        assert all(point.value != 0 for point in result)

    def test_type_with_no_records(self, expense_records: list[MoneyRecord], categories: list[Category]) -> None:
        """Should return an empty series for a type with no records."""
        assert chart_series(expense_records, categories, RecordType.INCOME) == []

    def test_empty_categories(self, expense_records: list[MoneyRecord]) -> None:
        """Should return an empty series without categories."""
        assert chart_series(expense_records, [], RecordType.EXPENSE) == []

    def test_empty_records(self, categories: list[Category]) -> None:
        """Should return an empty series without records."""
        assert chart_series([], categories, RecordType.EXPENSE) == []

    def test_follows_category_order_not_value_order(self, expense_records: list[MoneyRecord]) -> None:
        """Should order points by category order."""
        result = chart_series(expense_records, [TRANSPORT, FOOD], RecordType.EXPENSE)

        assert [point.category for point in result] == ["Transport", "Food"]

    def test_dangling_references_excluded(self, categories: list[Category]) -> None:
        """Should ignore records pointing at unknown categories."""
        records = [record(0, RecordType.EXPENSE, 5, 0), record(1, RecordType.EXPENSE, 50, 99)]

        assert chart_series(records, categories, RecordType.EXPENSE) == [ChartPoint(category="Food", value=5)]


class TestCreateDashboard:
    """Tests for create_dashboard."""

    def test_combines_balance_totals_and_series(self, expense_records: list[MoneyRecord]) -> None:
        """Should compute every dashboard figure from the same inputs."""
        records = [*expense_records, record(3, RecordType.INCOME, 100, 1)]

        dashboard = create_dashboard(records, [FOOD, TRANSPORT])

        assert dashboard.balance == 70
        assert dashboard.income_total == 100
        assert dashboard.expense_total == 30
        assert dashboard.expenses == [ChartPoint("Food", 20), ChartPoint("Transport", 10)]
        assert dashboard.income == [ChartPoint("Transport", 100)]

    def test_empty(self) -> None:
        """Should produce zeros and empty series with no data."""
        dashboard = create_dashboard([], [])

        assert dashboard.balance == 0
        assert dashboard.expenses == []
        assert dashboard.income == []


class TestRandomColor:
    """Tests for random_color."""

    def test_hex_format(self) -> None:
        """Should return a #RRGGBB colour."""
        assert re.fullmatch(r"#[0-9A-F]{6}", random_color())

    def test_varies_between_calls(self) -> None:
        """Should usually return different colours."""
        assert len({random_color() for _ in range(20)}) > 1


class TestCalculateHistogramBarLength:
    """Tests for calculate_histogram_bar_length."""

    def test_full_bar_for_max(self) -> None:
        """Should fill the bar for the maximum value."""
        assert calculate_histogram_bar_length(20, 20, 30) == 30

    def test_proportional(self) -> None:
        """Should scale proportionally."""
        assert calculate_histogram_bar_length(10, 20, 30) == 15

    def test_zero_max(self) -> None:
        """Should return 0 when the maximum is not positive."""
        assert calculate_histogram_bar_length(10, 0, 30) == 0
