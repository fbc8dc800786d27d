"""Domain models and types for moneyjar.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from moneyjar.domain.models import Category, CategoryId, MoneyRecord, RecordType, User

__all__ = ["Category", "CategoryId", "MoneyRecord", "RecordType", "User"]
