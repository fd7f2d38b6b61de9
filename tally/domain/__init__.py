"""Domain models and types for tally.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from tally.domain.categories import list_categories
from tally.domain.ledger import Ledger
from tally.domain.models import (
    CategoryName,
    Description,
    Money,
    Transaction,
    TransactionKind,
    create_transaction,
)

__all__ = [
    "CategoryName",
    "Description",
    "Ledger",
    "Money",
    "Transaction",
    "TransactionKind",
    "create_transaction",
    "list_categories",
]
