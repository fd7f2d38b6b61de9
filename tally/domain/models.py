"""Domain type definitions for tally.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount as a Decimal (exact, two decimal places on disk)
- CategoryName: Upper-cased category label
- Description: Free-text transaction description
"""

from dataclasses import dataclass
from datetime import date as Date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import NewType

# Money amounts are Decimals so monthly sums are exact
Money = NewType("Money", Decimal)

# Category labels are always stored upper-cased (e.g., "RENT")
CategoryName = NewType("CategoryName", str)

# Transaction description text, may be empty
Description = NewType("Description", str)


class TransactionKind(Enum):
    """Income or expense. The member name is the on-disk spelling."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry."""

    kind: TransactionKind
    amount: Money
    category: CategoryName
    description: Description
    date: Date


CENT = Decimal("0.01")


def quantize_money(amount: Decimal) -> Money:
    """Round a finite amount to cents, halves away from zero."""
    if not amount.is_finite():
        return Money(amount)
    return Money(amount.quantize(CENT, rounding=ROUND_HALF_UP))


def to_money(value: Decimal | float | int | str) -> Money:
    """Convert a user or file supplied amount to Money.

    Floats go through ``str`` so that ``12.1`` becomes ``Decimal("12.1")``
    rather than its binary expansion. The result is rounded to cents, so
    ``0.125`` becomes ``0.13``.
    """
    if isinstance(value, Decimal):
        return quantize_money(value)
    return quantize_money(Decimal(str(value).strip()))


def create_transaction(
    kind: TransactionKind,
    amount: Decimal | float | int | str,
    category: str,
    description: str,
    date: Date,
) -> Transaction:
    """Create a transaction.

    No sign or catalog validation is performed; the category is only
    upper-cased.

    Args:
        kind: Income or expense.
        amount: Amount in currency units.
        category: Category label.
        description: Free text, may be empty.
        date: Calendar date of the entry.

    Returns:
        New immutable Transaction.
    """
    return Transaction(
        kind=kind,
        amount=to_money(amount),
        category=CategoryName(category.strip().upper()),
        description=Description(description),
        date=date,
    )
