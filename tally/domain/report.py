"""Pure functions for report calculations and aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations over a ledger snapshot
- Easy to test

Nothing is cached; every call recomputes from the transactions it is given.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from tally.domain.models import CategoryName, Money, Transaction, TransactionKind

DEFAULT_RECENT_LIMIT = 10


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable summed amount for one category."""

    category: CategoryName
    amount: Money


@dataclass(frozen=True)
class MonthlySummary:
    """Immutable summary of one calendar month."""

    month: int
    year: int
    transactions: tuple[Transaction, ...]
    total_income: Money
    total_expense: Money
    net: Money
    income_breakdown: tuple[CategoryTotal, ...]
    expense_breakdown: tuple[CategoryTotal, ...]
    recent: tuple[Transaction, ...]

    @property
    def is_empty(self) -> bool:
        return not self.transactions

    @property
    def saved(self) -> bool:
        """True when income covered expenses for the month."""
        return self.net >= 0


def monthly_filter(transactions: Iterable[Transaction], month: int, year: int) -> list[Transaction]:
    """Get transactions dated in a given month, preserving input order.

    Args:
        transactions: Transactions to filter.
        month: Month number (1-12).
        year: Four digit year.

    Returns:
        Transactions whose date falls in month/year.
    """
    return [t for t in transactions if t.date.month == month and t.date.year == year]


def total_by_kind(transactions: Iterable[Transaction], kind: TransactionKind) -> Money:
    """Sum amounts of transactions of one kind (0 if none match)."""
    return Money(sum((t.amount for t in transactions if t.kind is kind), Decimal(0)))


def net_amount(transactions: Iterable[Transaction]) -> Money:
    """Calculate total income minus total expense."""
    transactions = list(transactions)
    income = total_by_kind(transactions, TransactionKind.INCOME)
    expense = total_by_kind(transactions, TransactionKind.EXPENSE)
    return Money(income - expense)


def category_breakdown(transactions: Iterable[Transaction], kind: TransactionKind) -> dict[CategoryName, Money]:
    """Sum amounts per category for one kind.

    Categories with no matching transactions are absent. The returned dict is
    ordered by amount descending, then category name ascending.

    Args:
        transactions: Transactions to group.
        kind: Kind to include.

    Returns:
        Ordered mapping of category to summed amount.
    """
    totals: dict[CategoryName, Decimal] = defaultdict(Decimal)
    for t in transactions:
        if t.kind is kind:
            totals[t.category] += t.amount

    ordered = sorted(totals.items(), key=lambda item: item[0])
    ordered.sort(key=lambda item: item[1], reverse=True)
    return {category: Money(amount) for category, amount in ordered}


def sorted_descending_by_date(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort transactions newest first; equal dates keep their relative order."""
    return sorted(transactions, key=lambda t: t.date, reverse=True)


def most_recent(transactions: Iterable[Transaction], limit: int) -> list[Transaction]:
    """Get at most ``limit`` transactions, newest first."""
    if limit <= 0:
        return []
    return sorted_descending_by_date(transactions)[:limit]


def build_monthly_summary(
    transactions: Sequence[Transaction],
    month: int,
    year: int,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> MonthlySummary:
    """Create the full summary for one month.

    Args:
        transactions: All ledger transactions.
        month: Month number (1-12).
        year: Four digit year.
        recent_limit: Number of recent transactions to include.

    Returns:
        MonthlySummary with totals, breakdowns and recent entries.
    """
    monthly = monthly_filter(transactions, month, year)

    def breakdown(kind: TransactionKind) -> tuple[CategoryTotal, ...]:
        return tuple(CategoryTotal(category=c, amount=a) for c, a in category_breakdown(monthly, kind).items())

    return MonthlySummary(
        month=month,
        year=year,
        transactions=tuple(monthly),
        total_income=total_by_kind(monthly, TransactionKind.INCOME),
        total_expense=total_by_kind(monthly, TransactionKind.EXPENSE),
        net=net_amount(monthly),
        income_breakdown=breakdown(TransactionKind.INCOME),
        expense_breakdown=breakdown(TransactionKind.EXPENSE),
        recent=tuple(most_recent(monthly, recent_limit)),
    )


def format_money(amount: Decimal) -> str:
    """Format an amount for display (e.g., "$1,200.50" or "-$12.00")."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_transaction(transaction: Transaction) -> str:
    """Format a transaction as a single display line.

    Example: "[2024-01-15] $5,000.00 - SALARY (Monthly salary) - INCOME"
    """
    return (
        f"[{transaction.date.isoformat()}] {format_money(transaction.amount)} - "
        f"{transaction.category} ({transaction.description}) - {transaction.kind.name}"
    )
