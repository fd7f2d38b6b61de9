"""Category catalog: the suggested labels for each transaction kind."""

from tally.domain.models import CategoryName, TransactionKind

CATEGORIES: dict[TransactionKind, tuple[CategoryName, ...]] = {
    TransactionKind.INCOME: tuple(
        CategoryName(c) for c in ("SALARY", "BUSINESS", "FREELANCING", "INVESTMENT", "OTHER")
    ),
    TransactionKind.EXPENSE: tuple(
        CategoryName(c)
        for c in ("FOOD", "RENT", "TRAVEL", "UTILITIES", "ENTERTAINMENT", "HEALTHCARE", "OTHER")
    ),
}


def list_categories(kind: TransactionKind) -> list[CategoryName]:
    """Get the catalog labels for a kind, in presentation order.

    Args:
        kind: Transaction kind.

    Returns:
        Ordered list of category labels.
    """
    return list(CATEGORIES[kind])


def is_catalog_category(kind: TransactionKind, category: str) -> bool:
    """Check whether a label is in the catalog for a kind (case-insensitive)."""
    return category.strip().upper() in CATEGORIES[kind]
