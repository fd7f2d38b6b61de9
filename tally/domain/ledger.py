"""In-memory ledger owned by the caller."""

from collections.abc import Iterable, Iterator

from tally.domain.models import Transaction


class Ledger:
    """Append-only ordered collection of transactions.

    Order is insertion order: records loaded from the data file first, then
    whatever was appended during the session. There is no update or delete.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._transactions: list[Transaction] = list(transactions)

    def append(self, transaction: Transaction) -> None:
        """Add a transaction to the end of the ledger."""
        self._transactions.append(transaction)

    def extend(self, transactions: Iterable[Transaction]) -> None:
        """Add transactions to the end of the ledger, preserving their order."""
        self._transactions.extend(transactions)

    def snapshot(self) -> tuple[Transaction, ...]:
        """Get an immutable view of the current transactions."""
        return tuple(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._transactions)

    def __bool__(self) -> bool:
        return bool(self._transactions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return self._transactions == other._transactions

    def __repr__(self) -> str:
        return f"Ledger({len(self._transactions)} transactions)"
