"""Line codec for the ledger data file.

One transaction per line, five comma separated fields:

    KIND,AMOUNT,CATEGORY,DESCRIPTION,DATE
    INCOME,5000.00,SALARY,Monthly salary,2024-01-15

Descriptions are written as-is. A comma inside a description shifts the date
boundary and the line fails to decode; existing data files depend on this
unquoted layout, so it is kept.
"""

import re
from datetime import date as Date
from decimal import Decimal, InvalidOperation

from tally.domain.errors import (
    InvalidAmountError,
    InvalidDateError,
    MalformedRecordError,
    UnknownKindError,
)
from tally.domain.models import CategoryName, Description, Money, Transaction, TransactionKind, quantize_money

FIELD_COUNT = 5
COMMENT_PREFIX = "#"

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_data_line(line: str) -> bool:
    """Check whether a raw file line holds a record (not blank, not a comment)."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith(COMMENT_PREFIX)


def encode_transaction(transaction: Transaction) -> str:
    """Encode a transaction as a single data line (without newline).

    Args:
        transaction: Transaction to encode.

    Returns:
        Comma separated line with the amount fixed to two decimals.
    """
    return ",".join(
        [
            transaction.kind.name,
            f"{quantize_money(Decimal(transaction.amount)):.2f}",
            transaction.category,
            transaction.description,
            transaction.date.isoformat(),
        ]
    )


def _parse_kind(raw: str, line: str) -> TransactionKind:
    try:
        return TransactionKind[raw.upper()]
    except KeyError:
        raise UnknownKindError(f"Unknown transaction kind {raw!r}", line) from None


def _parse_amount(raw: str, line: str) -> Money:
    try:
        amount = Decimal(raw)
        if amount.is_finite():
            return quantize_money(amount)
    except InvalidOperation:
        pass
    raise InvalidAmountError(f"Invalid amount {raw!r}", line)


def _parse_date(raw: str, line: str) -> Date:
    if not _ISO_DATE.fullmatch(raw):
        raise InvalidDateError(f"Invalid date {raw!r}, expected YYYY-MM-DD", line)
    try:
        return Date.fromisoformat(raw)
    except ValueError:
        raise InvalidDateError(f"Invalid date {raw!r}, expected YYYY-MM-DD", line) from None


def decode_transaction(line: str) -> Transaction:
    """Decode a data line into a transaction.

    Fields are trimmed; kind and category are upper-cased. The category is
    not checked against the catalog.

    Args:
        line: Raw data line. Blank and comment lines must be filtered out first.

    Returns:
        Decoded Transaction.

    Raises:
        MalformedRecordError: If the line does not split into five fields.
        UnknownKindError: If the kind is not INCOME or EXPENSE.
        InvalidAmountError: If the amount is not a finite number.
        InvalidDateError: If the date is not YYYY-MM-DD.
    """
    parts = line.split(",", FIELD_COUNT - 1)
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(
            "Invalid format, expected KIND,AMOUNT,CATEGORY,DESCRIPTION,DATE",
            line,
        )

    kind_raw, amount_raw, category_raw, description_raw, date_raw = (part.strip() for part in parts)

    return Transaction(
        kind=_parse_kind(kind_raw, line),
        amount=_parse_amount(amount_raw, line),
        category=CategoryName(category_raw.upper()),
        description=Description(description_raw),
        date=_parse_date(date_raw, line),
    )
