"""Exceptions raised by the tally core."""

from pathlib import Path


class LedgerError(Exception):
    """Base class for all tally errors."""


class RecordError(LedgerError, ValueError):
    """A data line could not be decoded into a transaction."""

    def __init__(self, message: str, line: str) -> None:
        super().__init__(f"{message}: {line!r}")
        self.line = line


class MalformedRecordError(RecordError):
    """Line does not have exactly five fields."""


class UnknownKindError(RecordError):
    """Kind field is not INCOME or EXPENSE."""


class InvalidAmountError(RecordError):
    """Amount field is not a finite decimal number."""


class InvalidDateError(RecordError):
    """Date field is not a YYYY-MM-DD calendar date."""


class LedgerIOError(LedgerError):
    """Reading or writing a ledger file failed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
