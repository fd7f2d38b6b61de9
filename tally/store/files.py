"""Ledger file persistence: loading, importing and rewriting the data file."""

from dataclasses import dataclass, field
from pathlib import Path

from tally.domain.codec import decode_transaction, encode_transaction, is_data_line
from tally.domain.errors import LedgerIOError, RecordError
from tally.domain.ledger import Ledger
from tally.domain.models import Transaction
from tally.logging_setup import get_logger

logger = get_logger(__name__)

LEGACY_ENCODING = "cp1252"


@dataclass(frozen=True)
class LineError:
    """A data line that failed to decode."""

    line_number: int
    line: str
    error: RecordError


@dataclass
class LoadResult:
    """Outcome of loading a ledger file."""

    path: Path
    loaded: int = 0
    errors: list[LineError] = field(default_factory=list)


def _decode_line(raw: bytes, line_number: int, path: Path) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Line %d of %s is not UTF-8, decoding as %s", line_number, path, LEGACY_ENCODING)
        return raw.decode(LEGACY_ENCODING, errors="replace")


def read_transactions(path: Path) -> tuple[list[Transaction], list[LineError]]:
    """Decode every data line of a file, collecting per-line failures.

    Lines are UTF-8; a line that is not falls back to cp1252, the charset
    older ledger files were written in.

    Args:
        path: File to read.

    Returns:
        Tuple of (transactions in file order, line errors).

    Raises:
        LedgerIOError: If the file cannot be opened or read.
    """
    transactions: list[Transaction] = []
    errors: list[LineError] = []

    try:
        with path.open("rb") as f:
            for line_number, raw_bytes in enumerate(f, 1):
                raw = _decode_line(raw_bytes, line_number, path)
                if not is_data_line(raw):
                    continue
                line = raw.strip()
                try:
                    transactions.append(decode_transaction(line))
                except RecordError as e:
                    logger.debug("Skipping line %d of %s: %s", line_number, path, e)
                    errors.append(LineError(line_number=line_number, line=line, error=e))
    except OSError as e:
        raise LedgerIOError(f"Error reading file ({e})", path) from e

    return transactions, errors


def load_from(ledger: Ledger, path: str | Path) -> LoadResult:
    """Append every decodable record of a file to the ledger.

    Bad lines are skipped and reported; they never abort the load. Nothing is
    appended if the file cannot be read.

    Args:
        ledger: Ledger to extend.
        path: File to read.

    Returns:
        LoadResult with the loaded count and per-line errors.

    Raises:
        LedgerIOError: If the file cannot be opened or read.
    """
    path = Path(path)
    transactions, errors = read_transactions(path)
    ledger.extend(transactions)
    logger.info("Loaded %d transactions from %s (%d errors)", len(transactions), path, len(errors))
    return LoadResult(path=path, loaded=len(transactions), errors=errors)


def load_data_file(ledger: Ledger, path: str | Path) -> LoadResult:
    """Load the primary data file; a missing file means an empty ledger.

    Args:
        ledger: Ledger to extend.
        path: Primary data file.

    Returns:
        LoadResult (loaded=0 when the file does not exist).

    Raises:
        LedgerIOError: If the file exists but cannot be read.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No existing data file at %s, starting fresh", path)
        return LoadResult(path=path)
    return load_from(ledger, path)


def persist(ledger: Ledger, path: str | Path) -> None:
    """Overwrite a file with the full ledger, one line per transaction.

    Lines are written in ledger order. A failed write leaves the in-memory
    ledger untouched.

    Args:
        ledger: Ledger to write.
        path: Target file.

    Raises:
        LedgerIOError: If the file cannot be written.
    """
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as f:
            for transaction in ledger:
                f.write(encode_transaction(transaction) + "\n")
    except OSError as e:
        raise LedgerIOError(f"Error saving data ({e})", path) from e
    logger.debug("Saved %d transactions to %s", len(ledger), path)


def record_transaction(ledger: Ledger, transaction: Transaction, data_path: str | Path) -> None:
    """Append a transaction and rewrite the primary data file.

    The transaction stays in the ledger even if the write fails.

    Raises:
        LedgerIOError: If the data file cannot be written.
    """
    ledger.append(transaction)
    persist(ledger, data_path)


def import_file(ledger: Ledger, source: str | Path, data_path: str | Path) -> LoadResult:
    """Merge a secondary file into the ledger and rewrite the primary file.

    Args:
        ledger: Ledger to extend.
        source: File to import.
        data_path: Primary data file to rewrite afterwards.

    Returns:
        LoadResult of the import.

    Raises:
        LedgerIOError: If the source cannot be read or the data file written.
    """
    result = load_from(ledger, source)
    persist(ledger, data_path)
    return result
