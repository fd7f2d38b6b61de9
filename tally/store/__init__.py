"""Ledger store layer - provides file persistence for the application.

This module re-exports all public store functions for easy importing.
"""

from tally.store.files import (
    LineError,
    LoadResult,
    import_file,
    load_data_file,
    load_from,
    persist,
    read_transactions,
    record_transaction,
)

__all__ = [
    "LineError",
    "LoadResult",
    "import_file",
    "load_data_file",
    "load_from",
    "persist",
    "read_transactions",
    "record_transaction",
]
