"""Helpers shared by the CLI commands."""

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tally.config import get_data_path, load_config
from tally.domain.errors import LedgerError
from tally.domain.ledger import Ledger
from tally.domain.models import Transaction, TransactionKind
from tally.domain.report import format_money
from tally.store import LoadResult, load_data_file

console = Console()


def print_load_errors(result: LoadResult) -> None:
    """Print each line that failed to decode."""
    for line_error in result.errors:
        console.print(f"[red]Error parsing line {line_error.line_number}:[/red] {escape(str(line_error.error))}")


def open_ledger(data_file: str | None = None) -> tuple[Ledger, Path, dict[str, Any]]:
    """Load config and the primary data file for a command.

    Args:
        data_file: Data file override from the command line.

    Returns:
        Tuple of (ledger, data_path, config).
    """
    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Invalid config file: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    data_path = get_data_path(data_file, config)
    ledger = Ledger()

    try:
        result = load_data_file(ledger, data_path)
    except LedgerError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        console.print("[dim]The data file was left untouched[/dim]")
        sys.exit(1)

    print_load_errors(result)
    return ledger, data_path, config


def format_amount(transaction: Transaction) -> str:
    """Colour an amount green for income and red for expenses."""
    colour = "green" if transaction.kind is TransactionKind.INCOME else "red"
    return f"[{colour}]{format_money(transaction.amount)}[/{colour}]"


def transactions_table(transactions: Iterable[Transaction], title: str) -> Table:
    """Build a table of transactions in the given order."""
    table = Table(title=title)
    table.add_column("Date", style="cyan")
    table.add_column("Kind")
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for txn in transactions:
        table.add_row(
            txn.date.isoformat(),
            txn.kind.name,
            escape(txn.category),
            escape(txn.description) if txn.description else "[dim]-[/dim]",
            format_amount(txn),
        )
    return table
