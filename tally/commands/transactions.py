"""Transaction commands (add, list, load)."""

import sys
from datetime import date as Date
from decimal import InvalidOperation

import pandas as pd
import typer
from rich.console import Console
from rich.markup import escape

from tally.commands.util import open_ledger, print_load_errors, transactions_table
from tally.domain.categories import list_categories
from tally.domain.errors import LedgerError
from tally.domain.models import Money, TransactionKind, create_transaction, to_money
from tally.domain.report import format_transaction, sorted_descending_by_date
from tally.store import import_file, record_transaction

console = Console()


def parse_date(raw: str) -> Date:
    """Parse a user-entered date; empty means today.

    ISO dates are taken as-is. Anything else goes through pandas.to_datetime
    with day-first parsing (DD/MM/YYYY, "15 Jan 2024", etc.).

    Raises:
        ValueError: If the date cannot be parsed.
    """
    raw = raw.strip()
    if not raw:
        return Date.today()
    try:
        return Date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        parsed = pd.to_datetime(raw, dayfirst=True)
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw}'") from e
    if pd.isna(parsed):
        raise ValueError(f"Could not parse date '{raw}'")
    return parsed.date()


def parse_amount(raw: str) -> Money:
    """Parse a user-entered amount.

    Raises:
        ValueError: If the amount is not a finite number.
    """
    try:
        amount = to_money(raw.replace("$", "").replace(",", ""))
    except InvalidOperation:
        raise ValueError(f"Invalid amount '{raw}'") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid amount '{raw}'")
    return amount


def resolve_category(kind: TransactionKind, raw: str) -> str:
    """Resolve a category given by catalog number or by name.

    Names outside the catalog are accepted as-is.

    Raises:
        ValueError: If a number is outside the catalog range.
    """
    categories = list_categories(kind)
    raw = raw.strip()
    if raw.isdigit():
        idx = int(raw)
        if not 1 <= idx <= len(categories):
            raise ValueError(f"Please enter a number between 1 and {len(categories)}.")
        return categories[idx - 1]
    return raw.upper()


def prompt_amount() -> Money:
    """Prompt until a valid amount is entered."""
    while True:
        try:
            return parse_amount(typer.prompt("Enter amount"))
        except ValueError:
            console.print("[red]Please enter a valid amount.[/red]")


def prompt_category(kind: TransactionKind) -> str:
    """Show the numbered catalog and prompt until a valid selection is made."""
    categories = list_categories(kind)
    console.print("\nAvailable categories:")
    for idx, category in enumerate(categories, 1):
        console.print(f"  {idx}. {category}")

    while True:
        choice = typer.prompt(f"Select category (1-{len(categories)})")
        if not choice.strip().isdigit():
            console.print("[red]Please enter a valid number.[/red]")
            continue
        try:
            return resolve_category(kind, choice)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")


def prompt_date() -> Date:
    """Prompt until a valid date is entered; empty means today."""
    while True:
        raw = typer.prompt("Enter date (YYYY-MM-DD) or press Enter for today", default="", show_default=False)
        try:
            return parse_date(raw)
        except ValueError:
            console.print("[red]Please enter date in YYYY-MM-DD format or press Enter for today.[/red]")


def add_command(
    kind: TransactionKind,
    amount: str | None = None,
    category: str | None = None,
    description: str | None = None,
    date: str | None = None,
    data_file: str | None = None,
) -> None:
    """Add an income or expense entry, prompting for anything not supplied.

    Args:
        kind: Income or expense.
        amount: Amount in currency units.
        category: Category name or catalog number.
        description: Free-text description.
        date: Entry date (YYYY-MM-DD or other common formats), defaults to today.
        data_file: Data file override.
    """
    ledger, data_path, _ = open_ledger(data_file)

    console.print(f"\n[bold]--- ADD {kind.name} ---[/bold]")

    try:
        parsed_amount = parse_amount(amount) if amount is not None else prompt_amount()
        chosen_category = resolve_category(kind, category) if category is not None else prompt_category(kind)
        entry_date = parse_date(date) if date is not None else prompt_date()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    if description is None:
        description = typer.prompt("Enter description", default="", show_default=False)

    transaction = create_transaction(kind, parsed_amount, chosen_category, description.strip(), entry_date)

    try:
        record_transaction(ledger, transaction, data_path)
    except LedgerError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Transaction added:")
    console.print(f"  {escape(format_transaction(transaction))}")


def list_command(data_file: str | None = None) -> None:
    """List all transactions, newest first."""
    ledger, _, _ = open_ledger(data_file)

    if not ledger:
        console.print("[yellow]No transactions found[/yellow]")
        return

    transactions = sorted_descending_by_date(ledger)
    console.print(transactions_table(transactions, "All transactions"))
    console.print(f"Total transactions: {len(transactions)}")


def load_command(path: str, data_file: str | None = None) -> None:
    """Import transactions from another file into the data file."""
    ledger, data_path, _ = open_ledger(data_file)

    console.print(f"Loading transactions from: {path}")
    try:
        result = import_file(ledger, path, data_path)
    except LedgerError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    print_load_errors(result)
    console.print(f"[green]✓[/green] Successfully loaded {result.loaded} transactions from file.")
    console.print(f"[dim]Data file: {data_path} ({len(ledger)} transactions)[/dim]")
