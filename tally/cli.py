"""CLI entry point for tally."""

import typer

from tally.commands.admin import categories_command, init_command
from tally.commands.report import summary_command
from tally.commands.transactions import add_command, list_command, load_command
from tally.domain.models import TransactionKind
from tally.logging_setup import configure_logging

app = typer.Typer(
    name="tally",
    help="Tally - a personal income and expense ledger",
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    data_file: str = typer.Option(None, "--data-file", "-f", help="Data file (default: transactions.csv)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Tally - a personal income and expense ledger."""
    configure_logging("DEBUG" if verbose else None)
    ctx.obj = {"data_file": data_file}


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create the tally configuration file."""
    init_command(force)


@app.command()
def categories(
    kind: TransactionKind = typer.Option(
        None, "--kind", "-k", case_sensitive=False, help="Only show income or expense categories"
    ),
) -> None:
    """Show the category catalog."""
    categories_command(kind)


@app.command()
def add(
    ctx: typer.Context,
    kind: TransactionKind = typer.Argument(..., case_sensitive=False, help="income or expense"),
    amount: str = typer.Option(None, "--amount", "-a", help="Amount (prompted if omitted)"),
    category: str = typer.Option(None, "--category", "-c", help="Category name or number"),
    description: str = typer.Option(None, "--description", "-d", help="Description"),
    date: str = typer.Option(None, "--date", help="Date (YYYY-MM-DD), defaults to today"),
) -> None:
    """Add an income or expense entry."""
    add_command(kind, amount, category, description, date, ctx.obj["data_file"])


@app.command()
def summary(
    ctx: typer.Context,
    month: int = typer.Option(None, "--month", "-m", help="Month (1-12), defaults to current"),
    year: int = typer.Option(None, "--year", "-y", help="Year (YYYY), defaults to current"),
) -> None:
    """Show your monthly summary and category breakdowns."""
    summary_command(month, year, ctx.obj["data_file"])


@app.command(name="list")
def list_transactions(ctx: typer.Context) -> None:
    """List all your transactions, newest first."""
    list_command(ctx.obj["data_file"])


@app.command()
def load(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File of KIND,AMOUNT,CATEGORY,DESCRIPTION,DATE lines"),
) -> None:
    """Import transactions from a file into your data file."""
    load_command(path, ctx.obj["data_file"])


if __name__ == "__main__":
    app()
