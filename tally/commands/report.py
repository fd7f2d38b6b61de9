"""Monthly summary command."""

import sys

from rich.console import Console
from rich.markup import escape

from tally.commands.util import open_ledger, transactions_table
from tally.config import get_recent_limit
from tally.dates import format_period, month_label, resolve_period
from tally.domain.report import CategoryTotal, MonthlySummary, build_monthly_summary, format_money

console = Console()


def render_breakdown(title: str, kind_label: str, rows: tuple[CategoryTotal, ...]) -> None:
    """Render one category breakdown section.

    Args:
        title: Section heading.
        kind_label: "income" or "expense", used in the empty message.
        rows: Category totals, already ordered.
    """
    console.print(f"\n[bold]--- {title} ---[/bold]")
    if not rows:
        console.print(f"  [dim]No {kind_label} transactions found.[/dim]")
        return
    for row in rows:
        console.print(f"  {escape(row.category)}: {format_money(row.amount)}")


def render_summary(summary: MonthlySummary) -> None:
    """Render a monthly summary to the console."""
    label = month_label(summary.month, summary.year)

    console.print(f"\n[bold cyan]SUMMARY FOR {label.upper()}[/bold cyan]")
    console.print("=" * 50)
    console.print(f"Total Income:  [green]{format_money(summary.total_income)}[/green]")
    console.print(f"Total Expense: [red]{format_money(summary.total_expense)}[/red]")
    console.print(f"Net Amount:    [bold]{format_money(summary.net)}[/bold]")

    if summary.saved:
        console.print("[green]✓ You saved money this month![/green]")
    else:
        console.print("[yellow]You spent more than you earned this month.[/yellow]")

    render_breakdown("INCOME BREAKDOWN", "income", summary.income_breakdown)
    render_breakdown("EXPENSE BREAKDOWN", "expense", summary.expense_breakdown)

    console.print()
    console.print(transactions_table(summary.recent, "Recent transactions"))


def summary_command(
    month: int | None = None,
    year: int | None = None,
    data_file: str | None = None,
) -> None:
    """Show totals, net amount and category breakdowns for one month.

    Args:
        month: Month number (1-12), defaults to the current month.
        year: Year, defaults to the current year.
        data_file: Data file override.
    """
    try:
        month, year = resolve_period(month, year)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    ledger, _, config = open_ledger(data_file)

    if not ledger:
        console.print("[yellow]No transactions found.[/yellow]")
        return

    summary = build_monthly_summary(ledger.snapshot(), month, year, get_recent_limit(config))

    if summary.is_empty:
        console.print(f"[yellow]No transactions found for {format_period(month, year)}[/yellow]")
        return

    render_summary(summary)
