"""Admin commands for config initialization and the category catalog."""

import sys

from rich.console import Console
from rich.table import Table

from tally.config import create_default_config, get_config_path
from tally.domain.categories import list_categories
from tally.domain.models import TransactionKind

console = Console()


def init_command(force: bool = False) -> None:
    """Create the default configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'tally init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Config: {config_path}[/dim]")


def categories_command(kind: TransactionKind | None = None) -> None:
    """Show the numbered category catalog."""
    kinds = [kind] if kind else list(TransactionKind)

    for k in kinds:
        table = Table(title=f"{k.name.title()} categories")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Category", style="magenta")
        for idx, category in enumerate(list_categories(k), 1):
            table.add_row(str(idx), category)
        console.print(table)
