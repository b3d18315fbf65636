from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pennywise_core.console import ConsoleInterface
from pennywise_core.errors import PennywiseError
from pennywise_core.io import config as config_io
from pennywise_core.io import ledger as ledger_io
from pennywise_core.io import parsing
from pennywise_core.logging_setup import configure_logging, get_logger
from pennywise_core.services import Ledger, ReportGenerator, add_transactions

app = typer.Typer(help="PennyWise: record transactions and build monthly reports.")

logger = get_logger(__name__)


def _bootstrap(config_path: Optional[Path]) -> config_io.TrackerConfig:
    config = config_io.load_tracker_config(config_path)
    configure_logging(config.log_level)
    return config


def _seed_ledger(ledger_path: Optional[Path], config: config_io.TrackerConfig) -> Ledger:
    ledger = Ledger()
    if ledger_path:
        entries = ledger_io.load_ledger(ledger_path, default_currency=config.default_currency)
        add_transactions(ledger, entries, config=config)
    return ledger


def _fail(console: Console, exc: Exception) -> None:
    logger.debug("Command failed: %s", exc)
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


@app.command()
def interactive(
    ledger: Optional[Path] = typer.Option(None, help="CSV with date,amount,category[,description,currency,kind,id] to start from"),
    config: Optional[Path] = typer.Option(None, help="JSON tracker config"),
):
    """Menu-driven session: add, list, filter, report, total, clear, exit."""
    console = Console(highlight=False, soft_wrap=True)
    try:
        tracker_config = _bootstrap(config)
        book = _seed_ledger(ledger, tracker_config)
    except (PennywiseError, FileNotFoundError) as exc:
        _fail(console, exc)
    ConsoleInterface(book, tracker_config, console=console).run()


@app.command("list")
def list_transactions(
    ledger: Path = typer.Option(..., help="CSV with date,amount,category[,description,currency,kind,id]"),
    category: Optional[str] = typer.Option(None, help="Only show this category"),
    config: Optional[Path] = typer.Option(None, help="JSON tracker config"),
):
    """Print transactions from a CSV, optionally for one category."""
    console = Console(highlight=False, soft_wrap=True)
    try:
        tracker_config = _bootstrap(config)
        book = _seed_ledger(ledger, tracker_config)
        if category:
            wanted = parsing.parse_category(category)
            rows = book.filter(lambda t: t.category == wanted)
        else:
            rows = book.all()
    except (PennywiseError, FileNotFoundError) as exc:
        _fail(console, exc)

    if not rows:
        typer.echo("No transactions found.")
        return
    table = Table(title=f"{len(rows)} transactions")
    for column in ("id", "date", "kind", "category", "amount", "description"):
        table.add_column(column)
    for t in rows:
        table.add_row(t.id, t.date.isoformat(), str(t.kind), str(t.category), str(t.amount), t.description)
    console.print(table)


@app.command()
def report(
    ledger: Path = typer.Option(..., help="CSV with date,amount,category[,description,currency,kind,id]"),
    year: int = typer.Option(..., help="Report year, e.g. 2025"),
    month: int = typer.Option(..., help="Report month, 1-12"),
    config: Optional[Path] = typer.Option(None, help="JSON tracker config"),
):
    """Monthly total and matching transactions."""
    console = Console(highlight=False, soft_wrap=True)
    try:
        tracker_config = _bootstrap(config)
        book = _seed_ledger(ledger, tracker_config)
        result = ReportGenerator(tracker_config.reporting_currency).monthly_report(book, year, month)
    except (PennywiseError, FileNotFoundError) as exc:
        _fail(console, exc)

    ConsoleInterface(book, tracker_config, console=console).print_report(result)
    breakdown = result.by_category()
    if breakdown:
        console.print("By category:")
        for category, money in breakdown.items():
            console.print(f"  {category}: {money}", markup=False)


if __name__ == "__main__":
    app()
