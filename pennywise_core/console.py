from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from pennywise_core.domain.models import Money, Report, Transaction
from pennywise_core.errors import PennywiseError, ValidationError
from pennywise_core.io import parsing
from pennywise_core.io.config import TrackerConfig
from pennywise_core.logging_setup import get_logger
from pennywise_core.services.ledger import Ledger
from pennywise_core.services.recording import record_transaction
from pennywise_core.services.reports import ReportGenerator


logger = get_logger(__name__)

COMMANDS = ("add", "list", "filter", "report", "total", "clear", "exit")


def format_transaction(t: Transaction) -> str:
    return f"[{t.id}] {t.description} | {t.amount} | {t.category} | {t.date.isoformat()}"


class ConsoleInterface:
    """
    Menu-driven front end over one ledger.

    One instance per process run; it owns the rich console and reads input with
    ``typer.prompt``. Core errors are printed and the loop carries on.
    """

    def __init__(self, ledger: Ledger, config: Optional[TrackerConfig] = None, console: Optional[Console] = None):
        self.ledger = ledger
        self.config = config or TrackerConfig()
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.reports = ReportGenerator(self.config.reporting_currency)
        self._handlers: Dict[str, Callable[[], None]] = {
            "add": self.handle_add,
            "list": self.handle_list,
            "filter": self.handle_filter,
            "report": self.handle_report,
            "total": self.handle_total,
            "clear": self.handle_clear,
        }

    def read(self, prompt: str) -> str:
        return typer.prompt(prompt, default="", show_default=False).strip()

    def say(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(escape(text), style=style)

    def print_transactions(self, transactions: Iterable[Transaction]) -> int:
        shown = 0
        for t in transactions:
            self.say(format_transaction(t))
            shown += 1
        return shown

    def print_report(self, report: Report) -> None:
        for line in report.summary_lines():
            self.say(line, style="bold")
        self.print_transactions(report.items)

    def run(self) -> None:
        self.console.print("[bold cyan]Welcome to PennyWise[/bold cyan]")
        while True:
            try:
                cmd = self.read(f"\nEnter command ({', '.join(COMMANDS)})").lower()
            except typer.Abort:
                # end of input
                break
            if cmd == "exit":
                break
            handler = self._handlers.get(cmd)
            if handler is None:
                self.say("Unknown command", style="yellow")
                continue
            try:
                handler()
            except typer.Abort:
                break
            except ValidationError as e:
                self.say(f"Invalid input: {e}", style="red")
            except PennywiseError as e:
                self.say(f"Error: {e}", style="red")
        self.say("Goodbye.")

    def handle_add(self) -> None:
        description = self.read("Description")
        amount = parsing.parse_amount(self.read("Amount (e.g. 12.34)"))
        kind = parsing.parse_kind(self.read("Kind (income/expense, blank = expense)"))
        category = parsing.parse_category(self.read("Category (FOOD,TRANSPORT,ENTERTAINMENT,BILLS,RENT,UTILITIES,SALARY,MISC,OTHER)"))
        date = parsing.parse_date(self.read("Date (YYYY-MM-DD, blank = today)"))

        t = record_transaction(
            self.ledger,
            Money(amount, self.config.default_currency),
            category,
            description=description,
            date=date,
            kind=kind,
            config=self.config,
        )
        self.say(f"Added transaction {t.id}.", style="green")

    def handle_list(self) -> None:
        if not self.print_transactions(self.ledger.all()):
            self.say("No transactions found.")

    def handle_filter(self) -> None:
        raw = self.read("Category to filter by (blank = all)")
        if raw:
            category = parsing.parse_category(raw)
            results = self.ledger.filter(lambda t: t.category == category)
        else:
            results = self.ledger.all()
        if not self.print_transactions(results):
            self.say("No transactions found.")

    def handle_report(self) -> None:
        year = parsing.parse_year(self.read("Year (e.g. 2025)"))
        month = parsing.parse_month(self.read("Month (1-12)"))
        self.print_report(self.reports.monthly_report(self.ledger, year, month))

    def handle_total(self) -> None:
        total = self.reports.total(self.ledger)
        self.say(f"Total: {total}", style="bold")
        self.say(f"Transactions: {len(self.ledger)}")

    def handle_clear(self) -> None:
        self.ledger.clear()
        logger.info("Ledger cleared from console")
        self.say("Cleared ledger.")
