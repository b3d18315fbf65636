from __future__ import annotations

from typing import Iterable

from pennywise_core.domain.models import DEFAULT_CURRENCY, Money, Report, Transaction
from pennywise_core.io.parsing import validate_month
from pennywise_core.logging_setup import get_logger
from pennywise_core.services.ledger import Ledger


logger = get_logger(__name__)


def sum_amounts(transactions: Iterable[Transaction], currency: str = DEFAULT_CURRENCY) -> Money:
    total = Money.zero(currency)
    for t in transactions:
        total = total.add(t.amount)
    return total


def ledger_total(ledger: Ledger, currency: str = DEFAULT_CURRENCY) -> Money:
    """Sum of every transaction in the ledger, in one currency."""
    return sum_amounts(ledger.all(), currency)


def monthly_report(ledger: Ledger, year: int, month: int, currency: str = DEFAULT_CURRENCY) -> Report:
    """
    Total every transaction dated in ``year``/``month``.

    The sum starts at zero in the reporting currency and folds with
    ``Money.add``, so one transaction in another currency raises
    ``CurrencyMismatchError`` and no report is produced.
    """
    validate_month(month)
    items = ledger.filter(lambda t: t.in_month(year, month))
    total = sum_amounts(items, currency)
    logger.debug("Report %d/%d: %d transactions, total %s", month, year, len(items), total)
    return Report(year=year, month=month, items=tuple(items), total=total, currency=total.currency)


class ReportGenerator:
    def __init__(self, currency: str = DEFAULT_CURRENCY):
        self.currency = Money.zero(currency).currency

    def monthly_report(self, ledger: Ledger, year: int, month: int) -> Report:
        return monthly_report(ledger, year, month, currency=self.currency)

    def total(self, ledger: Ledger) -> Money:
        return ledger_total(ledger, currency=self.currency)
