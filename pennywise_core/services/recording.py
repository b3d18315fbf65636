from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional

from pennywise_core.domain.models import Category, Money, Transaction, TransactionKind
from pennywise_core.errors import NegativeAmountError
from pennywise_core.io.config import TrackerConfig
from pennywise_core.logging_setup import get_logger
from pennywise_core.services.ledger import Ledger


logger = get_logger(__name__)


def check_amount_policy(transaction: Transaction, config: TrackerConfig) -> Transaction:
    if config.reject_negative_amounts and transaction.amount.is_negative:
        raise NegativeAmountError(f"amount cannot be negative: {transaction.amount}")
    return transaction


def record_transaction(
    ledger: Ledger,
    amount: Money,
    category: Category,
    *,
    description: str = "",
    date: Optional[dt.date] = None,
    kind: TransactionKind = TransactionKind.EXPENSE,
    config: Optional[TrackerConfig] = None,
) -> Transaction:
    """Build a transaction, apply the amount policy and append it."""
    config = config or TrackerConfig()
    transaction = Transaction(
        amount=amount,
        category=category,
        description=description,
        date=date,
        kind=kind,
    )
    check_amount_policy(transaction, config)
    ledger.add(transaction)
    logger.debug("Recorded %s", transaction.summary())
    return transaction


def add_transactions(
    ledger: Ledger,
    transactions: Iterable[Transaction],
    *,
    config: Optional[TrackerConfig] = None,
) -> List[Transaction]:
    config = config or TrackerConfig()
    batch = [check_amount_policy(t, config) for t in transactions]
    ledger.add_many(batch)
    return batch
