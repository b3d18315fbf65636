from __future__ import annotations

import threading
from typing import Callable, Iterable, Iterator, List, Optional

from pennywise_core.domain.models import Transaction
from pennywise_core.logging_setup import get_logger


logger = get_logger(__name__)

Predicate = Callable[[Transaction], bool]


class Ledger:
    """
    In-memory, insertion-ordered store of transactions.

    Readers always get a fresh list; nothing handed out aliases the internal
    storage. Every operation holds the instance lock.
    """

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        self._entries: List[Transaction] = []
        self._lock = threading.RLock()
        if transactions is not None:
            self.add_many(transactions)

    def add(self, transaction: Transaction) -> None:
        with self._lock:
            self._entries.append(transaction)
        logger.debug("Added transaction %s", transaction.id)

    def add_many(self, transactions: Iterable[Transaction]) -> None:
        batch = list(transactions)
        with self._lock:
            self._entries.extend(batch)
        logger.debug("Added %d transactions", len(batch))

    def all(self) -> List[Transaction]:
        with self._lock:
            return list(self._entries)

    def filter(self, predicate: Predicate) -> List[Transaction]:
        with self._lock:
            return [t for t in self._entries if predicate(t)]

    def get(self, transaction_id: str) -> Optional[Transaction]:
        matches = self.filter(lambda t: t.id == transaction_id)
        return matches[0] if matches else None

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        logger.debug("Cleared %d transactions", dropped)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.all())
