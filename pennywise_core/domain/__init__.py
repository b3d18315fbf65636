from pennywise_core.domain.models import (  # noqa: F401
    DEFAULT_CURRENCY,
    Category,
    Money,
    Report,
    Transaction,
    TransactionKind,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "Category",
    "Money",
    "Report",
    "Transaction",
    "TransactionKind",
]
