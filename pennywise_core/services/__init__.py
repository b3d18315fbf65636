from pennywise_core.services.ledger import Ledger  # noqa: F401
from pennywise_core.services.recording import add_transactions, record_transaction  # noqa: F401
from pennywise_core.services.reports import ReportGenerator, ledger_total, monthly_report  # noqa: F401

__all__ = [
    "Ledger",
    "ReportGenerator",
    "add_transactions",
    "ledger_total",
    "monthly_report",
    "record_transaction",
]
