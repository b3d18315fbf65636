from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from pennywise_core.domain.models import DEFAULT_CURRENCY, Money, Transaction
from pennywise_core.errors import PennywiseError, ValidationError
from pennywise_core.io.parsing import parse_amount, parse_category, parse_date, parse_kind
from pennywise_core.logging_setup import get_logger


REQUIRED_COLUMNS = {"date", "amount", "category"}

logger = get_logger(__name__)


def load_ledger(csv_path: str | Path, default_currency: str = DEFAULT_CURRENCY) -> List[Transaction]:
    """
    Read transactions from a CSV export.

    Columns ``date``, ``amount`` and ``category`` are required; ``description``,
    ``currency``, ``kind`` and ``id`` are optional. Cells are read as text so
    amounts keep their exact decimal value.
    """
    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(path)

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ValidationError(f"Could not read ledger CSV {path.name}: {e}") from e
    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValidationError(f"Missing columns in ledger CSV: {sorted(missing)}")

    entries: List[Transaction] = []
    for index, row in df.iterrows():
        line = int(index) + 2  # header is line 1
        date_cell = row["date"].strip()
        if not date_cell:
            raise ValidationError(f"{path.name} line {line}: date required")
        try:
            entries.append(
                Transaction(
                    amount=Money(
                        parse_amount(row["amount"]),
                        row.get("currency", "").strip() or default_currency,
                    ),
                    category=parse_category(row["category"]),
                    description=row.get("description", ""),
                    date=parse_date(date_cell),
                    kind=parse_kind(row.get("kind", "")),
                    id=row.get("id", "").strip(),
                )
            )
        except PennywiseError as e:
            raise ValidationError(f"{path.name} line {line}: {e}") from e

    logger.info("Loaded %d transactions from %s", len(entries), path)
    return entries
