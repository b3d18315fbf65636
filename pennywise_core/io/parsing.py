"""Turn console/CSV strings into core values.

Every helper raises ``ValidationError`` with a short, user-facing message.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Optional

from pennywise_core.domain.models import Category, TransactionKind, to_decimal
from pennywise_core.errors import ValidationError


def parse_amount(s: str) -> Decimal:
    if not isinstance(s, str) or not s.strip():
        raise ValidationError("amount required")
    return to_decimal(s)


def parse_date(s: Optional[str], today: Optional[dt.date] = None) -> dt.date:
    if s is None or not s.strip():
        return today or dt.date.today()
    try:
        return dt.date.fromisoformat(s.strip())
    except ValueError as e:
        raise ValidationError(f"date must be YYYY-MM-DD, got {s!r}") from e


def parse_category(s: str) -> Category:
    return Category.parse(s)


def parse_kind(s: Optional[str]) -> TransactionKind:
    if s is None or not s.strip():
        return TransactionKind.EXPENSE
    return TransactionKind.parse(s)


def _parse_int(s: str, field: str) -> int:
    try:
        return int(str(s).strip())
    except ValueError as e:
        raise ValidationError(f"{field} must be a whole number, got {s!r}") from e


def parse_year(s: str) -> int:
    year = _parse_int(s, "year")
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        raise ValidationError(f"year out of range: {year}")
    return year


def parse_month(s: str) -> int:
    month = _parse_int(s, "month")
    validate_month(month)
    return month


def validate_month(month: int) -> int:
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")
    return month
