from __future__ import annotations

import dataclasses
import datetime as dt
import enum
import uuid
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Tuple, Union

from pennywise_core.errors import CurrencyMismatchError, ValidationError


DEFAULT_CURRENCY = "GBP"

AmountLike = Union[Decimal, int, float, str, None]


def to_decimal(value: AmountLike) -> Decimal:
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError("amount invalid")
    if isinstance(value, float):
        # shortest repr, not the binary expansion
        value = str(value)
    try:
        d = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, TypeError) as e:
        raise ValidationError(f"amount invalid: {value!r}") from e
    if not d.is_finite():
        raise ValidationError(f"amount invalid: {value!r}")
    return d


def _to_currency(value: Optional[str]) -> str:
    if value is None:
        return DEFAULT_CURRENCY
    code = str(value).strip().upper()
    if len(code) != 3 or not code.isalpha():
        raise ValidationError(f"currency must be a 3-letter code, got {value!r}")
    return code


@dataclasses.dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "currency", _to_currency(self.currency))

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(Decimal(0), currency)

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def add(self, other: "Money") -> "Money":
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
        return Money(self.amount + other.amount, self.currency)

    @property
    def plain_amount(self) -> str:
        """The amount in positional notation, never exponent form."""
        return format(self.amount, "f")

    def __str__(self) -> str:
        return f"{self.plain_amount} {self.currency}"


class Category(enum.Enum):
    FOOD = "FOOD"
    TRANSPORT = "TRANSPORT"
    ENTERTAINMENT = "ENTERTAINMENT"
    BILLS = "BILLS"
    RENT = "RENT"
    UTILITIES = "UTILITIES"
    SALARY = "SALARY"
    MISC = "MISC"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: str) -> "Category":
        name = raw.strip().upper() if isinstance(raw, str) else ""
        try:
            return cls[name]
        except KeyError as e:
            choices = ",".join(c.name for c in cls)
            raise ValidationError(f"unknown category {raw!r} (expected one of {choices})") from e

    def __str__(self) -> str:
        return self.name


class TransactionKind(enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, raw: str) -> "TransactionKind":
        value = raw.strip().lower() if isinstance(raw, str) else ""
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError("kind must be income or expense") from e

    def __str__(self) -> str:
        return self.value


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclasses.dataclass(frozen=True)
class Transaction:
    """One recorded financial event.

    ``description`` defaults to an empty string and ``date`` to today at
    construction time. ``id`` is generated unless supplied; it is the identity
    of the record, the other fields are plain values.
    """

    amount: Money
    category: Category
    description: str = ""
    date: Optional[dt.date] = None
    kind: TransactionKind = TransactionKind.EXPENSE
    id: str = dataclasses.field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Money):
            raise ValidationError("amount must be Money")
        if isinstance(self.category, str):
            object.__setattr__(self, "category", Category.parse(self.category))
        elif not isinstance(self.category, Category):
            raise ValidationError("category must be a Category")
        if isinstance(self.kind, str):
            object.__setattr__(self, "kind", TransactionKind.parse(self.kind))
        elif not isinstance(self.kind, TransactionKind):
            raise ValidationError("kind must be a TransactionKind")
        if self.description is None:
            object.__setattr__(self, "description", "")
        if self.date is None:
            object.__setattr__(self, "date", dt.date.today())
        elif isinstance(self.date, dt.datetime):
            object.__setattr__(self, "date", self.date.date())
        elif not isinstance(self.date, dt.date):
            raise ValidationError("date must be a calendar date")
        if not self.id:
            object.__setattr__(self, "id", _new_id())

    @property
    def currency(self) -> str:
        return self.amount.currency

    def in_month(self, year: int, month: int) -> bool:
        return self.date.year == year and self.date.month == month

    def summary(self) -> str:
        return f"{self.kind.name}: {self.description} | {self.category} | {self.date.isoformat()}"


@dataclasses.dataclass(frozen=True)
class Report:
    year: int
    month: int
    items: Tuple[Transaction, ...]
    total: Money
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def count(self) -> int:
        return len(self.items)

    def transactions(self) -> List[Transaction]:
        return list(self.items)

    def by_category(self) -> Dict[Category, Money]:
        """Per-category totals, in the order categories first appear."""
        totals: Dict[Category, Money] = {}
        for t in self.items:
            running = totals.get(t.category, Money.zero(self.currency))
            totals[t.category] = running.add(t.amount)
        return totals

    def summary_lines(self) -> Tuple[str, str, str]:
        return (
            f"Report for {self.month}/{self.year}",
            f"Total: {self.total.plain_amount} {self.currency}",
            f"Transactions: {self.count}",
        )

    def __str__(self) -> str:
        return "\n".join(self.summary_lines())
