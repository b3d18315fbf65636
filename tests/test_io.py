import datetime as dt
import json
from decimal import Decimal
from pathlib import Path

import pytest

from pennywise_core.domain.models import Category, Money, TransactionKind
from pennywise_core.errors import ValidationError
from pennywise_core.io.config import TrackerConfig, load_tracker_config
from pennywise_core.io.ledger import load_ledger


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_config_defaults_without_file():
    assert load_tracker_config(None) == TrackerConfig()


def test_config_from_json(tmp_path: Path):
    path = _write(
        tmp_path / "config.json",
        json.dumps({"default_currency": "eur", "reject_negative_amounts": False, "log_level": "DEBUG"}),
    )
    config = load_tracker_config(path)
    assert config.default_currency == "EUR"
    assert config.reporting_currency == "EUR"
    assert config.reject_negative_amounts is False
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("payload", ['{"default_currency": "EURO"}', "[1, 2]", "{not json"])
def test_config_rejects_bad_content(tmp_path: Path, payload):
    path = _write(tmp_path / "config.json", payload)
    with pytest.raises(ValidationError):
        load_tracker_config(path)


def test_load_ledger_reads_exact_amounts(tmp_path: Path):
    path = _write(
        tmp_path / "ledger.csv",
        "date,amount,category,description,kind,currency\n"
        "2025-06-15,12.50,food,Lunch,,\n"
        "2025-06-01,1500.00,SALARY,Pay,income,\n"
        "2025-06-20,0.10,transport,Bus,expense,usd\n",
    )
    entries = load_ledger(path)

    assert [t.description for t in entries] == ["Lunch", "Pay", "Bus"]
    assert entries[0].amount == Money(Decimal("12.50"), "GBP")
    assert str(entries[0].amount) == "12.50 GBP"
    assert entries[0].date == dt.date(2025, 6, 15)
    assert entries[1].kind is TransactionKind.INCOME
    assert entries[1].category is Category.SALARY
    assert entries[2].amount == Money("0.10", "USD")


def test_load_ledger_uses_default_currency_and_ids(tmp_path: Path):
    path = _write(tmp_path / "ledger.csv", "id,date,amount,category\nrow-1,2025-06-15,3,misc\n")
    (t,) = load_ledger(path, default_currency="EUR")
    assert t.id == "row-1"
    assert t.amount.currency == "EUR"
    assert t.description == ""


def test_load_ledger_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_ledger(tmp_path / "nope.csv")


def test_load_ledger_missing_columns(tmp_path: Path):
    path = _write(tmp_path / "ledger.csv", "date,amount\n2025-06-15,3\n")
    with pytest.raises(ValidationError, match="category"):
        load_ledger(path)


def test_load_ledger_names_the_bad_line(tmp_path: Path):
    path = _write(
        tmp_path / "ledger.csv",
        "date,amount,category\n2025-06-15,3,food\n2025-06-16,three,food\n",
    )
    with pytest.raises(ValidationError, match="line 3"):
        load_ledger(path)


@pytest.mark.parametrize(
    "text",
    [
        "",
        'date,amount,category\n2025-06-15,"3,food\n',
    ],
)
def test_load_ledger_unreadable_csv(tmp_path: Path, text):
    path = _write(tmp_path / "ledger.csv", text)
    with pytest.raises(ValidationError, match="Could not read ledger CSV"):
        load_ledger(path)
