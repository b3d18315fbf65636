from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Dict, Optional

from pennywise_core.domain.models import DEFAULT_CURRENCY, Money
from pennywise_core.errors import ValidationError


@dataclasses.dataclass(frozen=True)
class TrackerConfig:
    default_currency: str = DEFAULT_CURRENCY
    reporting_currency: str = DEFAULT_CURRENCY
    reject_negative_amounts: bool = True
    log_level: str = "INFO"


def load_tracker_config(path: Optional[str | Path] = None) -> TrackerConfig:
    """Read a JSON config file; ``None`` gives the defaults."""
    if path is None:
        return TrackerConfig()
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValidationError(f"Config {path} must contain a JSON object")
    default_currency = _currency(data.get("default_currency", DEFAULT_CURRENCY))
    return TrackerConfig(
        default_currency=default_currency,
        reporting_currency=_currency(data.get("reporting_currency", default_currency)),
        reject_negative_amounts=bool(data.get("reject_negative_amounts", True)),
        log_level=str(data.get("log_level", "INFO")),
    )


def _currency(code: Any) -> str:
    # Money owns the currency-code rules.
    return Money.zero(code).currency


def _read_json(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Config {path} is not valid JSON: {e}") from e
