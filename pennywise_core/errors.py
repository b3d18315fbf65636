from __future__ import annotations


class PennywiseError(Exception):
    """Base class for errors raised by the tracker core."""


class ValidationError(PennywiseError, ValueError):
    """Malformed amount, date, category or other caller input."""


class CurrencyMismatchError(PennywiseError, ValueError):
    def __init__(self, left: str, right: str):
        super().__init__(f"Currency mismatch: {left} vs {right}")
        self.left = left
        self.right = right


class NegativeAmountError(ValidationError):
    pass
