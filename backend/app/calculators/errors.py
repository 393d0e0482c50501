"""Calculator error taxonomy.

Input problems raise InputValidationError (tagged with a kind and the offending
field); a derived value that breaks an invariant raises InvalidStateError.
A missing discount rate is not an error: the engine falls back and flags it.
"""
from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Why an input was rejected."""
    missing_field = "missing_field"
    out_of_range = "out_of_range"
    exceeds_max = "exceeds_max"


class CalculatorError(ValueError):
    """Base class for all calculator failures."""


class InputValidationError(CalculatorError):
    """Caller-supplied input violates a documented constraint."""

    def __init__(self, kind: ValidationErrorKind, field: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "field": self.field, "message": self.message}


class InvalidStateError(CalculatorError):
    """A derived value violates an invariant (validation was bypassed)."""
