from typing import Any

from .base import DomainException


class DecimalParseError(DomainException):
    """Raised when a raw input cannot be represented as a finite decimal."""

    def __init__(self, value: Any, reason: str):
        self.value = value

        super().__init__(f"Cannot parse {value!r} as a decimal: {reason}")
