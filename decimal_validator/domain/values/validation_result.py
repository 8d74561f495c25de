from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    """Which check rejected a value; the value doubles as a message template key."""

    NULL_VALUE = "decimal.null_value"
    INTEGER_DIGITS_OUT_OF_RANGE = "decimal.integer_digits.out_of_range"
    FRACTIONAL_DIGITS_TOO_HIGH = "decimal.fractional_digits.too_high"
    VALUE_TOO_HIGH = "decimal.value.too_high"
    VALUE_TOO_LOW = "decimal.value.too_low"

    @property
    def template_key(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationResult:
    message: Optional[str] = None
    reason: Optional[FailureReason] = None

    def __post_init__(self):
        if (self.message is None) != (self.reason is None):
            raise ValueError("A failure needs both a reason and a message")

    @property
    def is_valid(self) -> bool:
        return self.message is None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, reason: FailureReason, message: str) -> "ValidationResult":
        return cls(message=message, reason=reason)
