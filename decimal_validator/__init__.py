from decimal_validator.domain.services import DecimalValidator
from decimal_validator.domain.values import (
    BigDecimal,
    FailureReason,
    ValidationResult,
    ValidationRules,
)

__all__ = [
    "BigDecimal",
    "DecimalValidator",
    "FailureReason",
    "ValidationResult",
    "ValidationRules",
]
