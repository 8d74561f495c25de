from .big_decimal import BigDecimal, DecimalLike, format_double
from .validation_result import FailureReason, ValidationResult
from .validation_rules import (
    DEFAULT_MAX_DECIMAL_PLACES,
    DEFAULT_MAX_FRACTIONAL_PLACES,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_DECIMAL_PLACES,
    DEFAULT_MIN_VALUE,
    ValidationRules,
)

__all__ = [
    "BigDecimal",
    "DecimalLike",
    "format_double",
    "FailureReason",
    "ValidationResult",
    "ValidationRules",
    "DEFAULT_MIN_DECIMAL_PLACES",
    "DEFAULT_MAX_DECIMAL_PLACES",
    "DEFAULT_MAX_FRACTIONAL_PLACES",
    "DEFAULT_MIN_VALUE",
    "DEFAULT_MAX_VALUE",
]
