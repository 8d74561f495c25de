from .validate_decimal import ValidateDecimalQuery, ValidateDecimalQueryHandler

__all__ = [
    "ValidateDecimalQuery",
    "ValidateDecimalQueryHandler",
]
