from .decimal_validator import NULL_VALUE_MESSAGE, DecimalValidator

__all__ = [
    "DecimalValidator",
    "NULL_VALUE_MESSAGE",
]
