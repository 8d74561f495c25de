from .base import DomainException
from .parse import DecimalParseError

__all__ = [
    "DomainException",
    "DecimalParseError",
]
