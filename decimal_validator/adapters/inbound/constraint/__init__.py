from .decimal_constraint import DecimalConstraint

__all__ = [
    "DecimalConstraint",
]
