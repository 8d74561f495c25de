import sys
from dataclasses import dataclass

from .big_decimal import BigDecimal

DEFAULT_MIN_DECIMAL_PLACES = 1
DEFAULT_MAX_DECIMAL_PLACES = 10
DEFAULT_MAX_FRACTIONAL_PLACES = 2

# Exact expansions of the largest finite double, kept as the default range.
DEFAULT_MAX_VALUE = BigDecimal.from_float_exact(sys.float_info.max)
DEFAULT_MIN_VALUE = BigDecimal.from_float_exact(-sys.float_info.max)


@dataclass(frozen=True)
class ValidationRules:
    """
    Boundaries a decimal has to respect.

    ``min_decimal_places``/``max_decimal_places`` bound the count of digits
    before the point, ``max_fractional_places`` the count after it, and
    ``min_value``/``max_value`` the inclusive numeric range. Value bounds may
    be given as anything ``BigDecimal.of`` accepts.
    """

    min_decimal_places: int = DEFAULT_MIN_DECIMAL_PLACES
    max_decimal_places: int = DEFAULT_MAX_DECIMAL_PLACES
    max_fractional_places: int = DEFAULT_MAX_FRACTIONAL_PLACES
    # any DecimalLike is accepted and stored as BigDecimal
    min_value: BigDecimal = DEFAULT_MIN_VALUE
    max_value: BigDecimal = DEFAULT_MAX_VALUE

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_value", BigDecimal.of(self.min_value))
        object.__setattr__(self, "max_value", BigDecimal.of(self.max_value))
