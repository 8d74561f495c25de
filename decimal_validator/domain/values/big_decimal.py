import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from decimal_validator.domain.exceptions import DecimalParseError

DecimalLike = Union["BigDecimal", Decimal, int, str, float]

# digits folded per step, well under the int/str conversion digit limit
_CHUNK_DIGITS = 18
_LOG10_2 = math.log10(2)


@dataclass(frozen=True, eq=False)
class BigDecimal:
    """
    Arbitrary-precision signed decimal: value = unscaled * 10 ** -scale.

    A negative scale means the value was written with a positive exponent
    (``1E+8`` is unscaled 1, scale -8). Equality, ordering and hashing are
    by numeric value, so ``0.0 == 0.00``.
    """

    unscaled: int
    scale: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.unscaled, bool) or not isinstance(self.unscaled, int):
            raise TypeError(f"Unscaled value must be an int: {self.unscaled!r}")
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise TypeError(f"Scale must be an int: {self.scale!r}")

    @classmethod
    def of(cls, value: DecimalLike) -> "BigDecimal":
        """
        Build a BigDecimal from any supported numeric input.

        Floats are converted through their shortest repr, so ``0.1`` becomes
        ``0.1`` rather than its binary expansion.

        :raises DecimalParseError: for booleans, NaN, infinities, malformed
            literals and unsupported types
        """
        if isinstance(value, BigDecimal):
            return value

        if isinstance(value, bool):
            raise DecimalParseError(value, "booleans are not decimals")

        if isinstance(value, int):
            return cls(value, 0)

        if isinstance(value, Decimal):
            return cls.from_decimal(value)

        if isinstance(value, float):
            if not math.isfinite(value):
                raise DecimalParseError(value, "value is not finite")
            return cls.from_decimal(Decimal(repr(value)))

        if isinstance(value, str):
            try:
                parsed = Decimal(value.strip())
            except ArithmeticError as e:
                raise DecimalParseError(value, "not a decimal literal") from e
            return cls.from_decimal(parsed)

        raise DecimalParseError(value, f"unsupported type {type(value).__name__}")

    @classmethod
    def from_decimal(cls, value: Decimal) -> "BigDecimal":
        sign, digits, exponent = value.as_tuple()

        if not isinstance(exponent, int):
            raise DecimalParseError(value, "value is not finite")

        unscaled = _fold_digits(digits)

        return cls(-unscaled if sign else unscaled, -exponent)

    @classmethod
    def from_float_exact(cls, value: float) -> "BigDecimal":
        """Keep the full binary expansion of the float, no shortest-repr rounding."""
        if not math.isfinite(value):
            raise DecimalParseError(value, "value is not finite")

        return cls.from_decimal(Decimal(value))

    @property
    def precision(self) -> int:
        """Number of digits in the unscaled value, at least 1."""
        magnitude = abs(self.unscaled)
        if magnitude < 10:
            return 1

        digits = int((magnitude.bit_length() - 1) * _LOG10_2) + 1
        while 10 ** (digits - 1) > magnitude:
            digits -= 1
        while 10 ** digits <= magnitude:
            digits += 1

        return digits

    def with_non_negative_scale(self) -> "BigDecimal":
        """Rewrite ``1E+8`` style values as a plain integer with scale 0."""
        if self.scale >= 0:
            return self

        return BigDecimal(self.unscaled * 10 ** -self.scale, 0)

    def truncate(self) -> "BigDecimal":
        """Drop every fractional digit without rounding, result has scale 0."""
        return BigDecimal(int(self), 0)

    def compare(self, other: DecimalLike) -> int:
        """Exact three-way comparison, independent of either scale."""
        other = BigDecimal.of(other)
        common_scale = max(self.scale, other.scale)

        left = self.unscaled * 10 ** (common_scale - self.scale)
        right = other.unscaled * 10 ** (common_scale - other.scale)

        return (left > right) - (left < right)

    def to_decimal(self) -> Decimal:
        digits = Decimal(abs(self.unscaled)).as_tuple().digits

        return Decimal((int(self.unscaled < 0), digits, -self.scale))

    def to_float(self) -> float:
        return float(self.to_decimal())

    def __int__(self) -> int:
        if self.scale <= 0:
            return self.unscaled * 10 ** -self.scale

        magnitude = abs(self.unscaled) // 10 ** self.scale

        return -magnitude if self.unscaled < 0 else magnitude

    def __str__(self) -> str:
        return str(self.to_decimal())

    def __eq__(self, other: Any) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented

        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash(self.to_decimal())

    def __lt__(self, other: Any) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented

        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented

        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented

        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented

        return self.compare(other) >= 0


def _fold_digits(digits: tuple[int, ...]) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int("".join(map(str, chunk)))

    return value


def _comparable(other: Any) -> Optional[BigDecimal]:
    """Operand for ==, <, <= etc. Floats are left out, their hash would not match."""
    if isinstance(other, bool):
        return None

    if isinstance(other, BigDecimal):
        return other

    if isinstance(other, int):
        return BigDecimal(other, 0)

    if isinstance(other, Decimal) and other.is_finite():
        return BigDecimal.from_decimal(other)

    return None


def format_double(value: float) -> str:
    """
    Render a float the way failure messages show it.

    Plain notation with at least one fractional digit inside [1e-3, 1e7)
    (``1.0``, ``0.01``), computerized scientific notation outside it
    (``1.0E8``, ``1.7976931348623157E308``).
    """
    if math.isnan(value):
        return "NaN"

    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if value == 0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    if 1e-3 <= abs(value) < 1e7:
        return repr(value)

    sign, digits, exponent = Decimal(repr(value)).as_tuple()

    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1

    adjusted = len(digits) - 1 + exponent
    mantissa = f"{digits[0]}.{''.join(map(str, digits[1:])) or '0'}"

    return f"{'-' if sign else ''}{mantissa}E{adjusted}"
