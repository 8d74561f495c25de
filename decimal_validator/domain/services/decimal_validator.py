from typing import Callable, Optional

from decimal_validator.domain.values import (
    BigDecimal,
    DecimalLike,
    FailureReason,
    ValidationResult,
    ValidationRules,
    format_double,
)

NULL_VALUE_MESSAGE = "Cannot parse null value."

Check = Callable[[BigDecimal, ValidationRules], Optional[ValidationResult]]


class DecimalValidator:
    """
    Validates a decimal by its count of integer and fractional digits and by
    an inclusive value range.

    Example::

        rules = ValidationRules(max_decimal_places=3, min_value=0, max_value=150)
        result = DecimalValidator().validate(Decimal("124.2"), rules)

    Checks run in a fixed order and the first failure wins. The validator
    keeps no per-call state, so one instance can be shared between threads.
    """

    def __init__(self, check_fractions: bool = True):
        self._check_fractions = check_fractions

    @property
    def check_fractions(self) -> bool:
        return self._check_fractions

    def validate(
        self, value: Optional[DecimalLike], rules: ValidationRules
    ) -> ValidationResult:
        """
        Validate a decimal by the given rules.

        With fraction checks disabled the value is truncated to its integer
        part first and the fractional digit check is skipped.

        :param value: Decimal to check, ``None`` means no value was supplied
        :param rules: Boundaries to check against
        :return: ValidationResult, carrying the failure message if invalid

        :raises DecimalParseError: if a raw (non BigDecimal) value is not a finite decimal
        """
        if value is None:
            return ValidationResult.failure(FailureReason.NULL_VALUE, NULL_VALUE_MESSAGE)

        number = BigDecimal.of(value)

        if not self._check_fractions:
            number = number.truncate()

        number = number.with_non_negative_scale()

        for check in self._checks():
            failure = check(number, rules)
            if failure is not None:
                return failure

        return ValidationResult.ok()

    def _checks(self) -> list[Check]:
        checks: list[Check] = [self._check_integer_digits]

        if self._check_fractions:
            checks.append(self._check_fractional_digits)

        checks.append(self._check_upper_bound)
        checks.append(self._check_lower_bound)

        return checks

    @staticmethod
    def _check_integer_digits(
        number: BigDecimal, rules: ValidationRules
    ) -> Optional[ValidationResult]:
        # 0.01 has precision 1 but still one digit before the point
        precision = max(number.precision, number.scale + 1)
        integer_digits = precision - number.scale

        if rules.min_decimal_places <= integer_digits <= rules.max_decimal_places:
            return None

        return ValidationResult.failure(
            FailureReason.INTEGER_DIGITS_OUT_OF_RANGE,
            "The count of the digits before the point is out of range. "
            f"It should be in the range {rules.min_decimal_places} - "
            f"{rules.max_decimal_places} but is {integer_digits}.",
        )

    @staticmethod
    def _check_fractional_digits(
        number: BigDecimal, rules: ValidationRules
    ) -> Optional[ValidationResult]:
        fractional_digits = number.scale

        if fractional_digits <= rules.max_fractional_places:
            return None

        return ValidationResult.failure(
            FailureReason.FRACTIONAL_DIGITS_TOO_HIGH,
            "The count of the digits after the point is too high. "
            f"It should be less than or equal to {rules.max_fractional_places} "
            f"but is {fractional_digits}.",
        )

    @staticmethod
    def _check_upper_bound(
        number: BigDecimal, rules: ValidationRules
    ) -> Optional[ValidationResult]:
        if number.compare(rules.max_value) <= 0:
            return None

        return ValidationResult.failure(
            FailureReason.VALUE_TOO_HIGH,
            f"The value {format_double(number.to_float())} is too high. "
            "It should be less than or equal to "
            f"{format_double(rules.max_value.to_float())}.",
        )

    @staticmethod
    def _check_lower_bound(
        number: BigDecimal, rules: ValidationRules
    ) -> Optional[ValidationResult]:
        if number.compare(rules.min_value) >= 0:
            return None

        return ValidationResult.failure(
            FailureReason.VALUE_TOO_LOW,
            f"The value {format_double(number.to_float())} is too small. "
            "It should be greater than or equal to "
            f"{format_double(rules.min_value.to_float())}.",
        )
