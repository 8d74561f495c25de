from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from decimal_validator.domain.services import DecimalValidator
from decimal_validator.domain.values import (
    DEFAULT_MAX_DECIMAL_PLACES,
    DEFAULT_MAX_FRACTIONAL_PLACES,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_DECIMAL_PLACES,
    DEFAULT_MIN_VALUE,
    DecimalLike,
    ValidationResult,
    ValidationRules,
)


@dataclass(frozen=True)
class DecimalConstraint:
    """
    Constraint checking a decimal field by its count of integer and fractional
    digits and by its min/max value.

    Example::

        class Employee(BaseModel):
            salary: Annotated[
                Optional[Decimal],
                DecimalConstraint(max_fractional_places=2, min_value=0, max_value="5684.23"),
            ] = None

    ``None`` is never checked here, whether it is allowed is up to the field
    type. The instance can also be called directly or wrapped in
    ``AfterValidator``.
    """

    min_decimal_places: int = DEFAULT_MIN_DECIMAL_PLACES
    max_decimal_places: int = DEFAULT_MAX_DECIMAL_PLACES
    max_fractional_places: int = DEFAULT_MAX_FRACTIONAL_PLACES
    min_value: DecimalLike = DEFAULT_MIN_VALUE
    max_value: DecimalLike = DEFAULT_MAX_VALUE
    check_fractions: bool = True
    message: Optional[str] = None
    use_message_keys: bool = False

    rules: ValidationRules = field(init=False, repr=False, compare=False)
    validator: DecimalValidator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "rules",
            ValidationRules(
                min_decimal_places=self.min_decimal_places,
                max_decimal_places=self.max_decimal_places,
                max_fractional_places=self.max_fractional_places,
                min_value=self.min_value,
                max_value=self.max_value,
            ),
        )
        object.__setattr__(self, "validator", DecimalValidator(self.check_fractions))

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(self, handler(source_type))

    def __call__(self, value: Any) -> Any:
        if value is None:
            return value

        if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
            raise PydanticCustomError(
                "decimal_type",
                "Value of type {type_name} is not a decimal",
                {"type_name": type(value).__name__},
            )

        result = self.validator.validate(value, self.rules)

        if not result.is_valid:
            raise PydanticCustomError(
                "decimal_constraint",
                self._message_for(result),
                {"reason": result.reason.value},
            )

        return value

    def _message_for(self, result: ValidationResult) -> str:
        if self.message is not None:
            return self.message

        if self.use_message_keys:
            return result.reason.template_key

        return result.message
