from decimal import Decimal
from typing import Annotated, Optional

import pytest
from pydantic import AfterValidator, BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from decimal_validator.adapters.inbound.constraint import DecimalConstraint
from decimal_validator.domain.values import BigDecimal, ValidationRules


class Employee(BaseModel):
    salary: Annotated[
        Optional[Decimal],
        DecimalConstraint(
            min_decimal_places=1,
            max_decimal_places=10,
            max_fractional_places=2,
            min_value="0.00",
            max_value="5684.23",
        ),
    ] = None


class Invoice(BaseModel):
    total: Annotated[Decimal, AfterValidator(DecimalConstraint(max_value=10))]


def test_model_accepts_valid_value():
    assert Employee(salary=Decimal("124.20")).salary == Decimal("124.20")
    assert Employee(salary="5684.23").salary == Decimal("5684.23")


def test_model_skips_missing_value():
    assert Employee().salary is None
    assert Employee(salary=None).salary is None


def test_model_reports_validator_message():
    with pytest.raises(ValidationError) as exc_info:
        Employee(salary=Decimal("5684.24"))

    error = exc_info.value.errors()[0]
    assert error["type"] == "decimal_constraint"
    assert error["msg"] == (
        "The value 5684.24 is too high. It should be less than or equal to 5684.23."
    )
    assert error["ctx"] == {"reason": "decimal.value.too_high"}


def test_model_reports_fractional_digits_from_string_input():
    with pytest.raises(ValidationError) as exc_info:
        Employee(salary="1.234")

    assert exc_info.value.errors()[0]["msg"] == (
        "The count of the digits after the point is too high. "
        "It should be less than or equal to 2 but is 3."
    )


def test_after_validator_usage():
    assert Invoice(total=Decimal("10")).total == Decimal("10")

    with pytest.raises(ValidationError):
        Invoice(total=Decimal("10.01"))


def test_rules_are_built_once_from_parameters():
    constraint = DecimalConstraint(max_decimal_places=3, min_value=0, max_value=150)

    assert constraint.rules == ValidationRules(
        max_decimal_places=3, min_value=0, max_value=150
    )
    assert constraint.rules.max_value == BigDecimal(150)
    assert constraint.validator.check_fractions is True


def test_call_returns_value_unchanged():
    constraint = DecimalConstraint(max_fractional_places=0, max_value=100, check_fractions=False)

    assert constraint(Decimal("100.03")) == Decimal("100.03")
    assert constraint(None) is None
    assert constraint(7) == 7


@pytest.mark.parametrize("value", ["12", 1.5, True])
def test_call_rejects_non_decimal_values(value):
    with pytest.raises(PydanticCustomError) as exc_info:
        DecimalConstraint()(value)

    assert exc_info.value.type == "decimal_type"


def test_message_keys_replace_literal_messages():
    constraint = DecimalConstraint(max_fractional_places=0, use_message_keys=True)

    with pytest.raises(PydanticCustomError) as exc_info:
        constraint(Decimal("1.5"))

    assert exc_info.value.type == "decimal_constraint"
    assert exc_info.value.message() == "decimal.fractional_digits.too_high"


def test_message_override_wins():
    constraint = DecimalConstraint(max_value=1, message="salary.out_of_range", use_message_keys=True)

    with pytest.raises(PydanticCustomError) as exc_info:
        constraint(Decimal("2"))

    assert exc_info.value.message() == "salary.out_of_range"
