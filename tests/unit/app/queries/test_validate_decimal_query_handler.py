from decimal import Decimal

import pytest
from prometheus_client import CollectorRegistry

from decimal_validator.app.queries import (
    ValidateDecimalQuery,
    ValidateDecimalQueryHandler,
)
from decimal_validator.domain.exceptions import DecimalParseError
from decimal_validator.domain.services import DecimalValidator
from decimal_validator.domain.values import (
    FailureReason,
    ValidationResult,
    ValidationRules,
)
from decimal_validator.shared.observability import Metrics


class MockDecimalValidator(DecimalValidator):
    def __init__(self):
        super().__init__()
        self.calls = []

    def validate(self, value, rules) -> ValidationResult:
        self.calls.append((value, rules))
        return super().validate(value, rules)


def _handler(metrics=None, default_rules=None):
    validator = MockDecimalValidator()
    handler = ValidateDecimalQueryHandler(
        validator=validator,
        default_rules=default_rules or ValidationRules(max_value=100),
        metrics=metrics,
    )
    return handler, validator


def test_handle_uses_default_rules_when_query_has_none():
    # Given
    handler, validator = _handler()

    # When
    result = handler.handle(ValidateDecimalQuery(value=Decimal("101")))

    # Then
    assert result.reason is FailureReason.VALUE_TOO_HIGH
    assert validator.calls == [(Decimal("101"), ValidationRules(max_value=100))]


def test_handle_prefers_query_rules():
    # Given
    handler, validator = _handler()
    rules = ValidationRules(max_value=1000)

    # When
    result = handler.handle(ValidateDecimalQuery(value=Decimal("101"), rules=rules))

    # Then
    assert result.is_valid
    assert validator.calls[0][1] is rules


def test_handle_reports_null_value():
    handler, _ = _handler()

    result = handler.handle(ValidateDecimalQuery(value=None))

    assert result.reason is FailureReason.NULL_VALUE


def test_handle_records_metrics():
    # Given
    metrics = Metrics(CollectorRegistry())
    handler, _ = _handler(metrics=metrics)

    # When
    handler.handle(ValidateDecimalQuery(value=Decimal("5")))
    handler.handle(ValidateDecimalQuery(value=Decimal("500")))
    handler.handle(ValidateDecimalQuery(value=Decimal("501")))

    # Then
    registry = metrics.registry
    assert (
        registry.get_sample_value(
            "decimal_validations_total", {"outcome": "valid", "reason": "none"}
        )
        == 1.0
    )
    assert (
        registry.get_sample_value(
            "decimal_validations_total",
            {"outcome": "invalid", "reason": "value_too_high"},
        )
        == 2.0
    )
    assert (
        registry.get_sample_value(
            "decimal_validation_duration_seconds_count", {"outcome": "invalid"}
        )
        == 2.0
    )


def test_handle_propagates_parse_errors():
    handler, _ = _handler()

    with pytest.raises(DecimalParseError):
        handler.handle(ValidateDecimalQuery(value="twelve"))
