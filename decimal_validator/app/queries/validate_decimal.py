import time
from dataclasses import dataclass
from typing import Optional

from decimal_validator.domain.services import DecimalValidator
from decimal_validator.domain.values import (
    DecimalLike,
    ValidationResult,
    ValidationRules,
)
from decimal_validator.shared.logging import get_logger
from decimal_validator.shared.observability import Metrics

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidateDecimalQuery:
    value: Optional[DecimalLike]
    rules: Optional[ValidationRules] = None


class ValidateDecimalQueryHandler:
    def __init__(
        self,
        validator: DecimalValidator,
        default_rules: ValidationRules,
        metrics: Optional[Metrics] = None,
    ):
        self._validator = validator
        self._default_rules = default_rules
        self._metrics = metrics

    def handle(self, query: ValidateDecimalQuery) -> ValidationResult:
        """
        Validate a decimal, falling back to the default rules if the query has none.

        :param query: Query with the value and optional rules
        :return: ValidationResult of the validator

        :raises DecimalParseError: If a raw value is not a finite decimal
        """
        rules = query.rules if query.rules is not None else self._default_rules

        started = time.perf_counter()
        result = self._validator.validate(query.value, rules)
        elapsed = time.perf_counter() - started

        if result.is_valid:
            logger.debug("decimal_validated", value=str(query.value))
        else:
            logger.info(
                "decimal_rejected",
                value=str(query.value),
                reason=result.reason.name,
                message=result.message,
            )

        if self._metrics is not None:
            self._metrics.record_validation(
                outcome="valid" if result.is_valid else "invalid",
                reason=result.reason.name.lower() if result.reason else "none",
                duration_seconds=elapsed,
            )

        return result
