from functools import lru_cache
from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    write_to_textfile,
)

from decimal_validator.shared.logging import get_logger

logger = get_logger(__name__)


class Metrics:
    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        self.decimal_validations_total = Counter(
            "decimal_validations_total",
            "Total decimal validations",
            ["outcome", "reason"],
            registry=self.registry,
        )
        self.decimal_validation_duration_seconds = Histogram(
            "decimal_validation_duration_seconds",
            "Decimal validation processing time",
            ["outcome"],
            registry=self.registry,
        )

        logger.info("metrics_initialized")

    def record_validation(
        self, outcome: str, reason: str, duration_seconds: float
    ) -> None:
        self.decimal_validations_total.labels(outcome=outcome, reason=reason).inc()
        self.decimal_validation_duration_seconds.labels(outcome=outcome).observe(
            duration_seconds
        )


@lru_cache()
def get_metrics_registry() -> Metrics:
    return Metrics()


def generate_metrics() -> tuple[str, str]:
    metrics = get_metrics_registry()
    content = generate_latest(metrics.registry)
    return content.decode("utf-8"), CONTENT_TYPE_LATEST


def write_metrics_textfile(path: str) -> None:
    """Dump the registry for the node exporter textfile collector."""
    metrics = get_metrics_registry()
    write_to_textfile(path, metrics.registry)
    logger.info("metrics_written", path=path)
