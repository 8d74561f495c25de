from prometheus_client import CollectorRegistry

from decimal_validator.shared.observability import (
    Metrics,
    generate_metrics,
    get_metrics_registry,
    write_metrics_textfile,
)


def _fresh_registry() -> Metrics:
    get_metrics_registry.cache_clear()
    return get_metrics_registry()


def test_record_validation_counts_by_outcome_and_reason():
    metrics = Metrics(CollectorRegistry())

    metrics.record_validation("invalid", "value_too_low", 0.001)
    metrics.record_validation("invalid", "value_too_low", 0.002)

    assert (
        metrics.registry.get_sample_value(
            "decimal_validations_total",
            {"outcome": "invalid", "reason": "value_too_low"},
        )
        == 2.0
    )


def test_generate_metrics_exposes_validation_counters():
    _fresh_registry().record_validation("valid", "none", 0.0)

    content, content_type = generate_metrics()

    assert 'decimal_validations_total{outcome="valid",reason="none"} 1.0' in content
    assert content_type.startswith("text/plain")


def test_write_metrics_textfile(tmp_path):
    # Given
    _fresh_registry().record_validation("invalid", "value_too_high", 0.0)
    target = tmp_path / "decimal_validator.prom"

    # When
    write_metrics_textfile(str(target))

    # Then
    content = target.read_text()
    assert (
        'decimal_validations_total{outcome="invalid",reason="value_too_high"} 1.0'
        in content
    )
