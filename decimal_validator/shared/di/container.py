from dependency_injector import containers, providers

from decimal_validator.adapters.inbound.constraint import DecimalConstraint
from decimal_validator.app.queries import ValidateDecimalQueryHandler
from decimal_validator.domain.services import DecimalValidator
from decimal_validator.domain.values import (
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    BigDecimal,
    ValidationRules,
)
from decimal_validator.shared.config import get_settings
from decimal_validator.shared.logging import get_logger
from decimal_validator.shared.observability import get_metrics_registry

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    validator = providers.Singleton(
        DecimalValidator,
        check_fractions=config.check_fractions,
    )

    default_rules = providers.Singleton(
        ValidationRules,
        min_decimal_places=config.min_decimal_places,
        max_decimal_places=config.max_decimal_places,
        max_fractional_places=config.max_fractional_places,
        min_value=config.min_value,
        max_value=config.max_value,
    )

    metrics = providers.Selector(
        config.metrics_mode,
        enabled=providers.Singleton(get_metrics_registry),
        disabled=providers.Object(None),
    )

    validate_decimal_query_handler = providers.Factory(
        ValidateDecimalQueryHandler,
        validator=validator,
        default_rules=default_rules,
        metrics=metrics,
    )

    decimal_constraint = providers.Factory(
        DecimalConstraint,
        check_fractions=config.check_fractions,
        use_message_keys=config.use_message_keys,
    )


def get_container() -> Container:
    settings = get_settings()

    container = Container()

    min_value = (
        BigDecimal.of(settings.DEFAULT_MIN_VALUE)
        if settings.DEFAULT_MIN_VALUE is not None
        else DEFAULT_MIN_VALUE
    )
    max_value = (
        BigDecimal.of(settings.DEFAULT_MAX_VALUE)
        if settings.DEFAULT_MAX_VALUE is not None
        else DEFAULT_MAX_VALUE
    )

    container.config.from_dict(
        {
            "check_fractions": settings.CHECK_FRACTIONS,
            "use_message_keys": settings.USE_MESSAGE_KEYS,
            "min_decimal_places": settings.DEFAULT_MIN_DECIMAL_PLACES,
            "max_decimal_places": settings.DEFAULT_MAX_DECIMAL_PLACES,
            "max_fractional_places": settings.DEFAULT_MAX_FRACTIONAL_PLACES,
            "min_value": min_value,
            "max_value": max_value,
            "metrics_mode": "enabled" if settings.ENABLE_METRICS else "disabled",
        }
    )

    logger.info(
        "di_container_configured",
        check_fractions=settings.CHECK_FRACTIONS,
        metrics_enabled=settings.ENABLE_METRICS,
    )

    return container
