from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    ENABLE_METRICS: bool = Field(
        default=False,
        description="Should metrics collection be enabled?",
    )

    METRICS_TEXTFILE: Optional[str] = Field(
        default=None,
        description="Write collected metrics to this file for the node exporter textfile collector",
        examples=["/var/lib/node_exporter/textfile/decimal_validator.prom"],
    )

    CHECK_FRACTIONS: bool = Field(
        default=True,
        description="Check fractional digits; when disabled values are truncated to their integer part",
    )

    USE_MESSAGE_KEYS: bool = Field(
        default=False,
        description="Report message template keys instead of literal failure messages",
    )

    DEFAULT_MIN_DECIMAL_PLACES: int = Field(
        default=1,
        ge=0,
        description="Minimum count of digits before the point",
    )

    DEFAULT_MAX_DECIMAL_PLACES: int = Field(
        default=10,
        ge=1,
        description="Maximum count of digits before the point",
    )

    DEFAULT_MAX_FRACTIONAL_PLACES: int = Field(
        default=2,
        ge=0,
        description="Maximum count of digits after the point",
    )

    DEFAULT_MIN_VALUE: Optional[Decimal] = Field(
        default=None,
        description="Smallest accepted value, unset means the most negative double",
        examples=["0", "-1000.50"],
    )

    DEFAULT_MAX_VALUE: Optional[Decimal] = Field(
        default=None,
        description="Largest accepted value, unset means the largest double",
        examples=["5684.23"],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("DEFAULT_MIN_VALUE", "DEFAULT_MAX_VALUE")
    @classmethod
    def validate_finite(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        if value is not None and not value.is_finite():
            raise ValueError(f"Value bounds must be finite: {value}")
        return value

    @model_validator(mode="after")
    def validate_bound_relationships(self) -> "Settings":
        if self.DEFAULT_MIN_DECIMAL_PLACES > self.DEFAULT_MAX_DECIMAL_PLACES:
            raise ValueError(
                f"DEFAULT_MIN_DECIMAL_PLACES ({self.DEFAULT_MIN_DECIMAL_PLACES}) "
                f"should not be greater than DEFAULT_MAX_DECIMAL_PLACES ({self.DEFAULT_MAX_DECIMAL_PLACES})"
            )

        if (
            self.DEFAULT_MIN_VALUE is not None
            and self.DEFAULT_MAX_VALUE is not None
            and self.DEFAULT_MIN_VALUE > self.DEFAULT_MAX_VALUE
        ):
            raise ValueError(
                f"DEFAULT_MIN_VALUE ({self.DEFAULT_MIN_VALUE}) "
                f"should not be greater than DEFAULT_MAX_VALUE ({self.DEFAULT_MAX_VALUE})"
            )

        return self


@lru_cache()
def get_settings() -> Settings:
    from decimal_validator.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
