from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 4.5 km/h
DEFAULT_WALK_SPEED_M_PER_MIN = 75.0
# Alleys and crowds: roughly 3 km/h
DEFAULT_DENSE_REGION_SPEED_MULTIPLIER = 0.7


class Settings(BaseSettings):
    walk_speed_m_per_min: float = Field(
        default=DEFAULT_WALK_SPEED_M_PER_MIN,
        gt=0,
        validation_alias="DAYTRIP_WALK_SPEED_M_PER_MIN",
        description="Average walking speed in meters per minute",
    )
    dense_region_speed_multiplier: float = Field(
        default=DEFAULT_DENSE_REGION_SPEED_MULTIPLIER,
        gt=0,
        le=1,
        validation_alias="DAYTRIP_DENSE_REGION_SPEED_MULTIPLIER",
        description="Walking speed factor inside medina-like regions",
    )
    log_level: str = Field(default="INFO", validation_alias="DAYTRIP_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="DAYTRIP_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DAYTRIP_",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid DAYTRIP_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value


settings = Settings()
