from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="SWIMSTATS_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="SWIMSTATS_LOG_FILE",
        description="Optional path for a rotating log file (console only when unset)",
    )
    default_threshold_percent: float = Field(
        default=3.0,
        validation_alias="SWIMSTATS_DEFAULT_THRESHOLD_PERCENT",
        description="Default 'almost achieved' threshold for new swimmer profiles",
    )
    max_notes_length: int = Field(
        default=1000,
        validation_alias="SWIMSTATS_MAX_NOTES_LENGTH",
        description="Maximum length of free-text notes on a recorded time",
    )
    max_name_length: int = Field(
        default=255,
        validation_alias="SWIMSTATS_MAX_NAME_LENGTH",
        description="Maximum length of swimmer, meet and standard names",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_threshold_percent")
    @classmethod
    def validate_default_threshold(cls, value: float) -> float:
        """Keep the default threshold inside the range swimmer profiles accept."""
        if value < 0 or value > 100:
            logger.warning(f"Invalid DEFAULT_THRESHOLD_PERCENT {value}. Must be between 0 and 100. Defaulting to 3.0.")
            return 3.0
        return value


settings = Settings()
