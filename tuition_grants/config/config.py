"""Configuration management for the tuition grant console."""

from typing import Optional
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings


ENV_PREFIX = "TUITION_GRANTS_"
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Config(BaseSettings):
    """Application configuration from environment variables.

    Every setting has a default; an empty environment reproduces the
    stock console behaviour.
    """

    # Store
    max_applications: int = 5000
    application_number_offset: int = 1000
    application_number_prefix: str = "UL"

    # Entry validation
    shortfall_cap: float = 50000.0
    enforce_shortfall_cap: bool = True

    # Scoring
    thresholds_file: Optional[str] = None

    # Console
    clear_screen: bool = True
    use_color: bool = True
    log_level: str = "WARNING"

    model_config = {"env_prefix": ENV_PREFIX, "env_file": ".env", "case_sensitive": False}

    @field_validator('max_applications')
    @classmethod
    def capacity_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_applications must be at least 1, got {v}")
        return v

    @field_validator('application_number_offset')
    @classmethod
    def offset_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"application_number_offset must not be negative, got {v}")
        return v

    @field_validator('shortfall_cap')
    @classmethod
    def cap_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"shortfall_cap must not be negative, got {v}")
        return v

    @field_validator('log_level')
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_shortfall_cap(self) -> Optional[float]:
        """Upper bound applied at entry, or None when uncapped."""
        return self.shortfall_cap if self.enforce_shortfall_cap else None


def validate_config(**overrides) -> Config:
    """Load and validate configuration from environment.

    Raises ValueError with descriptive message listing ALL invalid
    settings (not just the first one).
    """
    try:
        return Config(**overrides)
    except ValidationError as exc:
        invalid = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            invalid.append(f"{ENV_PREFIX}{field.upper()} ({error['msg']})")
        names = "; ".join(invalid)
        raise ValueError(
            f"Invalid configuration: {names}. "
            "Please fix them in your .env file or environment."
        ) from exc


def load_config(**overrides) -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config(**overrides)
