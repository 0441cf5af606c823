"""
Library configuration module.
Loads environment variables and provides library-wide settings.
"""
import decimal
from pathlib import Path

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

# Get project root (one level up from the package)
PROJECT_ROOT = Path(__file__).parent.parent

# Below this the decimal backend loses digits in chained operations
MIN_DECIMAL_PRECISION = 20

# Rounding constants exposed by the decimal module (ROUND_HALF_UP, ROUND_DOWN, ...)
DECIMAL_ROUNDING_MODES = frozenset(name for name in dir(decimal) if name.startswith("ROUND_"))


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables or .env file.
    (Note: Environment variables take precedence over .env file)

    Every variable is read with the AHUTILS_ prefix, e.g. AHUTILS_DECIMAL_PRECISION=28.
    """
    # Decimal arithmetic backend
    DECIMAL_PRECISION: int = MIN_DECIMAL_PRECISION  # Significant digits kept by intermediate results
    DECIMAL_ROUNDING: str = "ROUND_HALF_UP"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    model_config = ConfigDict(
        env_prefix="AHUTILS_",
        env_file=str(PROJECT_ROOT / ".env"),
        case_sensitive=True,
        env_file_encoding='utf-8',
        extra='ignore'
        )

    @field_validator("DECIMAL_PRECISION")
    @classmethod
    def _check_precision(cls, value: int) -> int:
        if value < MIN_DECIMAL_PRECISION:
            raise ValueError(f"DECIMAL_PRECISION must be >= {MIN_DECIMAL_PRECISION}, got {value}")
        return value

    @field_validator("DECIMAL_ROUNDING")
    @classmethod
    def _check_rounding(cls, value: str) -> str:
        value = value.upper()
        if value not in DECIMAL_ROUNDING_MODES:
            raise ValueError(
                f"DECIMAL_ROUNDING must be one of {sorted(DECIMAL_ROUNDING_MODES)}, got {value!r}"
                )
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {value!r}")
        return value


def get_settings() -> Settings:
    """
    Get settings instance.

    A fresh instance is built on every call so that environment changes
    (e.g. monkeypatched variables in tests) are picked up.

    Returns:
        Settings: Library settings
    """
    return Settings()
