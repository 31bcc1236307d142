"""
Configuration models for pricestats.

Pydantic models providing validation and defaults for the logging and
display settings used by the command-line front end.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pricestats.constants import (
    DEFAULT_AVERAGE_PRECISION,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    ISO_DATE_FORMAT,
    MAX_AVERAGE_PRECISION,
    MIN_LOG_FILE_SIZE_BYTES,
)


# Formats without a year, month or day would collapse distinct dates.
REQUIRED_DATE_DIRECTIVES = (("%Y", "%y"), ("%m", "%b", "%B"), ("%d",))


def check_date_format(date_format: str) -> str:
    """Reject strptime formats that cannot tell two calendar days apart."""
    for directives in REQUIRED_DATE_DIRECTIVES:
        if not any(directive in date_format for directive in directives):
            raise ValueError("date_format must include year, month and day directives")
    return date_format


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = {"extra": "forbid"}

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class GeneralConfig(BaseModel):
    """General application configuration."""

    model_config = {"extra": "forbid"}

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging configuration"
    )
    date_format: str = Field(
        ISO_DATE_FORMAT,
        description="strptime format of dates given on the command line",
    )

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        return check_date_format(v)


class DisplayConfig(BaseModel):
    """Report rendering configuration."""

    model_config = {"extra": "forbid"}

    currency_symbol: str = Field("", description="Prefix printed before prices")
    average_precision: int = Field(
        DEFAULT_AVERAGE_PRECISION,
        ge=0,
        le=MAX_AVERAGE_PRECISION,
        description="Decimal places shown for the average price",
    )


class PriceStatsConfig(BaseModel):
    """Main pricestats configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class PriceStatsSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    pricestats_log_level: Optional[str] = Field(None, alias="PRICESTATS_LOG_LEVEL")
    pricestats_log_format: Optional[str] = Field(None, alias="PRICESTATS_LOG_FORMAT")
    pricestats_date_format: Optional[str] = Field(
        None, alias="PRICESTATS_DATE_FORMAT"
    )
    pricestats_currency_symbol: Optional[str] = Field(
        None, alias="PRICESTATS_CURRENCY_SYMBOL"
    )
    pricestats_average_precision: Optional[int] = Field(
        None, alias="PRICESTATS_AVERAGE_PRECISION"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
