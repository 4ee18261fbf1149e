"""Configuration models for the subosity-rrule command line."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")
    color: bool = Field(default=True)
    detailed: bool = Field(default=False, description="Use detailed descriptions")


class CalendarConfig(BaseModel):
    """Occurrence and projection settings."""

    search_horizon_years: int = Field(
        default=10, ge=1, description="How far next-occurrence lookups search"
    )
    upcoming_limit: int = Field(default=10, ge=1)


class LoggingConfig(BaseModel):
    """Log file settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Lowest level written to the log file"
    )


class AppConfig(BaseModel):
    """Main subosity-rrule configuration"""

    output: OutputConfig = Field(default_factory=OutputConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
