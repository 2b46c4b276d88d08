"""
Runtime settings read from the environment.

    LOG_LEVEL                      DEBUG | INFO | WARNING | ERROR | CRITICAL
    LOG_FORMAT                     json | text
    DATETIME_CONSTRAINTS_FORMATS   comma separated database formats to enable
"""

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_FORMATS = ("mysql", "pg")


class Settings(BaseModel):
    """
    Process-wide settings.

    Attributes:
        log_level: Log level name
        log_format: "json" for structured output, "text" for local development
        enabled_formats: Database formats the database rules may use
    """

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    enabled_formats: list[str] = Field(default_factory=lambda: list(DEFAULT_FORMATS))

    @field_validator("enabled_formats", mode="before")
    @classmethod
    def split_formats(cls, v):
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return [name.strip().lower() for name in v.split(",") if name.strip()]
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "log_level": "DEBUG",
                "log_format": "text",
                "enabled_formats": ["mysql"]
            }
        }


def load_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    values = {}
    if os.getenv("LOG_LEVEL"):
        values["log_level"] = os.environ["LOG_LEVEL"]
    if os.getenv("LOG_FORMAT"):
        values["log_format"] = os.environ["LOG_FORMAT"].lower()
    if os.getenv("DATETIME_CONSTRAINTS_FORMATS") is not None:
        values["enabled_formats"] = os.environ["DATETIME_CONSTRAINTS_FORMATS"]
    return Settings(**values)
