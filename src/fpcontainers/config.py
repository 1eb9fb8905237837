"""Runtime settings for fpcontainers, read from the environment."""

import os

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    log_level: str = Field(
        "WARNING", description="Level for the package logger (DEBUG ... CRITICAL)."
    )
    warn_on_unsafe_get: bool = Field(
        False,
        description="Log a warning every time Option.get() is called.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{value}'"
            )
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``FPCONTAINERS_*`` environment variables.

        Unset variables fall back to the field defaults. Malformed values
        raise ``pydantic.ValidationError``.
        """
        values = {}
        log_level = os.getenv("FPCONTAINERS_LOG_LEVEL")
        if log_level is not None:
            values["log_level"] = log_level
        warn = os.getenv("FPCONTAINERS_WARN_ON_UNSAFE_GET")
        if warn is not None:
            # pydantic parses "1", "true", "yes", "on" and their negatives
            values["warn_on_unsafe_get"] = warn
        return cls(**values)


settings = Settings.load()
