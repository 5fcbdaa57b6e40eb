"""Runtime settings. Defaults can be overridden through environment variables (and the log level from the command line)."""

import codecs
import os
from typing import Any, Self

from pydantic import BaseModel, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
ENV_PREFIX = "FEN_PRINTER_"


class PrinterSettings(BaseModel):
    log_level: str = "WARNING"
    show_source_name: bool = True
    # utf-8-sig also reads plain utf-8, and drops the byte order mark some editors put in front
    encoding: str = "utf-8-sig"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding {value!r}")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> Self:
        """
        Settings from the environment, with `overrides` (e.g. from command line flags) taking precedence.
        Only the variables that are set are passed on, so unset ones fall back to the defaults above.
        """
        values = {
            name: os.environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in os.environ
        }
        values.update(overrides)
        return cls(**values)
