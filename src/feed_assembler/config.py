"""Runtime settings read from the environment.

``.env`` is loaded when the package is imported, so values placed there
are visible here as well.
"""

import os
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "http://localhost:9999/api/slow/"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        DEFAULT_BASE_URL, description="Base address that endpoint paths are appended to"
    )
    connect_timeout: float = Field(
        30.0, gt=0, description="Seconds allowed to establish a connection"
    )
    timeout: float = Field(
        30.0, gt=0, description="Seconds allowed for reads, writes and pool waits"
    )
    log_level: LogLevel = Field("INFO", description="Root log level used by the CLI")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


def load_settings(environ: Mapping[str, str] | None = None, **overrides) -> Settings:
    """Build :class:`Settings` from ``FEED_*`` environment variables.

    Keyword *overrides* that are not ``None`` win over the environment.
    """
    env = os.environ if environ is None else environ
    values = {
        "base_url": env.get("FEED_BASE_URL"),
        "connect_timeout": env.get("FEED_CONNECT_TIMEOUT"),
        "timeout": env.get("FEED_TIMEOUT"),
        "log_level": env.get("FEED_LOG_LEVEL"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**{k: v for k, v in values.items() if v is not None})
