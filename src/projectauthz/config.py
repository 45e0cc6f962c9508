"""Configuration contract for the project authorization engine.

The engine itself is stateless and takes no configuration; these settings
govern the ambient concerns around it (log level, structured output, secret
redaction). Direct os.environ/os.getenv usage is confined to
:func:`load_config_from_env`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AuthzConfig(BaseModel):
    """Settings shared by every process that embeds the engine."""

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    redact_secrets: bool = Field(
        default=True,
        description="Strip credentials embedded in repository URLs from log output",
    )
    service_name: Optional[str] = Field(
        default=None,
        description="Name of the embedding service (e.g. 'admission-webhook')",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
    }


def _env_flag(value: str) -> bool:
    return value.lower() in ("true", "1", "yes", "on")


def load_config_from_env() -> AuthzConfig:
    """Load configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - LOG_REDACT_SECRETS: Redact repository credentials (default: true)
    - SERVICE_NAME: Name of the embedding service

    Returns:
        AuthzConfig instance with values from environment or defaults.
    """
    import os

    return AuthzConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=_env_flag(os.getenv("LOG_JSON", "false")),
        redact_secrets=_env_flag(os.getenv("LOG_REDACT_SECRETS", "true")),
        service_name=os.getenv("SERVICE_NAME"),
    )


__all__ = [
    "AuthzConfig",
    "LogLevel",
    "load_config_from_env",
]
