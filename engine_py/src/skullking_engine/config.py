"""
Application settings.
"""

import os

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ('critical', 'error', 'warning', 'info', 'debug')


class AppConfig(BaseModel):
    """Settings for the Dash UI and the JSON API."""

    host: str = Field(
        default="0.0.0.0",
        description="Interface to bind"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the JSON API"
    )
    dash_port: int = Field(
        default=8050,
        ge=1,
        le=65535,
        description="Port for the Dash UI"
    )
    debug: bool = Field(
        default=False,
        description="Run the Dash server in debug mode"
    )
    reload: bool = Field(
        default=False,
        description="Auto-reload the API server on code changes"
    )
    log_level: str = Field(
        default="info",
        description="Logging level name"
    )
    graph_height: int = Field(
        default=320,
        ge=160,
        le=1200,
        description="Score graph height in pixels"
    )
    max_sessions: int = Field(
        default=1000,
        ge=1,
        description="Sessions kept in memory before the oldest is dropped"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and check the logging level name."""
        level = v.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f'log_level must be one of {", ".join(LOG_LEVELS)}')
        return level

    @property
    def logging_level(self) -> str:
        return self.log_level.upper()


def load_config(prefix: str = "SKULLKING_", **overrides) -> AppConfig:
    """Build an AppConfig from environment variables, then apply overrides."""
    values = {}
    for name in AppConfig.model_fields:
        raw = os.getenv(f"{prefix}{name.upper()}")
        if raw is not None:
            values[name] = raw
    values.update(overrides)
    return AppConfig(**values)
