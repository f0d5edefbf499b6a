"""Environment-driven settings for hardhat.

Order of precedence (highest → lowest):
    1. Environment variables (``HARDHAT_DEBUG``, ``HARDHAT_LOG_LEVEL``, ...)
    2. ``.env`` file
    3. Defaults below

Fields
──────
debug              : Include error details in short-circuit problem responses
log_level          : Structlog log level
log_json           : JSON logs (True), console logs (False), auto by TTY (None)
service_name       : ``service.name`` field on every log line
emit_deprecations  : Let the default sink warn about deprecated handlers
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HardhatSettings(BaseSettings):
    """Settings shared by the pipeline and the ASGI adapter."""

    model_config = SettingsConfigDict(
        env_prefix="HARDHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    debug: bool = Field(default=False, description="Expose error details in responses")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool | None = Field(default=None, description="JSON log output; None = auto")
    service_name: str = Field(default="hardhat", description="Service name in logs")

    # ── Deprecations ─────────────────────────────────────────────
    emit_deprecations: bool = Field(
        default=True,
        description="Warn when a deprecated handler is enabled",
    )


@lru_cache(maxsize=1)
def get_settings() -> HardhatSettings:
    """Cached settings — loaded once per process."""
    return HardhatSettings()
