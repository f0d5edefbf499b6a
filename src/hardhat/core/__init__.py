"""Hardhat Core -- cross-cutting primitives shared by the pipeline and adapters.

Architecture::

    errors.py      Structured error hierarchy (HardhatError, ConfigError, ...)
    protocols.py   Handler contract types (Request, Response, Handler, ...)
    logging.py     Structured logging (structlog)
    settings.py    HardhatSettings (pydantic-settings)
"""

from hardhat.core.errors import (
    ConfigError,
    ErrorCategory,
    HandlerConfigError,
    HardhatError,
    DuplicateOptionError,
    InvalidOptionError,
    PipelineError,
    PipelineMisuseError,
    RegistryError,
)
from hardhat.core.logging import configure_from_settings, configure_logging, get_logger
from hardhat.core.settings import HardhatSettings, get_settings

__all__ = [
    "ConfigError",
    "ErrorCategory",
    "HandlerConfigError",
    "HardhatError",
    "DuplicateOptionError",
    "InvalidOptionError",
    "PipelineError",
    "PipelineMisuseError",
    "RegistryError",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "HardhatSettings",
    "get_settings",
]
