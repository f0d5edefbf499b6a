"""
Structured error types for the hardhat pipeline.

Every error raised by hardhat extends :class:`HardhatError` so callers can
catch the whole family at once, while the subclasses tell configuration
problems apart from pipeline wiring problems.

Manifesto:
    - **Typed Error Hierarchy:** Different error types for different failures
    - **Fail at construction:** Configuration and wiring errors surface when the
      pipeline is built, never halfway through a request
    - **Rich Context:** Errors carry the handler name and offending value for
      logging

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                      HardhatError                         │
        │               (category, context dict)                    │
        ├──────────────────────────────────────────────────────────┤
        │                                                           │
        │   ConfigError (CONFIG)          PipelineError (PIPELINE)  │
        │        │                              │                   │
        │   InvalidOptionError            PipelineMisuseError       │
        │   HandlerConfigError            RegistryError             │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidOptionError("frameguard", 42)
    >>> error.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> error.context["handler"]
    'frameguard'

Tags:
    error-handling, exception-hierarchy, error-context, hardhat

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for classification in logs and responses."""

    CONFIG = "CONFIG"             # Invalid options, bad handler configuration
    PIPELINE = "PIPELINE"         # Wiring mistakes, registry problems
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


class HardhatError(Exception):
    """
    Base exception for all hardhat errors.

    Subclasses set ``default_category``; extra keyword arguments given at
    construction land in :attr:`context` and are included by :meth:`to_dict`.

    Examples:
        >>> error = HardhatError("Something went wrong", handler="hsts")
        >>> error.to_dict()["context"]
        {'handler': 'hsts'}
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: Exception | None = None,
        **context: Any,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context)
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> HardhatError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = repr(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(HardhatError):
    """Pipeline or handler configuration is invalid."""

    default_category = ErrorCategory.CONFIG


class InvalidOptionError(ConfigError):
    """A handler setting is neither omitted, a boolean, nor a mapping."""

    def __init__(self, handler: str, value: Any):
        super().__init__(
            f"Invalid setting for {handler!r}: expected True, False, None or a "
            f"mapping of options, got {type(value).__name__}",
            handler=handler,
            value_type=type(value).__name__,
        )
        self.handler = handler
        self.value = value


class DuplicateOptionError(ConfigError):
    """One handler was configured under more than one key."""

    def __init__(self, handler: str, keys: list[str]):
        super().__init__(
            f"Handler {handler!r} is configured more than once: {', '.join(keys)}",
            handler=handler,
            keys=keys,
        )
        self.handler = handler
        self.keys = keys


class HandlerConfigError(ConfigError):
    """A handler factory rejected the options it was given."""

    def __init__(self, handler: str, message: str, **context: Any):
        super().__init__(f"{handler}: {message}", handler=handler, **context)
        self.handler = handler


# =============================================================================
# PIPELINE ERRORS
# =============================================================================


class PipelineError(HardhatError):
    """The pipeline was wired or invoked incorrectly."""

    default_category = ErrorCategory.PIPELINE


class PipelineMisuseError(PipelineError):
    """The pipeline constructor was used where a built pipeline was expected."""


class RegistryError(PipelineError):
    """A handler registry does not cover every handler name exactly."""


__all__ = [
    "ErrorCategory",
    "HardhatError",
    "ConfigError",
    "InvalidOptionError",
    "DuplicateOptionError",
    "HandlerConfigError",
    "PipelineError",
    "PipelineMisuseError",
    "RegistryError",
]
