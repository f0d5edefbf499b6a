"""
Deprecation wrapping for handler factories.

A wrapped factory behaves exactly like the original but reports a message to
a diagnostic sink every time it is invoked. Factories are invoked once per
pipeline construction, so the message appears when a pipeline is built with
the handler enabled, never per request.

Manifesto:
    Superseded handlers keep working until they are removed. Users get told,
    once per pipeline, and nothing about the handler's output changes.

Examples:
    >>> messages = []
    >>> legacy = deprecate(lambda config: handler, "legacy is deprecated")
    >>> legacy({}, sink=messages.append) is handler
    True
    >>> messages
    ['legacy is deprecated']

Tags:
    hardhat, pipeline, deprecation, diagnostics

Doc-Types:
    api-reference
"""

from __future__ import annotations

import warnings

from hardhat.core.logging import get_logger
from hardhat.core.protocols import DiagnosticSink, Handler, HandlerConfig, HandlerFactory
from hardhat.core.settings import get_settings

logger = get_logger(__name__)


def warn_deprecated(message: str) -> None:
    """Default sink: structured log line plus a ``DeprecationWarning``."""
    if not get_settings().emit_deprecations:
        return
    logger.warning("handler_deprecated", message=message)
    warnings.warn(message, DeprecationWarning, stacklevel=4)


class OncePerPipelineSink:
    """Forward each distinct message to *sink* at most once.

    One instance is created per pipeline construction, so dedupe never
    leaks across pipelines.
    """

    def __init__(self, sink: DiagnosticSink) -> None:
        self._sink = sink
        self._seen: set[str] = set()

    def __call__(self, message: str) -> None:
        if message in self._seen:
            return
        self._seen.add(message)
        self._sink(message)


class DeprecatedFactory:
    """A handler factory that reports a deprecation message when invoked."""

    def __init__(self, factory: HandlerFactory, message: str) -> None:
        self.factory = factory
        self.message = message
        self.__name__ = getattr(factory, "__name__", type(factory).__name__)
        self.__doc__ = getattr(factory, "__doc__", None)

    def __call__(self, config: HandlerConfig, *, sink: DiagnosticSink | None = None) -> Handler:
        emit = sink if sink is not None else warn_deprecated
        try:
            emit(self.message)
        except Exception:
            logger.exception("deprecation_sink_failed", factory=self.__name__)
        return self.factory(config)

    def __repr__(self) -> str:
        return f"DeprecatedFactory({self.__name__})"


def deprecate(factory: HandlerFactory, message: str) -> DeprecatedFactory:
    """Wrap *factory* so each invocation reports *message* first."""
    return DeprecatedFactory(factory, message)
