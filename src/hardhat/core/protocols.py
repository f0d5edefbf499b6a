"""
Structural types for the handler contract.

Manifesto:
    Handlers only need a few things from the transport: request headers to
    read, response headers to write, and a continuation to call. Declaring
    these as protocols lets Starlette objects and plain test doubles both
    satisfy the contract without adapters.

Tags:
    hardhat, protocols, handler-contract, typing

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Request(Protocol):
    """The request side of a handler call."""

    @property
    def method(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...


class Response(Protocol):
    """The response side of a handler call; handlers write its headers."""

    @property
    def headers(self) -> MutableMapping[str, str]: ...


class Continuation(Protocol):
    """Called with no arguments to proceed, with arguments to abort."""

    def __call__(self, *args: Any) -> None: ...


HandlerConfig = Mapping[str, Any]
"""Options for a single handler; the handler owns its shape."""

Handler = Callable[[Request, Response, Continuation], None]
"""``handler(request, response, next)``."""

HandlerFactory = Callable[[HandlerConfig], Handler]
"""``factory(config) -> handler``."""

DiagnosticSink = Callable[[str], None]
"""Receives one-line diagnostic messages (deprecations)."""


__all__ = [
    "Request",
    "Response",
    "Continuation",
    "Handler",
    "HandlerConfig",
    "HandlerFactory",
    "DiagnosticSink",
]
