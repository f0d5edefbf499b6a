"""Fail fast when the pipeline constructor is used as if it were a handler."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starlette.requests import HTTPConnection

from hardhat.core.errors import PipelineMisuseError
from hardhat.core.protocols import Request

MISUSE_MESSAGE = (
    "It appears you have done something like `use(create_pipeline)`, "
    "but it should be `use(create_pipeline())`."
)


def looks_like_request(value: Any) -> bool:
    """True for request objects, which are never valid pipeline options."""
    if isinstance(value, HTTPConnection):
        return True
    if value is None or isinstance(value, Mapping):
        return False
    return isinstance(value, Request)


def ensure_not_request(options: Any, extra_args: tuple[Any, ...] = ()) -> None:
    """Raise :class:`PipelineMisuseError` for the ``(request, response, next)`` call shape."""
    if extra_args or looks_like_request(options):
        raise PipelineMisuseError(
            MISUSE_MESSAGE,
            received=type(options).__name__,
            extra_args=len(extra_args),
        )
