"""
Pipeline executor — run the handler stack for one request.

Manifesto:
    Each handler decides when the next one runs by calling its continuation.
    That lets a handler finish synchronously or hand control back later from
    a scheduled callback; the executor makes no assumption either way.

Architecture:
    ::

        pipeline(request, response, next)
            │
            ▼
        step() ──► handlers[0](request, response, step)
                        │ step()
                        ▼
                   handlers[1](request, response, step)
                        │ step(error)          │ step()
                        ▼                      ▼
                   next(error)       ... handlers[n-1] ──► next()

Guardrails:
    - The cursor lives in the closure of one call; concurrent requests never
      share it.
    - The handler tuple is never mutated after construction.
    - Handler exceptions propagate; a handler that never calls its
      continuation stalls only its own request.

Tags:
    hardhat, pipeline, executor, continuation-passing, middleware

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hardhat.core.logging import get_logger
from hardhat.core.protocols import Continuation, Handler
from hardhat.pipeline.names import HandlerName

logger = get_logger(__name__)


class Pipeline:
    """An ordered stack of handlers exposed as one aggregate handler.

    Parameters
    ----------
    names:
        Handler names, parallel to *handlers*.
    handlers:
        Instantiated handlers in execution order.
    """

    __slots__ = ("_names", "_handlers")

    def __init__(self, names: Sequence[HandlerName], handlers: Sequence[Handler]) -> None:
        if len(names) != len(handlers):
            raise ValueError("names and handlers must have the same length")
        self._names: tuple[HandlerName, ...] = tuple(names)
        self._handlers: tuple[Handler, ...] = tuple(handlers)

    @property
    def names(self) -> tuple[HandlerName, ...]:
        return self._names

    @property
    def handlers(self) -> tuple[Handler, ...]:
        return self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, name: object) -> bool:
        resolved = HandlerName.lookup(name)
        return resolved is not None and resolved in self._names

    def __repr__(self) -> str:
        return f"Pipeline([{', '.join(name.value for name in self._names)}])"

    def __call__(self, request: Any, response: Any, next: Continuation) -> None:
        handlers = self._handlers
        names = self._names
        index = 0

        def step(*args: Any) -> None:
            nonlocal index
            if args:
                logger.debug(
                    "pipeline_short_circuit",
                    handler=names[index - 1].value if index else None,
                    position=index - 1,
                )
                next(*args)
                return

            if index >= len(handlers):
                next()
                return

            handler = handlers[index]
            index += 1
            handler(request, response, step)

        step()
