"""Pipeline builder — turn resolved options into the ordered handler stack."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from hardhat.core.logging import get_logger
from hardhat.core.protocols import DiagnosticSink, Handler, HandlerFactory
from hardhat.pipeline.deprecation import DeprecatedFactory
from hardhat.pipeline.names import HandlerName
from hardhat.pipeline.registry import REGISTRY
from hardhat.pipeline.resolver import ResolvedHandler

logger = get_logger(__name__)


def instantiate(
    entry: ResolvedHandler,
    factory: HandlerFactory,
    sink: DiagnosticSink | None = None,
) -> Handler:
    """Invoke one factory; deprecated factories receive the diagnostic sink."""
    try:
        if isinstance(factory, DeprecatedFactory):
            return factory(entry.config, sink=sink)
        return factory(entry.config)
    except Exception as exc:
        logger.error(
            "handler_factory_failed",
            handler=entry.name.value,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise


def build_stack(
    resolved: Iterable[ResolvedHandler],
    *,
    registry: Mapping[HandlerName, HandlerFactory] = REGISTRY,
    sink: DiagnosticSink | None = None,
) -> tuple[Handler, ...]:
    """Instantiate every resolved handler, preserving resolver order.

    Each factory runs exactly once. Any exception from a factory propagates
    unchanged and no stack is returned.
    """
    stack: list[Handler] = []
    for entry in resolved:
        stack.append(instantiate(entry, registry[entry.name], sink))
    return tuple(stack)
