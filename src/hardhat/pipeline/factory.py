"""Pipeline constructor — the single composition root for a header pipeline.

Usage::

    from hardhat import create_pipeline

    pipeline = create_pipeline({"frameguard": {"action": "deny"}, "hsts": False})
    pipeline(request, response, next)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hardhat.core.logging import get_logger
from hardhat.core.protocols import DiagnosticSink, HandlerFactory
from hardhat.pipeline.builder import build_stack
from hardhat.pipeline.deprecation import OncePerPipelineSink, warn_deprecated
from hardhat.pipeline.executor import Pipeline
from hardhat.pipeline.guard import ensure_not_request
from hardhat.pipeline.names import HandlerName
from hardhat.pipeline.options import HardhatOptions
from hardhat.pipeline.registry import REGISTRY, validate_registry
from hardhat.pipeline.resolver import resolve_options

logger = get_logger(__name__)


def create_pipeline(
    options: HardhatOptions | Mapping[Any, Any] | None = None,
    *extra: Any,
    sink: DiagnosticSink | None = None,
    registry: Mapping[HandlerName, HandlerFactory] | None = None,
) -> Pipeline:
    """Build a pipeline from *options*.

    Parameters
    ----------
    options : HardhatOptions | Mapping | None
        Per-handler settings. ``None`` enables the default handler set.
    sink : DiagnosticSink | None
        Receives deprecation messages. Defaults to :func:`warn_deprecated`.
        Each distinct message is delivered at most once per pipeline.
    registry : Mapping | None
        Override the handler table (must be exhaustive). Defaults to
        :data:`~hardhat.pipeline.registry.REGISTRY`.

    Raises
    ------
    PipelineMisuseError
        The function itself was called as a handler.
    InvalidOptionError
        A setting has an unsupported shape.
    Exception
        Anything a handler factory raises, unchanged.
    """
    ensure_not_request(options, extra)

    if registry is None:
        registry = REGISTRY
    else:
        validate_registry(registry)

    resolved = resolve_options(options)
    scoped_sink = OncePerPipelineSink(sink if sink is not None else warn_deprecated)
    stack = build_stack(resolved, registry=registry, sink=scoped_sink)
    pipeline = Pipeline([entry.name for entry in resolved], stack)

    logger.debug("pipeline_built", handlers=[name.value for name in pipeline.names])
    return pipeline
