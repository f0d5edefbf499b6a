"""Pipeline composition and execution.

Architecture::

    names.py        HandlerName order + default set
    options.py      HardhatOptions (one typed setting per handler)
    resolver.py     options → ordered (name, config) list
    registry.py     static name → factory table
    deprecation.py  deprecate(), diagnostic sinks
    builder.py      resolved list → handler stack
    executor.py     Pipeline: runs the stack per request
    guard.py        constructor misuse check
    factory.py      create_pipeline()
"""

from hardhat.pipeline.deprecation import (
    DeprecatedFactory,
    OncePerPipelineSink,
    deprecate,
    warn_deprecated,
)
from hardhat.pipeline.executor import Pipeline
from hardhat.pipeline.factory import create_pipeline
from hardhat.pipeline.names import DEFAULT_HANDLERS, HANDLER_ORDER, HandlerName
from hardhat.pipeline.options import HandlerSetting, HardhatOptions
from hardhat.pipeline.registry import REGISTRY, get_factory
from hardhat.pipeline.resolver import ResolvedHandler, resolve_options

__all__ = [
    "DEFAULT_HANDLERS",
    "HANDLER_ORDER",
    "REGISTRY",
    "DeprecatedFactory",
    "HandlerName",
    "HandlerSetting",
    "HardhatOptions",
    "OncePerPipelineSink",
    "Pipeline",
    "ResolvedHandler",
    "create_pipeline",
    "deprecate",
    "get_factory",
    "resolve_options",
    "warn_deprecated",
]
