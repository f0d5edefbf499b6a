"""Option resolution — decide which handlers run and with what options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hardhat.core.errors import InvalidOptionError
from hardhat.core.protocols import HandlerConfig
from hardhat.pipeline.names import DEFAULT_HANDLERS, HANDLER_ORDER, HandlerName
from hardhat.pipeline.options import HandlerSetting, HardhatOptions


@dataclass(frozen=True)
class ResolvedHandler:
    """A handler selected for the pipeline together with its effective options."""

    name: HandlerName
    config: HandlerConfig


def coerce_options(options: HardhatOptions | Mapping[Any, Any] | None) -> HardhatOptions:
    """Normalise the accepted option inputs to :class:`HardhatOptions`."""
    if options is None:
        return HardhatOptions()
    if isinstance(options, HardhatOptions):
        return options
    if isinstance(options, Mapping):
        return HardhatOptions.from_mapping(options)
    raise InvalidOptionError("options", options)


def resolve_setting(name: HandlerName, setting: HandlerSetting) -> HandlerConfig | None:
    """Return the effective options for one handler, or ``None`` if it is excluded.

    ``bool`` is checked before anything else: ``True``/``False`` are the
    only accepted scalars, and a mapping is forwarded as the same object.
    """
    if setting is False:
        return None
    if setting is True:
        return {}
    if isinstance(setting, Mapping):
        return setting
    if setting is None:
        return {} if name in DEFAULT_HANDLERS else None
    raise InvalidOptionError(name.value, setting)


def resolve_options(
    options: HardhatOptions | Mapping[Any, Any] | None = None,
) -> tuple[ResolvedHandler, ...]:
    """Resolve *options* into the ordered list of enabled handlers.

    The result follows :data:`HANDLER_ORDER` regardless of how the caller
    ordered its keys.

    Raises:
        InvalidOptionError: A setting is not ``None``, a bool, or a mapping.
    """
    opts = coerce_options(options)
    resolved: list[ResolvedHandler] = []
    for name in HANDLER_ORDER:
        config = resolve_setting(name, opts.setting(name))
        if config is not None:
            resolved.append(ResolvedHandler(name=name, config=config))
    return tuple(resolved)
