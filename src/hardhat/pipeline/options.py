"""
Typed pipeline options — one explicit field per handler.

Each field holds a :data:`HandlerSetting`:

- ``None``     the handler is left at its default (on for the default set)
- ``False``    the handler is disabled
- ``True``     the handler is enabled with empty options
- a mapping    the handler is enabled with exactly these options

Plain mappings keyed by handler name (snake_case or camelCase) convert via
:meth:`HardhatOptions.from_mapping`; unknown keys are dropped, and giving one
handler under two spellings is an error.

Tags:
    hardhat, pipeline, options, configuration

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Union

from hardhat.core.errors import DuplicateOptionError
from hardhat.core.logging import get_logger
from hardhat.pipeline.names import HandlerName

logger = get_logger(__name__)

HandlerSetting = Union[bool, Mapping[str, Any], None]


@dataclass(frozen=True)
class HardhatOptions:
    """Per-handler settings. Field names match :class:`HandlerName` values."""

    content_security_policy: HandlerSetting = None
    dns_prefetch_control: HandlerSetting = None
    expect_ct: HandlerSetting = None
    feature_policy: HandlerSetting = None
    frameguard: HandlerSetting = None
    hide_powered_by: HandlerSetting = None
    hsts: HandlerSetting = None
    ie_no_open: HandlerSetting = None
    no_sniff: HandlerSetting = None
    permitted_cross_domain_policies: HandlerSetting = None
    referrer_policy: HandlerSetting = None
    xss_filter: HandlerSetting = None
    hpkp: HandlerSetting = None
    no_cache: HandlerSetting = None

    def setting(self, name: HandlerName) -> HandlerSetting:
        """Return the setting for *name*."""
        return getattr(self, name.value)

    @classmethod
    def from_mapping(cls, options: Mapping[Any, Any]) -> HardhatOptions:
        """Build options from a mapping keyed by handler name or alias.

        Values are kept as given; shape checks happen in the resolver.

        Raises:
            DuplicateOptionError: Two keys name the same handler.
        """
        values: dict[str, Any] = {}
        keys: dict[str, str] = {}
        for key, value in options.items():
            name = HandlerName.lookup(key)
            if name is None:
                logger.debug("option_ignored", key=str(key))
                continue
            label = key.value if isinstance(key, HandlerName) else str(key)
            if name.value in values:
                raise DuplicateOptionError(name.value, [keys[name.value], label])
            keys[name.value] = label
            values[name.value] = value
        return cls(**values)


# Every handler has a field, and nothing else does.
assert [f.name for f in fields(HardhatOptions)] == [n.value for n in HandlerName]
