"""Helpers for reading handler options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import HandlerConfig

_MISSING = object()


def camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def kebab(key: str) -> str:
    """``default_src`` / ``defaultSrc`` → ``default-src``."""
    out: list[str] = []
    for char in key.replace("_", "-"):
        if char.isupper():
            out.append("-")
            out.append(char.lower())
        else:
            out.append(char)
    return "".join(out)


def get_option(config: HandlerConfig, key: str, default: Any = None) -> Any:
    """Read *key* in snake_case, falling back to its camelCase spelling."""
    value = config.get(key, _MISSING)
    if value is _MISSING:
        value = config.get(camel(key), _MISSING)
    return default if value is _MISSING else value


def ensure_mapping(handler: str, config: Any) -> HandlerConfig:
    if not isinstance(config, Mapping):
        raise HandlerConfigError(handler, f"options must be a mapping, got {type(config).__name__}")
    return config


def non_negative_int(handler: str, key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise HandlerConfigError(handler, f"{key} must be a non-negative number", value=value)
    return int(value)
