"""Strict-Transport-Security: keep browsers on HTTPS."""

from __future__ import annotations

from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option, non_negative_int

HEADER = "Strict-Transport-Security"

DEFAULT_MAX_AGE = 180 * 24 * 60 * 60


def _header_value(config: HandlerConfig) -> str:
    max_age = non_negative_int("hsts", "max_age", get_option(config, "max_age", DEFAULT_MAX_AGE))
    parts = [f"max-age={max_age}"]
    if get_option(config, "include_sub_domains", True):
        parts.append("includeSubDomains")
    if get_option(config, "preload", False):
        parts.append("preload")
    return "; ".join(parts)


def hsts(config: HandlerConfig) -> Handler:
    value = _header_value(ensure_mapping("hsts", config))

    def hsts_handler(request, response, next):
        response.headers[HEADER] = value
        next()

    return hsts_handler
