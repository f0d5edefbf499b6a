"""Expect-CT: ask browsers to enforce Certificate Transparency."""

from __future__ import annotations

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option, non_negative_int

HEADER = "Expect-CT"


def _header_value(config: HandlerConfig) -> str:
    max_age = non_negative_int("expect_ct", "max_age", get_option(config, "max_age", 0))
    parts = [f"max-age={max_age}"]
    if get_option(config, "enforce", False):
        parts.append("enforce")

    report_uri = get_option(config, "report_uri")
    if report_uri is not None:
        if not isinstance(report_uri, str) or not report_uri:
            raise HandlerConfigError("expect_ct", "report_uri must be a non-empty string")
        parts.append(f'report-uri="{report_uri}"')
    return ", ".join(parts)


def expect_ct(config: HandlerConfig) -> Handler:
    value = _header_value(ensure_mapping("expect_ct", config))

    def expect_ct_handler(request, response, next):
        response.headers[HEADER] = value
        next()

    return expect_ct_handler
