"""Public-Key-Pins: pin the server's public keys.

Browsers dropped HPKP support; registered as a deprecated handler.
"""

from __future__ import annotations

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADER = "Public-Key-Pins"
REPORT_ONLY_HEADER = "Public-Key-Pins-Report-Only"


def _header_value(config: HandlerConfig) -> str:
    max_age = get_option(config, "max_age")
    if isinstance(max_age, bool) or not isinstance(max_age, (int, float)) or max_age <= 0:
        raise HandlerConfigError("hpkp", "max_age must be a positive number", value=max_age)

    sha256s = get_option(config, "sha256s")
    if not isinstance(sha256s, (list, tuple)) or len(sha256s) < 2:
        raise HandlerConfigError("hpkp", "sha256s must list at least 2 pins")

    parts = [f'pin-sha256="{pin}"' for pin in sha256s]
    parts.append(f"max-age={int(max_age)}")
    if get_option(config, "include_sub_domains", False):
        parts.append("includeSubDomains")

    report_uri = get_option(config, "report_uri")
    if report_uri:
        parts.append(f'report-uri="{report_uri}"')
    elif get_option(config, "report_only", False):
        raise HandlerConfigError("hpkp", "report_only requires report_uri")
    return "; ".join(parts)


def hpkp(config: HandlerConfig) -> Handler:
    config = ensure_mapping("hpkp", config)
    value = _header_value(config)
    header = REPORT_ONLY_HEADER if get_option(config, "report_only", False) else HEADER

    def hpkp_handler(request, response, next):
        response.headers[header] = value
        next()

    return hpkp_handler
