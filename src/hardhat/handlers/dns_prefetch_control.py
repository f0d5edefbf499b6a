"""X-DNS-Prefetch-Control: tell browsers whether to prefetch DNS for links."""

from __future__ import annotations

from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADER = "X-DNS-Prefetch-Control"


def dns_prefetch_control(config: HandlerConfig) -> Handler:
    config = ensure_mapping("dns_prefetch_control", config)
    value = "on" if get_option(config, "allow", False) else "off"

    def dns_prefetch_control_handler(request, response, next):
        response.headers[HEADER] = value
        next()

    return dns_prefetch_control_handler
