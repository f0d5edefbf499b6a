"""X-Content-Type-Options: disable MIME type sniffing."""

from __future__ import annotations

from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping

HEADER = "X-Content-Type-Options"


def no_sniff(config: HandlerConfig) -> Handler:
    ensure_mapping("no_sniff", config)

    def no_sniff_handler(request, response, next):
        response.headers[HEADER] = "nosniff"
        next()

    return no_sniff_handler
