"""X-Download-Options: stop old Internet Explorer from opening downloads in-site."""

from __future__ import annotations

from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping

HEADER = "X-Download-Options"


def ie_no_open(config: HandlerConfig) -> Handler:
    ensure_mapping("ie_no_open", config)

    def ie_no_open_handler(request, response, next):
        response.headers[HEADER] = "noopen"
        next()

    return ie_no_open_handler
