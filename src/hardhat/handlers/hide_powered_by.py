"""X-Powered-By: remove it, or replace it with a value of your choosing."""

from __future__ import annotations

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADER = "X-Powered-By"


def hide_powered_by(config: HandlerConfig) -> Handler:
    config = ensure_mapping("hide_powered_by", config)
    set_to = get_option(config, "set_to")
    if set_to is not None and not isinstance(set_to, str):
        raise HandlerConfigError("hide_powered_by", "set_to must be a string", value=set_to)

    def hide_powered_by_handler(request, response, next):
        if set_to is not None:
            response.headers[HEADER] = set_to
        elif HEADER in response.headers:
            del response.headers[HEADER]
        next()

    return hide_powered_by_handler
