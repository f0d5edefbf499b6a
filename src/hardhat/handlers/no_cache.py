"""Cache-Control and friends: ask every cache layer not to store the response.

Registered as a deprecated handler.
"""

from __future__ import annotations

from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADERS = {
    "Surrogate-Control": "no-store",
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def no_cache(config: HandlerConfig) -> Handler:
    config = ensure_mapping("no_cache", config)
    no_etag = bool(get_option(config, "no_etag", False))

    def no_cache_handler(request, response, next):
        for name, value in HEADERS.items():
            response.headers[name] = value
        if no_etag and "ETag" in response.headers:
            del response.headers["ETag"]
        next()

    return no_cache_handler
