"""X-Frame-Options: control whether the page may be rendered in a frame."""

from __future__ import annotations

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADER = "X-Frame-Options"

ACTIONS = ("deny", "sameorigin", "allow-from")


def _header_value(config: HandlerConfig) -> str:
    action = get_option(config, "action", "sameorigin")
    if not isinstance(action, str):
        raise HandlerConfigError("frameguard", "action must be a string", value=action)

    action = action.lower()
    if action == "same-origin":
        action = "sameorigin"
    if action not in ACTIONS:
        raise HandlerConfigError(
            "frameguard",
            f"action must be one of {', '.join(ACTIONS)}",
            value=action,
        )

    if action == "allow-from":
        domain = get_option(config, "domain")
        if not isinstance(domain, str) or not domain:
            raise HandlerConfigError("frameguard", "allow-from requires a domain")
        return f"ALLOW-FROM {domain}"
    return action.upper()


def frameguard(config: HandlerConfig) -> Handler:
    value = _header_value(ensure_mapping("frameguard", config))

    def frameguard_handler(request, response, next):
        response.headers[HEADER] = value
        next()

    return frameguard_handler
