"""Referrer-Policy: limit what the Referer header reveals."""

from __future__ import annotations

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADER = "Referrer-Policy"

POLICIES = frozenset(
    {
        "no-referrer",
        "no-referrer-when-downgrade",
        "same-origin",
        "origin",
        "strict-origin",
        "origin-when-cross-origin",
        "strict-origin-when-cross-origin",
        "unsafe-url",
        "",
    }
)


def _header_value(config: HandlerConfig) -> str:
    policy = get_option(config, "policy", "no-referrer")
    tokens = [policy] if isinstance(policy, str) else policy
    if not isinstance(tokens, (list, tuple)) or not tokens:
        raise HandlerConfigError("referrer_policy", "policy must be a string or a non-empty list")

    seen: set[str] = set()
    for token in tokens:
        if not isinstance(token, str) or token not in POLICIES:
            raise HandlerConfigError("referrer_policy", f"unknown policy {token!r}")
        if token in seen:
            raise HandlerConfigError("referrer_policy", f"policy {token!r} given more than once")
        seen.add(token)
    return ",".join(tokens)


def referrer_policy(config: HandlerConfig) -> Handler:
    value = _header_value(ensure_mapping("referrer_policy", config))

    def referrer_policy_handler(request, response, next):
        response.headers[HEADER] = value
        next()

    return referrer_policy_handler
