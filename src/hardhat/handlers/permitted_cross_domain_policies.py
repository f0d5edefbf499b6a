"""X-Permitted-Cross-Domain-Policies: restrict Adobe Flash/Acrobat cross-domain loading."""

from __future__ import annotations

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADER = "X-Permitted-Cross-Domain-Policies"

POLICIES = ("none", "master-only", "by-content-type", "all")


def permitted_cross_domain_policies(config: HandlerConfig) -> Handler:
    config = ensure_mapping("permitted_cross_domain_policies", config)
    policy = get_option(config, "permitted_policies", "none")
    if policy not in POLICIES:
        raise HandlerConfigError(
            "permitted_cross_domain_policies",
            f"permitted_policies must be one of {', '.join(POLICIES)}",
            value=policy,
        )

    def permitted_cross_domain_policies_handler(request, response, next):
        response.headers[HEADER] = policy
        next()

    return permitted_cross_domain_policies_handler
