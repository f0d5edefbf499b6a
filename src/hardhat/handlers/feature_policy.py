"""Feature-Policy: allow or deny browser features per origin.

Superseded by Permissions-Policy; registered as a deprecated handler.
"""

from __future__ import annotations

from collections.abc import Mapping

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option, kebab

HEADER = "Feature-Policy"


def _header_value(config: HandlerConfig) -> str:
    features = get_option(config, "features")
    if not isinstance(features, Mapping) or not features:
        raise HandlerConfigError("feature_policy", "features are required")

    parts = []
    for feature, allowlist in features.items():
        if isinstance(allowlist, str):
            allowlist = [allowlist]
        if (
            not isinstance(feature, str)
            or not isinstance(allowlist, (list, tuple))
            or not allowlist
            or not all(isinstance(item, str) for item in allowlist)
        ):
            raise HandlerConfigError(
                "feature_policy",
                f"feature {feature!r} needs a non-empty allowlist of strings",
            )
        parts.append(f"{kebab(feature)} {' '.join(allowlist)}")
    return "; ".join(parts)


def feature_policy(config: HandlerConfig) -> Handler:
    value = _header_value(ensure_mapping("feature_policy", config))

    def feature_policy_handler(request, response, next):
        response.headers[HEADER] = value
        next()

    return feature_policy_handler
