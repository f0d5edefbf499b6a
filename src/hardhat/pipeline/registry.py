"""Handler registry — the static table from handler name to factory.

Manifesto:
    The set of handlers is closed. A read-only table keyed by
    :class:`HandlerName` replaces name lookups on a mutable namespace, and
    an import-time check guarantees every name has exactly one factory.

Tags:
    hardhat, pipeline, registry, lookup

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from hardhat import handlers
from hardhat.core.errors import RegistryError
from hardhat.core.protocols import HandlerFactory
from hardhat.pipeline.deprecation import deprecate
from hardhat.pipeline.names import HandlerName

FEATURE_POLICY_DEPRECATION = (
    "hardhat.feature_policy is deprecated (along with the HTTP header) and will be "
    "removed in a future release. Set the Permissions-Policy header yourself instead."
)
HPKP_DEPRECATION = (
    "hardhat.hpkp is deprecated and will be removed in a future release. "
    "Public key pinning is no longer supported by browsers."
)
NO_CACHE_DEPRECATION = (
    "hardhat.no_cache is deprecated and will be removed in a future release. "
    "Cache headers are not a security concern; set them in your application instead."
)


def validate_registry(registry: Mapping[HandlerName, HandlerFactory]) -> None:
    """Raise :class:`RegistryError` unless *registry* covers every name exactly."""
    keys = set(registry)
    missing = [name.value for name in HandlerName if name not in keys]
    unknown = sorted(str(key) for key in keys if not isinstance(key, HandlerName))
    if missing or unknown:
        raise RegistryError(
            "Handler registry must map every handler name to a factory",
            missing=missing,
            unknown=unknown,
        )
    not_callable = [name.value for name, factory in registry.items() if not callable(factory)]
    if not_callable:
        raise RegistryError("Registry entries must be callable", not_callable=not_callable)


REGISTRY: Mapping[HandlerName, HandlerFactory] = MappingProxyType(
    {
        HandlerName.CONTENT_SECURITY_POLICY: handlers.content_security_policy,
        HandlerName.DNS_PREFETCH_CONTROL: handlers.dns_prefetch_control,
        HandlerName.EXPECT_CT: handlers.expect_ct,
        HandlerName.FEATURE_POLICY: deprecate(handlers.feature_policy, FEATURE_POLICY_DEPRECATION),
        HandlerName.FRAMEGUARD: handlers.frameguard,
        HandlerName.HIDE_POWERED_BY: handlers.hide_powered_by,
        HandlerName.HSTS: handlers.hsts,
        HandlerName.IE_NO_OPEN: handlers.ie_no_open,
        HandlerName.NO_SNIFF: handlers.no_sniff,
        HandlerName.PERMITTED_CROSS_DOMAIN_POLICIES: handlers.permitted_cross_domain_policies,
        HandlerName.REFERRER_POLICY: handlers.referrer_policy,
        HandlerName.XSS_FILTER: handlers.xss_filter,
        HandlerName.HPKP: deprecate(handlers.hpkp, HPKP_DEPRECATION),
        HandlerName.NO_CACHE: deprecate(handlers.no_cache, NO_CACHE_DEPRECATION),
    }
)

validate_registry(REGISTRY)


def get_factory(name: HandlerName | str) -> HandlerFactory:
    """Get the registered factory for *name* (enum, snake_case or camelCase)."""
    resolved = HandlerName.lookup(name)
    if resolved is None:
        available = ", ".join(n.value for n in HandlerName)
        raise KeyError(f"Handler '{name}' not found. Available: {available}")
    return REGISTRY[resolved]
