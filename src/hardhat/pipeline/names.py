"""Handler names, their fixed order, and the default set.

The declaration order of :class:`HandlerName` *is* the pipeline order.
Nothing sorts it; configuration key order never changes it.
"""

from __future__ import annotations

from enum import Enum


class HandlerName(str, Enum):
    """Identifiers of the registered header handlers, in pipeline order."""

    CONTENT_SECURITY_POLICY = "content_security_policy"
    DNS_PREFETCH_CONTROL = "dns_prefetch_control"
    EXPECT_CT = "expect_ct"
    FEATURE_POLICY = "feature_policy"
    FRAMEGUARD = "frameguard"
    HIDE_POWERED_BY = "hide_powered_by"
    HSTS = "hsts"
    IE_NO_OPEN = "ie_no_open"
    NO_SNIFF = "no_sniff"
    PERMITTED_CROSS_DOMAIN_POLICIES = "permitted_cross_domain_policies"
    REFERRER_POLICY = "referrer_policy"
    XSS_FILTER = "xss_filter"
    HPKP = "hpkp"
    NO_CACHE = "no_cache"

    @property
    def alias(self) -> str:
        """camelCase spelling, e.g. ``dnsPrefetchControl``."""
        head, *rest = self.value.split("_")
        return head + "".join(part.capitalize() for part in rest)

    @classmethod
    def lookup(cls, key: object) -> HandlerName | None:
        """Resolve an enum member, snake_case value or camelCase alias."""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            return _BY_KEY.get(key)
        return None


HANDLER_ORDER: tuple[HandlerName, ...] = tuple(HandlerName)

DEFAULT_HANDLERS: frozenset[HandlerName] = frozenset(
    {
        HandlerName.DNS_PREFETCH_CONTROL,
        HandlerName.FRAMEGUARD,
        HandlerName.HIDE_POWERED_BY,
        HandlerName.HSTS,
        HandlerName.IE_NO_OPEN,
        HandlerName.NO_SNIFF,
        HandlerName.XSS_FILTER,
    }
)

_BY_KEY: dict[str, HandlerName] = {}
for _name in HandlerName:
    _BY_KEY[_name.value] = _name
    _BY_KEY[_name.alias] = _name
del _name
