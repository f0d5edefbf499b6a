"""
Hardhat - security headers as an ordered handler pipeline.

``create_pipeline(options)`` resolves which header handlers are enabled,
builds them once, and returns one aggregate handler
``pipeline(request, response, next)`` that runs them in a fixed order for
every request.

Each registered handler factory is also available on the package for
standalone use, e.g. ``hardhat.frameguard({"action": "deny"})``.

Examples:
    >>> import hardhat
    >>> pipeline = hardhat.create_pipeline({"hsts": False, "referrer_policy": True})
    >>> [name.value for name in pipeline.names]  # doctest: +NORMALIZE_WHITESPACE
    ['dns_prefetch_control', 'frameguard', 'hide_powered_by', 'ie_no_open',
     'no_sniff', 'referrer_policy', 'xss_filter']
"""

__version__ = "0.1.0"

from hardhat.core.errors import (
    ConfigError,
    HandlerConfigError,
    HardhatError,
    DuplicateOptionError,
    InvalidOptionError,
    PipelineMisuseError,
    RegistryError,
)
from hardhat.pipeline import (
    DEFAULT_HANDLERS,
    HANDLER_ORDER,
    REGISTRY,
    HandlerName,
    HardhatOptions,
    Pipeline,
    create_pipeline,
    deprecate,
)

content_security_policy = REGISTRY[HandlerName.CONTENT_SECURITY_POLICY]
dns_prefetch_control = REGISTRY[HandlerName.DNS_PREFETCH_CONTROL]
expect_ct = REGISTRY[HandlerName.EXPECT_CT]
feature_policy = REGISTRY[HandlerName.FEATURE_POLICY]
frameguard = REGISTRY[HandlerName.FRAMEGUARD]
hide_powered_by = REGISTRY[HandlerName.HIDE_POWERED_BY]
hsts = REGISTRY[HandlerName.HSTS]
ie_no_open = REGISTRY[HandlerName.IE_NO_OPEN]
no_sniff = REGISTRY[HandlerName.NO_SNIFF]
permitted_cross_domain_policies = REGISTRY[HandlerName.PERMITTED_CROSS_DOMAIN_POLICIES]
referrer_policy = REGISTRY[HandlerName.REFERRER_POLICY]
xss_filter = REGISTRY[HandlerName.XSS_FILTER]
hpkp = REGISTRY[HandlerName.HPKP]
no_cache = REGISTRY[HandlerName.NO_CACHE]

__all__ = [
    "__version__",
    "ConfigError",
    "HandlerConfigError",
    "HardhatError",
    "DuplicateOptionError",
    "InvalidOptionError",
    "PipelineMisuseError",
    "RegistryError",
    "DEFAULT_HANDLERS",
    "HANDLER_ORDER",
    "REGISTRY",
    "HandlerName",
    "HardhatOptions",
    "Pipeline",
    "create_pipeline",
    "deprecate",
    *(name.value for name in HandlerName),
]
