"""Header handlers.

Each module exposes one factory, ``factory(config) -> handler``. The handler
sets (or removes) its header on ``response.headers`` and then calls
``next()``. Option problems are raised as
:class:`~hardhat.core.errors.HandlerConfigError` when the factory runs.
"""

from hardhat.handlers.content_security_policy import content_security_policy
from hardhat.handlers.dns_prefetch_control import dns_prefetch_control
from hardhat.handlers.expect_ct import expect_ct
from hardhat.handlers.feature_policy import feature_policy
from hardhat.handlers.frameguard import frameguard
from hardhat.handlers.hide_powered_by import hide_powered_by
from hardhat.handlers.hpkp import hpkp
from hardhat.handlers.hsts import hsts
from hardhat.handlers.ie_no_open import ie_no_open
from hardhat.handlers.no_cache import no_cache
from hardhat.handlers.no_sniff import no_sniff
from hardhat.handlers.permitted_cross_domain_policies import permitted_cross_domain_policies
from hardhat.handlers.referrer_policy import referrer_policy
from hardhat.handlers.xss_filter import xss_filter

__all__ = [
    "content_security_policy",
    "dns_prefetch_control",
    "expect_ct",
    "feature_policy",
    "frameguard",
    "hide_powered_by",
    "hpkp",
    "hsts",
    "ie_no_open",
    "no_cache",
    "no_sniff",
    "permitted_cross_domain_policies",
    "referrer_policy",
    "xss_filter",
]
