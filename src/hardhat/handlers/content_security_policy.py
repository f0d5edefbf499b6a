"""Content-Security-Policy: restrict where a page may load resources from.

``directives`` maps directive names (``default_src``, ``defaultSrc`` or
``default-src``) to a source string, a list of sources, or ``True`` for
value-less directives such as ``upgrade-insecure-requests``. ``False`` and
``None`` values drop the directive.
"""

from __future__ import annotations

from collections.abc import Mapping

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option, kebab

HEADER = "Content-Security-Policy"
REPORT_ONLY_HEADER = "Content-Security-Policy-Report-Only"
LEGACY_HEADERS = ("X-Content-Security-Policy", "X-WebKit-CSP")


def _render_directive(name: str, value: object) -> str | None:
    if not isinstance(name, str):
        raise HandlerConfigError(
            "content_security_policy",
            f"directive names must be strings, got {type(name).__name__}",
        )
    directive = kebab(name)
    if value is True:
        return directive
    if value is False or value is None:
        return None
    if isinstance(value, str):
        sources = [value]
    elif isinstance(value, (list, tuple)):
        sources = [str(source) for source in value]
    else:
        raise HandlerConfigError(
            "content_security_policy",
            f"directive {directive!r} must be a string, a list, or a bool",
            value=value,
        )
    if not sources:
        return directive
    return f"{directive} {' '.join(sources)}"


def render_policy(directives: Mapping[str, object]) -> str:
    rendered = (_render_directive(name, value) for name, value in directives.items())
    return "; ".join(part for part in rendered if part)


def content_security_policy(config: HandlerConfig) -> Handler:
    config = ensure_mapping("content_security_policy", config)
    directives = get_option(config, "directives")
    if not isinstance(directives, Mapping) or not directives:
        raise HandlerConfigError("content_security_policy", "directives are required")

    policy = render_policy(directives)
    report_only = bool(get_option(config, "report_only", False))
    if report_only and "report-uri" not in policy and "report-to" not in policy:
        raise HandlerConfigError(
            "content_security_policy",
            "report_only requires a report-uri or report-to directive",
        )

    header = REPORT_ONLY_HEADER if report_only else HEADER
    headers = [header]
    if get_option(config, "set_all_headers", False) and not report_only:
        headers.extend(LEGACY_HEADERS)

    def content_security_policy_handler(request, response, next):
        for name in headers:
            response.headers[name] = policy
        next()

    return content_security_policy_handler
