"""X-XSS-Protection: configure the legacy browser XSS auditor.

Internet Explorer before version 9 could be made *more* vulnerable by the
header, so those user agents get ``0`` unless ``set_on_old_ie`` is set.
"""

from __future__ import annotations

import re

from hardhat.core.errors import HandlerConfigError
from hardhat.core.protocols import Handler, HandlerConfig
from hardhat.handlers._options import ensure_mapping, get_option

HEADER = "X-XSS-Protection"

_OLD_IE = re.compile(r"msie\s*(\d{1,2})", re.IGNORECASE)


def is_old_ie(user_agent: str | None) -> bool:
    if not user_agent:
        return False
    match = _OLD_IE.search(user_agent)
    return match is not None and int(match.group(1)) < 9


def _header_value(config: HandlerConfig) -> str:
    mode = get_option(config, "mode", "block")
    if mode is not None and mode != "block":
        raise HandlerConfigError("xss_filter", 'mode must be "block" or None', value=mode)
    value = "1; mode=block" if mode == "block" else "1"

    report_uri = get_option(config, "report_uri")
    if report_uri:
        value += f"; report={report_uri}"
    return value


def xss_filter(config: HandlerConfig) -> Handler:
    config = ensure_mapping("xss_filter", config)
    value = _header_value(config)
    set_on_old_ie = bool(get_option(config, "set_on_old_ie", False))

    def xss_filter_handler(request, response, next):
        if not set_on_old_ie and is_old_ie(request.headers.get("user-agent")):
            response.headers[HEADER] = "0"
        else:
            response.headers[HEADER] = value
        next()

    return xss_filter_handler
