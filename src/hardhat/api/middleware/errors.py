"""
Error responses for short-circuited pipelines.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from starlette.responses import JSONResponse

from hardhat.api.schemas import ProblemDetail

_REASONS: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    429: "Too Many Requests",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def status_for_abort(args: Sequence[Any]) -> int:
    """HTTP status for continuation arguments, defaulting to 500.

    The first argument's ``status_code`` (or ``status``) attribute is used
    when it is an int in the 4xx/5xx range.
    """
    if not args:
        return 500
    first = args[0]
    for attr in ("status_code", "status"):
        status = getattr(first, attr, None)
        if isinstance(status, int) and not isinstance(status, bool) and 400 <= status <= 599:
            return status
    return 500


def problem_response(
    *,
    status: int,
    title: str | None = None,
    detail: str = "",
    instance: str = "",
) -> JSONResponse:
    """Build a RFC 7807 JSON error response."""
    body = ProblemDetail(
        title=title or _REASONS.get(status, "Error"),
        status=status,
        detail=detail,
        instance=instance,
    )
    return JSONResponse(
        status_code=status,
        content=body.model_dump(),
        media_type="application/problem+json",
    )
