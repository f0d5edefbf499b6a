"""API middleware package.

Manifesto:
    Security headers are a cross-cutting concern; one middleware applies the
    whole pipeline so routes never set them by hand.

Tags:
    hardhat, api, middleware, security-headers

Doc-Types:
    api-reference
"""

from hardhat.api.middleware.errors import problem_response, status_for_abort
from hardhat.api.middleware.headers import SecurityHeadersMiddleware, run_pipeline

__all__ = [
    "SecurityHeadersMiddleware",
    "problem_response",
    "run_pipeline",
    "status_for_abort",
]
