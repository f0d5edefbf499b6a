"""
Security-headers middleware — runs a hardhat pipeline on every response.

Manifesto:
    The pipeline is built once, when the middleware is created, so option
    mistakes surface before traffic is served. Each request only walks the
    prebuilt handler tuple.

Usage::

    app = FastAPI()
    app.add_middleware(SecurityHeadersMiddleware, options={"frameguard": {"action": "deny"}})

Starlette instantiates middleware lazily, when the middleware stack is first
built; construction errors are raised at that point.

Tags:
    hardhat, api, middleware, security-headers, starlette

Doc-Types:
    api-reference
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hardhat.api.middleware.errors import problem_response, status_for_abort
from hardhat.core.logging import LogContext, get_logger
from hardhat.core.protocols import DiagnosticSink
from hardhat.core.settings import HardhatSettings, get_settings
from hardhat.pipeline.executor import Pipeline
from hardhat.pipeline.factory import create_pipeline
from hardhat.pipeline.options import HardhatOptions

logger = get_logger(__name__)


async def run_pipeline(pipeline: Pipeline, request: Any, response: Any) -> tuple[Any, ...]:
    """Run *pipeline* and wait for its outer continuation.

    Returns the arguments the continuation received: empty on normal
    completion, the forwarded arguments on a short-circuit. Handlers may
    call their continuation later, but only from the event loop thread.
    """
    loop = asyncio.get_running_loop()
    done: asyncio.Future[tuple[Any, ...]] = loop.create_future()

    def finish(*args: Any) -> None:
        if done.done():
            logger.warning("pipeline_continued_twice", path=getattr(request, "url", None))
            return
        done.set_result(args)

    pipeline(request, response, finish)
    return await done


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Apply a hardhat pipeline to every HTTP response.

    Parameters
    ----------
    app:
        The ASGI application to wrap.
    options:
        Options for :func:`~hardhat.pipeline.factory.create_pipeline`.
    pipeline:
        A prebuilt pipeline; mutually exclusive with *options*.
    sink:
        Diagnostic sink for deprecation messages; only valid with *options*.
    settings:
        Override settings (useful for testing).
    """

    def __init__(
        self,
        app: object,
        options: HardhatOptions | Mapping[Any, Any] | None = None,
        *,
        pipeline: Pipeline | None = None,
        sink: DiagnosticSink | None = None,
        settings: HardhatSettings | None = None,
    ) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        if pipeline is not None and options is not None:
            raise ValueError("Pass either options or a prebuilt pipeline, not both")
        if pipeline is not None and sink is not None:
            raise ValueError("A sink only applies when the pipeline is built from options")
        self._pipeline = pipeline if pipeline is not None else create_pipeline(options, sink=sink)
        self._settings = settings or get_settings()

    @property
    def pipeline(self) -> Pipeline:
        return self._pipeline

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        async with LogContext(path=request.url.path, method=request.method):
            aborted = await run_pipeline(self._pipeline, request, response)
        if not aborted:
            return response

        status = status_for_abort(aborted)
        logger.info(
            "security_headers_aborted",
            path=request.url.path,
            status=status,
            reason=type(aborted[0]).__name__,
        )
        return problem_response(
            status=status,
            detail=str(aborted[0]) if self._settings.debug else "",
            instance=str(request.url),
        )
