from __future__ import annotations

import uuid
from time import perf_counter
from typing import TYPE_CHECKING, Any, Callable

import structlog
from starlette.datastructures import MutableHeaders

if TYPE_CHECKING:
    from greenroad.context import AppContext


def _route_label(scope: dict[str, Any], literal_path: str) -> str:
    # FastAPI stores the matched APIRoute in the scope; mounts and 404s don't.
    route = scope.get("route")
    template = getattr(route, "path", None)
    return template if isinstance(template, str) and template else literal_path


class RequestMetricsMiddleware:
    """Adds request_id context, one access log record and HTTP metrics per request."""

    def __init__(self, app: Callable[..., Any], context: AppContext) -> None:
        self.app = app
        self.context = context

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        # Captured up front: mounts may rewrite the scope on the way down.
        path = scope.get("path", "")
        method = scope.get("method", "GET")

        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = perf_counter()
        status_code: int = 500

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code

            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers["X-Request-ID"] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration = perf_counter() - start
            route = _route_label(scope, path)

            # Update metrics first so they update even if logging misbehaves.
            # Neither may fail the response.
            try:
                self.context.metrics.observe_request(method, route, status_code, duration)
            except Exception:
                pass

            try:
                self.context.logger.info(
                    "http_request",
                    method=method,
                    path=path,
                    route=route,
                    status_code=status_code,
                    duration=round(duration, 6),
                )
            except Exception:
                pass

            structlog.contextvars.clear_contextvars()
