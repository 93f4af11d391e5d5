from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from greenroad.api.demo import router as demo_router
from greenroad.api.health import router as health_router
from greenroad.api.metrics import router as metrics_router
from greenroad.context import AppContext
from greenroad.observability.middleware import RequestMetricsMiddleware


def create_app(context: AppContext | None = None) -> FastAPI:
    if context is None:
        context = AppContext.from_settings()
    settings = context.settings

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        # uvicorn reports the bound address itself; this is the PORT setting.
        context.logger.info(
            "server_started", host=settings.host, configured_port=settings.port, version=settings.app_version
        )
        print(f"Server starting on configured port {settings.port}")
        yield

    app = FastAPI(title="DevOps Demo App", version=settings.app_version, lifespan=lifespan)
    app.state.context = context
    templates = Jinja2Templates(directory=str(settings.templates_path))

    app.add_middleware(RequestMetricsMiddleware, context=context)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(demo_router)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"app_name": settings.app_name, "version": settings.app_version},
        )

    # Mounted last so it only sees paths no route claimed.
    if settings.static_path.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.static_path)), name="static")

    return app
