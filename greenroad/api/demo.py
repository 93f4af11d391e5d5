from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from greenroad.context import AppContext, get_context, utcnow
from greenroad.models.schemas import DataResponse, DemoResponse, InfoResponse, RouteInfo

router = APIRouter(prefix="/api", tags=["demo"])


@router.get("/data", response_model=DataResponse)
async def get_data(context: AppContext = Depends(get_context)) -> DataResponse:
    """Synthetic figures for the dashboard; nothing here is real data."""
    rng = context.rng
    return DataResponse(
        message="Data fetched successfully",
        users=rng.randint(1000, 1999),
        requests=rng.randint(5000, 9999),
        uptime=context.uptime(),
        timestamp=utcnow(),
        version=context.settings.app_version,
    )


@router.get("/info", response_model=InfoResponse)
async def get_info(context: AppContext = Depends(get_context)) -> InfoResponse:
    settings = context.settings
    return InfoResponse(
        name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        description="DevOps demo service with health checks and Prometheus metrics",
        started_at=context.started_at,
        uptime=context.uptime(),
    )


@router.get("/demo", response_model=DemoResponse)
async def get_demo(request: Request) -> DemoResponse:
    # The OpenAPI schema is flat whether routers are nested or copied in.
    paths = request.app.openapi().get("paths", {})
    routes = [
        RouteInfo(
            path=path,
            methods=sorted(method.upper() for method in operations),
            name=next(iter(operations.values())).get("summary", path),
        )
        for path, operations in paths.items()
    ]
    return DemoResponse(routes=routes)
