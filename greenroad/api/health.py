from __future__ import annotations

from fastapi import APIRouter, Depends

from greenroad.context import AppContext, get_context, utcnow
from greenroad.models.schemas import HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(context: AppContext = Depends(get_context)) -> HealthResponse:
    """Liveness: reflects local process state only."""
    return HealthResponse(uptime=context.uptime(), timestamp=utcnow())


@router.get("/ready", response_model=ReadyResponse)
async def ready() -> ReadyResponse:
    # Nothing downstream to wait for.
    return ReadyResponse()
