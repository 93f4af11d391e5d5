from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from greenroad.context import AppContext, get_context


router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_class=Response)
async def metrics(context: AppContext = Depends(get_context)) -> Response:
    return Response(content=context.metrics.render(), media_type=context.metrics.content_type)
