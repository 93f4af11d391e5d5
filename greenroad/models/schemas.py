from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float = Field(ge=0)
    timestamp: datetime


class ReadyResponse(BaseModel):
    status: Literal["ready"] = "ready"


class DataResponse(BaseModel):
    message: str
    users: int
    requests: int
    uptime: float = Field(ge=0)
    timestamp: datetime
    version: str


class InfoResponse(BaseModel):
    name: str
    version: str
    environment: str
    description: str
    started_at: datetime
    uptime: float = Field(ge=0)


class RouteInfo(BaseModel):
    path: str
    methods: list[str]
    name: str


class DemoResponse(BaseModel):
    routes: list[RouteInfo]
