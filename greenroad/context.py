from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import structlog
from fastapi import Request

from greenroad.config import Settings, get_settings
from greenroad.observability.metrics import HttpMetrics


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AppContext:
    """Process state shared by the middleware and route handlers.

    Built once at startup and stored on ``app.state.context``; tests build their
    own to get an isolated registry and a seeded random source.
    """

    settings: Settings
    metrics: HttpMetrics
    rng: random.Random
    logger: Any = field(default_factory=lambda: structlog.get_logger("access"))
    started_monotonic: float = field(default_factory=time.monotonic)
    started_at: datetime = field(default_factory=utcnow)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, *, rng: random.Random | None = None) -> AppContext:
        settings = settings or get_settings()
        return cls(
            settings=settings,
            metrics=HttpMetrics(default_metrics=settings.enable_default_metrics),
            rng=rng if rng is not None else random.Random(settings.random_seed),
        )

    def uptime(self) -> float:
        return max(0.0, time.monotonic() - self.started_monotonic)


def get_context(request: Request) -> AppContext:
    return request.app.state.context
