from __future__ import annotations

import random
from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from prometheus_client.parser import text_string_to_metric_families

from greenroad.config import Settings, get_settings
from greenroad.context import AppContext
from greenroad.main import create_app


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "3000")
    monkeypatch.setenv("RANDOM_SEED", "1234")
    monkeypatch.setenv("ENABLE_DEFAULT_METRICS", "false")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def context(settings: Settings) -> AppContext:
    return AppContext.from_settings(settings, rng=random.Random(1234))


@pytest.fixture
def app(context: AppContext) -> FastAPI:
    return create_app(context)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def read_sample():
    """Sum the samples called ``name`` whose labels include the given ones."""

    def _read(metrics_text: str, name: str, **labels: str) -> float:
        total = 0.0
        for family in text_string_to_metric_families(metrics_text):
            for sample in family.samples:
                if sample.name != name:
                    continue
                if all(sample.labels.get(key) == value for key, value in labels.items()):
                    total += sample.value
        return total

    return _read


@pytest.fixture
def read_counter(read_sample):
    def _read(metrics_text: str, **labels: str) -> float:
        return read_sample(metrics_text, "http_requests_total", **labels)

    return _read
