from __future__ import annotations

from collections.abc import Sequence

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)
from prometheus_client.registry import Collector


HTTP_LABELS = ("method", "route", "status_code")


class HttpMetrics:
    """Prometheus instruments for the HTTP surface, bound to a private registry.

    Every instance owns its own ``CollectorRegistry`` so tests (and multiple apps
    in one process) never share counters through the global default registry.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        *,
        buckets: Sequence[float] = Histogram.DEFAULT_BUCKETS,
        default_metrics: bool = True,
    ) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()

        if default_metrics:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)

        self.requests_total = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
            HTTP_LABELS,
            registry=None,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            HTTP_LABELS,
            buckets=buckets,
            registry=None,
        )
        self.register(self.requests_total)
        self.register(self.request_duration)

    def register(self, collector: Collector) -> None:
        """Add a collector; raises ``ValueError`` if any of its names is taken."""

        self.registry.register(collector)

    def increment(self, method: str, route: str, status_code: int | str) -> None:
        self.requests_total.labels(method, route, str(status_code)).inc()

    def observe_duration(self, method: str, route: str, status_code: int | str, seconds: float) -> None:
        self.request_duration.labels(method, route, str(status_code)).observe(seconds)

    def observe_request(self, method: str, route: str, status_code: int | str, seconds: float) -> None:
        self.observe_duration(method, route, status_code, seconds)
        self.increment(method, route, status_code)

    def render(self) -> bytes:
        return generate_latest(self.registry)
