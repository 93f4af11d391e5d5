from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger


_CONFIGURED = False

# uvicorn's access log is switched off; the instrumentation middleware owns that line.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error")


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _service_stamper(service: str | None) -> Any:
    def stamp(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return stamp


def configure_logging(level: int | str = "INFO", stream: TextIO | None = None, service: str | None = None) -> None:
    """Render every record, structlog or stdlib, as one JSON line on ``stream``.

    ``level`` takes a ``LOG_LEVEL`` name or a ``logging`` constant; unknown names
    fall back to INFO. ``service`` is stamped on each record when given.
    Only the first call has an effect.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if service:
        shared.append(_service_stamper(service))
    shared.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared,
        )
    )

    numeric_level = _resolve_level(level)
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.propagate = False
        server_logger.setLevel(numeric_level)

    _CONFIGURED = True
