from __future__ import annotations

import uvicorn

from greenroad.config import get_settings
from greenroad.context import AppContext
from greenroad.main import create_app
from greenroad.observability.logging import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, service=settings.app_name)

    app = create_app(AppContext.from_settings(settings))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        # The instrumentation middleware already writes one record per request.
        access_log=False,
    )


if __name__ == "__main__":
    main()
