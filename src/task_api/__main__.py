from __future__ import annotations

import logging

import uvicorn

from .logging_setup import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)

APP_IMPORT_PATH = "task_api.main:app"


# PUBLIC_INTERFACE
def main() -> None:
    """Serve task_api.main:app with uvicorn on the configured host and port."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Server running at http://%s:%d", settings.host, settings.port)
    uvicorn.run(APP_IMPORT_PATH, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
