"""Run the health service under uvicorn: ``python -m health_service``."""

import structlog
import uvicorn

from health_service.config.logging_config import configure_logging
from health_service.config.settings import get_settings

logger = structlog.get_logger(__name__)


def main():
    settings = get_settings()
    configure_logging(settings.log_level, debug_mode=settings.debug)
    logger.info("Serving health checks", host=settings.api_host, port=settings.api_port)

    uvicorn.run(
        "health_service.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
