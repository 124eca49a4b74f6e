#!/usr/bin/env python3
"""Serve the LearnHub API under uvicorn.

Logfire and logging are configured before the app module is imported so
errors raised while building the app are recorded.
"""

import sys

import logfire
import uvicorn

from learnhub.config import Settings
from learnhub.util.logging import setup_logging
from learnhub.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting LearnHub API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "learnhub.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
