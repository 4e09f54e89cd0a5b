#!/usr/bin/env python3
"""Start the Blogsphere API with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from blogsphere.config import Settings
from blogsphere.util.logging import setup_logging
from blogsphere.util.observability import configure_logfire


def main() -> int:
    """Start the API server and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Blogsphere API",
            environment=settings.environment,
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        # The app module builds its own container on import
        uvicorn.run(
            "blogsphere.interface.api.app:app",
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
