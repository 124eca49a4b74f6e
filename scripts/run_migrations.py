#!/usr/bin/env python3
"""Upgrade the database schema to the latest revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from learnhub.config import Settings
from learnhub.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations", target="head"):
            # env.py reads the URL from Settings
            command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the container rather than serve against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
