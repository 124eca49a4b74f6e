"""Observability configuration using Logfire.

Spans are opened by hand around each use case and domain service call
(``"list_contents.execute"``, ``"vote_service.toggle_vote"``); FastAPI and
SQLAlchemy are instrumented so those spans nest under the HTTP request and
contain the SQL they issued.

Usage:
    import logfire

    logfire.info("Content created", content_id=str(content.id))

    with logfire.span("vote_service.toggle_vote", content_id=str(content_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from learnhub.config import Settings

# Attribute names whose values never leave the process. Bearer tokens are
# already covered by Logfire's default patterns.
SCRUBBED_FIELDS = ["payment_number", "email"]

# Polled by load balancers; tracing them only adds noise
UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Spans go to Logfire cloud when ``observability.send_to_logfire`` says so
    or, when that is unset, whenever a token is configured. The console
    always receives them; ``debug`` makes the console output verbose.

    Args:
        settings: Application settings
    """
    send_to_logfire = settings.observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(settings.observability.logfire_token)

    logfire.configure(
        service_name="learnhub-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks.

    Request spans record whether a bearer token was sent, which separates
    anonymous listing traffic from signed-in traffic.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        return {
            **attributes,
            "path": request.url.path,
            "authenticated": "authorization" in request.headers,
        }

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the SQL issued through the database engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the span context
    )
    logfire.info("SQLAlchemy instrumented")
