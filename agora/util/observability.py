"""Logfire wiring.

Application code calls logfire directly:

    with logfire.span("comment_service.get_comments_for", root=str(root)):
        logfire.info("Comments retrieved for resource", count=len(ordered))

This module configures Logfire once at startup and instruments FastAPI
and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import Settings

# Polled by the load balancer; tracing it only adds noise
UNTRACED_URLS = "/health"


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit setting first, otherwise send whenever a token is configured."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this service.

    Console output is rich locally and switched off in production, where
    telemetry only goes to Logfire.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)
    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "production":
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name="agora-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=console,
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace API requests, tagged with the acting user when known.

    Args:
        app: FastAPI application instance
    """

    def with_acting_user(request, attributes):
        user_id = request.headers.get("x-user-id")
        if user_id:
            return {**attributes, "user_id": user_id}
        return attributes

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=with_acting_user,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
