"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agora.adapter.commentable import CommentableRegistry
from agora.config import Settings
from agora.interface.api.routes import comments, health, votes
from agora.util.di.container import create_container, setup_di
from agora.util.observability import instrument_fastapi


def create_app(
    container: AsyncContainer | None = None,
    commentable_registry: CommentableRegistry | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, the production one when omitted
        commentable_registry: Resource types opened for comments by the
            host application, used to build the production container

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Agora Comments API",
        description="Threaded comments, votes and notification fan-out for any resource",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-User-Id"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    if container is None:
        container = create_container(commentable_registry)
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)

    return app_instance
