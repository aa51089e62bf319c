"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from agora.adapter.commentable import CommentableRegistry
from agora.util.di import PROVIDERS, get_provider


def create_container(
    commentable_registry: CommentableRegistry | None = None,
) -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Args:
        commentable_registry: Resource types the host application opened
            for comments. Without one, every resource type is rejected.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *provider_instances,
        FastapiProvider(),
        context={CommentableRegistry: commentable_registry or CommentableRegistry()},
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
