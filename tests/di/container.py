"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from agora.adapter.commentable import CommentableRegistry
from agora.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None,
    commentable_registry: CommentableRegistry | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        commentable_registry: Registry for the real commentables component

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, assumes postgres running
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        use_mock = component_name is not None and component_name not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    context = {}
    if "commentables" in unmock:
        context[CommentableRegistry] = commentable_registry or CommentableRegistry()

    return make_async_container(*provider_instances, FastapiProvider(), context=context)


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components
    """
    all_components = {
        getattr(p, "__mock_component__")
        for p in PROVIDERS
        if getattr(p, "__mock_component__", None)
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
