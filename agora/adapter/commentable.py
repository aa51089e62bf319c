"""Host resource registry.

The host application decides which of its resource types accept comments
and how to load them. It registers one async loader per type at startup
and hands the registry to the DI container.
"""

from typing import Awaitable, Callable, Optional
from uuid import UUID

import logfire

from agora.adapter.error import RegistryError
from agora.domain.model.commentable import Commentable
from agora.domain.repository.commentable import CommentableRepository
from agora.domain.value import COMMENT_TYPE, CommentableRef

CommentableLoader = Callable[[UUID], Awaitable[Optional[Commentable]]]


class CommentableRegistry:
    """Maps resource type names to async loaders."""

    def __init__(self) -> None:
        self._loaders: dict[str, CommentableLoader] = {}

    def register(self, resource_type: str, loader: CommentableLoader) -> None:
        """Enable comments on a resource type.

        Args:
            resource_type: Resource type name, e.g. "proposal"
            loader: Async callable returning the resource for an ID, or None

        Raises:
            RegistryError: If the type is reserved or already registered
        """
        if resource_type == COMMENT_TYPE:
            raise RegistryError(f"'{COMMENT_TYPE}' is reserved for comments")
        if resource_type in self._loaders:
            raise RegistryError(f"Resource type already registered: {resource_type}")
        self._loaders[resource_type] = loader

    def supports(self, resource_type: str) -> bool:
        return resource_type in self._loaders

    @property
    def resource_types(self) -> list[str]:
        return sorted(self._loaders)

    async def load(self, resource_type: str, resource_id: UUID) -> Optional[Commentable]:
        """Load a resource through its registered loader."""
        loader = self._loaders.get(resource_type)
        if loader is None:
            return None
        return await loader(resource_id)


class RegistryCommentableRepository(CommentableRepository):
    """CommentableRepository backed by a CommentableRegistry."""

    def __init__(self, registry: CommentableRegistry) -> None:
        """Initialize repository.

        Args:
            registry: Registry filled in by the host application
        """
        self.registry = registry

    def supports(self, resource_type: str) -> bool:
        """Whether resources of this type can receive comments."""
        return self.registry.supports(resource_type)

    async def find_by_ref(self, ref: CommentableRef) -> Optional[Commentable]:
        """Load the resource a reference points at."""
        with logfire.span("commentable_registry.load", commentable=str(ref)):
            resource = await self.registry.load(ref.resource_type, ref.id)
            if resource is None:
                logfire.warn("Commentable resource not found", commentable=str(ref))
            return resource
