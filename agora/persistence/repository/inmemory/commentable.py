"""In-memory commentable resource lookup for testing."""

from typing import Optional

from agora.domain.model.commentable import Commentable
from agora.domain.repository.commentable import CommentableRepository
from agora.domain.value import CommentableRef


class InMemoryCommentableRepository(CommentableRepository):
    """Holds host resources in a dict keyed by reference.

    A resource type is supported once a resource of that type is added or
    the type is enabled explicitly.
    """

    def __init__(self) -> None:
        self._resources: dict[CommentableRef, Commentable] = {}
        self._types: set[str] = set()

    def add(self, resource: Commentable) -> Commentable:
        """Register a resource and enable its type."""
        ref = resource.commentable_ref
        self._resources[ref] = resource
        self._types.add(ref.resource_type)
        return resource

    def enable(self, resource_type: str) -> None:
        """Enable a resource type without adding resources."""
        self._types.add(resource_type)

    def supports(self, resource_type: str) -> bool:
        """Whether resources of this type can receive comments."""
        return resource_type in self._types

    async def find_by_ref(self, ref: CommentableRef) -> Optional[Commentable]:
        """Load the resource a reference points at."""
        if not self.supports(ref.resource_type):
            return None
        return self._resources.get(ref)
