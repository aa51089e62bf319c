"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from agora.domain.model.comment import Comment
from agora.domain.value import CommentableRef, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_root(self, root: CommentableRef) -> List[Comment]:
        """Find every comment of a thread, at any depth.

        Args:
            root: Reference to the resource the thread belongs to

        Returns:
            Comments ordered by creation time
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Child comments ordered by creation time
        """
        pass

    @abstractmethod
    async def find_children_of(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies to several comments (batch query).

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies to any of the parents, ordered by creation time
        """
        pass

    @abstractmethod
    async def find_author_ids_by_roots(
        self, resource_type: str, resource_ids: Sequence[UUID]
    ) -> set[UserId]:
        """Find distinct authors of comments on the given resources.

        Args:
            resource_type: Type of the root resources
            resource_ids: IDs of the root resources

        Returns:
            Distinct author IDs of comments at any depth
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
