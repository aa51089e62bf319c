"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from agora.domain.model.vote import Vote
from agora.domain.value import CommentId, UserId, VoteWeight


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Vote]:
        """Find an author's vote on a comment.

        Args:
            comment_id: ID of the comment
            author_id: The voter's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Implementations must enforce uniqueness of (comment_id, author_id)
        atomically, at the storage level.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the author already voted on the comment
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete an author's vote on a comment.

        Args:
            comment_id: ID of the comment
            author_id: The voter's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId, weight: VoteWeight) -> int:
        """Count votes of a given weight on a comment.

        Args:
            comment_id: ID of the comment
            weight: Vote weight to count

        Returns:
            Number of matching votes
        """
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, Dict[VoteWeight, int]]:
        """Count votes per weight on multiple comments (batch query).

        Args:
            comment_ids: Comment IDs to count votes on

        Returns:
            Vote count per weight for every comment having at least one vote
        """
        pass

    @abstractmethod
    async def find_by_author_and_comments(
        self, author_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Vote]:
        """Find an author's votes on multiple comments (batch query).

        Args:
            author_id: The voter's ID
            comment_ids: Comment IDs to check

        Returns:
            Votes by the author on the given comments
        """
        pass
