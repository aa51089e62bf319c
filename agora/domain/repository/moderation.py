"""Moderation lookup interface.

Moderation records are owned by another service. The comment engine only
needs to know which comments are currently hidden.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from agora.domain.value import CommentId


class ModerationRepository(ABC):
    """Read-only view over moderation state."""

    @abstractmethod
    async def find_hidden_ids(self, comment_ids: Sequence[CommentId]) -> set[CommentId]:
        """Return the subset of the given comments that are hidden.

        Args:
            comment_ids: Comment IDs to check

        Returns:
            IDs of hidden comments
        """
        pass

    async def is_hidden(self, comment_id: CommentId) -> bool:
        """Check whether a single comment is hidden."""
        return comment_id in await self.find_hidden_ids([comment_id])
