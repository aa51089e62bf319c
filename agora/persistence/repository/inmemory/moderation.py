"""In-memory moderation lookup for testing."""

from typing import Sequence

from agora.domain.repository.moderation import ModerationRepository
from agora.domain.value import CommentId


class InMemoryModerationRepository(ModerationRepository):
    """In-memory implementation of ModerationRepository for testing."""

    def __init__(self) -> None:
        self._hidden: set[CommentId] = set()

    def hide(self, comment_id: CommentId) -> None:
        """Mark a comment as hidden by moderation."""
        self._hidden.add(comment_id)

    async def find_hidden_ids(self, comment_ids: Sequence[CommentId]) -> set[CommentId]:
        """Return the subset of the given comments that are hidden."""
        return {cid for cid in comment_ids if cid in self._hidden}
