"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from agora.domain.model.vote import Vote
from agora.domain.repository.vote import VoteRepository
from agora.domain.value import CommentId, UserId, VoteWeight


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Vote]:
        """Find an author's vote on a comment."""
        for vote in self._votes:
            if vote.comment_id == comment_id and vote.author_id == author_id:
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_comment_and_author(vote.comment_id, vote.author_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete an author's vote on a comment."""
        for i, vote in enumerate(self._votes):
            if vote.comment_id == comment_id and vote.author_id == author_id:
                self._votes.pop(i)
                return True
        return False

    async def count_by_comment(self, comment_id: CommentId, weight: VoteWeight) -> int:
        """Count votes of a given weight on a comment."""
        return sum(
            1
            for v in self._votes
            if v.comment_id == comment_id and v.weight == weight
        )

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, dict[VoteWeight, int]]:
        """Count votes per weight on multiple comments (batch query)."""
        wanted = set(comment_ids)
        counts: dict[CommentId, dict[VoteWeight, int]] = {}
        for vote in self._votes:
            if vote.comment_id in wanted:
                per_weight = counts.setdefault(vote.comment_id, {})
                per_weight[vote.weight] = per_weight.get(vote.weight, 0) + 1
        return counts

    async def find_by_author_and_comments(
        self, author_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Vote]:
        """Find an author's votes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        wanted = set(comment_ids)
        return [
            v for v in self._votes if v.author_id == author_id and v.comment_id in wanted
        ]
