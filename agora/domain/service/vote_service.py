"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import DuplicateVoteError, NotFoundError, ValidationError
from agora.domain.model.vote import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import CommentId, UserId, VoteId, VoteWeight

from .base import Service
from .comment_service import CommentService


class VoteService(Service):
    """Domain service for the comment vote ledger."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.comment_service = comment_service

    async def cast_vote(
        self, comment_id: CommentId, author_id: UserId, weight: int
    ) -> Vote:
        """Cast a vote on a comment.

        Args:
            comment_id: Comment ID
            author_id: Voter user ID
            weight: 1 for an up vote, -1 for a down vote

        Returns:
            Created vote

        Raises:
            ValidationError: If the weight is not 1 or -1
            NotFoundError: If the comment does not exist
            DuplicateVoteError: If the author already voted on the comment
        """
        with logfire.span(
            "vote_service.cast_vote",
            comment_id=str(comment_id),
            author_id=str(author_id),
            weight=weight,
        ):
            try:
                vote_weight = VoteWeight(weight)
            except ValueError:
                logfire.warn("Invalid vote weight", weight=weight)
                raise ValidationError("weight", "Vote weight must be 1 or -1")

            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment:
                logfire.warn("Vote on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            # Create vote (will raise IntegrityError if duplicate)
            vote = Vote(
                id=VoteId(uuid4()),
                comment_id=comment_id,
                author_id=author_id,
                weight=vote_weight,
                created_at=datetime.now(),
            )

            try:
                saved_vote = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt",
                    author_id=str(author_id),
                    comment_id=str(comment_id),
                )
                raise DuplicateVoteError(str(comment_id), str(author_id))

            logfire.info(
                "Vote cast",
                vote_id=str(saved_vote.id),
                comment_id=str(comment_id),
                weight=int(vote_weight),
            )
            return saved_vote

    async def remove_vote(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Remove an author's vote from a comment.

        Args:
            comment_id: Comment ID
            author_id: Voter user ID

        Returns:
            True if a vote was removed, False if no vote existed
        """
        with logfire.span(
            "vote_service.remove_vote",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            deleted = await self.vote_repository.delete_by_comment_and_author(
                comment_id, author_id
            )
            if deleted:
                logfire.info(
                    "Vote removed", comment_id=str(comment_id), author_id=str(author_id)
                )
            else:
                logfire.info(
                    "No vote to remove",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
            return deleted

    async def up_vote_count(self, comment_id: CommentId) -> int:
        """Count up votes on a comment."""
        return await self.vote_repository.count_by_comment(comment_id, VoteWeight.UP)

    async def down_vote_count(self, comment_id: CommentId) -> int:
        """Count down votes on a comment."""
        return await self.vote_repository.count_by_comment(
            comment_id, VoteWeight.DOWN
        )

    async def vote_counts_for(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, tuple[int, int]]:
        """Count up and down votes on a list of comments.

        Args:
            comment_ids: Comment IDs to count votes on

        Returns:
            Dictionary mapping comment ID to (up votes, down votes)
        """
        if not comment_ids:
            return {}

        counts = await self.vote_repository.count_by_comments(comment_ids)
        return {
            cid: (
                counts.get(cid, {}).get(VoteWeight.UP, 0),
                counts.get(cid, {}).get(VoteWeight.DOWN, 0),
            )
            for cid in comment_ids
        }

    async def has_up_voted(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Check whether an author up voted a comment."""
        vote = await self.vote_repository.find_by_comment_and_author(
            comment_id, author_id
        )
        return vote is not None and vote.weight == VoteWeight.UP

    async def has_down_voted(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Check whether an author down voted a comment."""
        vote = await self.vote_repository.find_by_comment_and_author(
            comment_id, author_id
        )
        return vote is not None and vote.weight == VoteWeight.DOWN

    async def get_user_votes_for_comments(
        self, author_id: UserId, comment_ids: list[CommentId]
    ) -> dict[CommentId, VoteWeight | None]:
        """Check how an author voted on a list of comments.

        Args:
            author_id: Voter user ID
            comment_ids: List of comment IDs to check

        Returns:
            Dictionary mapping comment ID to the vote weight, None if not voted
        """
        if not comment_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_author_and_comments(
            author_id, comment_ids
        )
        weights = {vote.comment_id: vote.weight for vote in votes}
        return {cid: weights.get(cid) for cid in comment_ids}
