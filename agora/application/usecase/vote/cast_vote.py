"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import VoteService
from agora.domain.value import CommentId, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    comment_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    weight: int  # 1 (up) or -1 (down)


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: str
    comment_id: str
    weight: int
    up_votes: int
    down_votes: int
    created_at: datetime


class CastVoteUseCase:
    """Use case for up or down voting a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response with the updated totals

        Raises:
            ValidationError: If the weight is invalid
            NotFoundError: If the comment does not exist
            DuplicateVoteError: If the author already voted
        """
        comment_id = CommentId(UUID(request.comment_id))
        vote = await self.vote_service.cast_vote(
            comment_id, UserId(UUID(request.author_id)), request.weight
        )

        return CastVoteResponse(
            vote_id=str(vote.id),
            comment_id=str(vote.comment_id),
            weight=int(vote.weight),
            up_votes=await self.vote_service.up_vote_count(comment_id),
            down_votes=await self.vote_service.down_vote_count(comment_id),
            created_at=vote.created_at,
        )
