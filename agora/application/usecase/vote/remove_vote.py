"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import VoteService
from agora.domain.value import CommentId, UserId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    comment_id: str  # UUID string
    author_id: str  # User ID from authenticated user


class RemoveVoteResponse(BaseModel):
    """Remove vote response with the totals left on the comment."""

    success: bool
    message: str
    up_votes: int
    down_votes: int


class RemoveVoteUseCase:
    """Use case for withdrawing a vote, which frees the author to vote again."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Withdraw the author's vote, if any.

        Removing a vote that does not exist is not an error; the response
        reports it with success=False.
        """
        comment_id = CommentId(UUID(request.comment_id))
        removed = await self.vote_service.remove_vote(
            comment_id, UserId(UUID(request.author_id))
        )

        return RemoveVoteResponse(
            success=removed,
            message="Vote removed successfully" if removed else "No vote found to remove",
            up_votes=await self.vote_service.up_vote_count(comment_id),
            down_votes=await self.vote_service.down_vote_count(comment_id),
        )
