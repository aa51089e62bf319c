"""Get threads use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.content import CommentFormatter
from agora.domain.error import NotFoundError
from agora.domain.service import CommentService, VoteService
from agora.domain.value import CommentId, UserId

from .item import CommentItem, build_comment_items


class GetThreadsRequest(BaseModel):
    """Get threads request."""

    comment_id: str  # UUID string
    viewer_id: str | None = None


class GetThreadsResponse(BaseModel):
    """Get threads response."""

    comment_id: str
    threads: list[CommentItem]
    total: int


class GetThreadsUseCase:
    """Use case for getting the direct replies to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        formatter: CommentFormatter,
    ) -> None:
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.formatter = formatter

    async def execute(self, request: GetThreadsRequest) -> GetThreadsResponse:
        """Execute get threads flow.

        Raises:
            NotFoundError: If the parent comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        parent = await self.comment_service.get_comment_by_id(comment_id)
        if not parent:
            raise NotFoundError("Comment", request.comment_id)

        threads = await self.comment_service.threads_of(comment_id)
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        items = await build_comment_items(
            threads, self.formatter, self.comment_service, self.vote_service, viewer_id
        )

        return GetThreadsResponse(
            comment_id=request.comment_id, threads=items, total=len(items)
        )
