"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.content import CommentFormatter
from agora.domain.error import CapabilityUnsupportedError, ValidationError
from agora.domain.service import CommentService, VoteService
from agora.domain.value import CommentableRef, UserId

from .item import CommentItem, build_comment_items


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    resource_type: str
    resource_id: str  # UUID string
    viewer_id: str | None = None  # Set when the request is authenticated


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    resource_type: str
    resource_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting the whole thread of a resource in tree order."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        formatter: CommentFormatter,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service for totals and viewer votes
            formatter: Comment body formatter
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.formatter = formatter

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with the resource reference

        Returns:
            Visible comments depth-first, with vote state

        Raises:
            ValidationError: If the reference is invalid or points at a comment
            CapabilityUnsupportedError: If the resource type has no comments
        """
        try:
            root = CommentableRef.from_type(
                request.resource_type, UUID(request.resource_id)
            )
        except ValueError:
            raise ValidationError("commentable", "Invalid resource reference")
        if root.is_comment:
            raise ValidationError(
                "commentable", "Replies to a comment are listed as its threads"
            )
        if not self.comment_service.supports(root.resource_type):
            raise CapabilityUnsupportedError(root.resource_type)

        comments = await self.comment_service.get_comments_for(root)
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        items = await build_comment_items(
            comments, self.formatter, self.comment_service, self.vote_service, viewer_id
        )

        return GetCommentsResponse(
            resource_type=request.resource_type,
            resource_id=request.resource_id,
            comments=items,
            total=len(items),
        )
