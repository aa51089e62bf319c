"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.content import CommentFormatter
from agora.domain.error import NotFoundError, ValidationError
from agora.domain.service import (
    CommentService,
    NotificationPublisher,
    NotificationService,
    VoteService,
)
from agora.domain.value import Alignment, CommentableRef, UserId

from .item import CommentItem, build_comment_items


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    commentable_type: str  # Resource type, or "comment" for replies
    commentable_id: str  # UUID string
    body: str
    author_id: str  # User ID from the authenticated user
    alignment: int = Alignment.NEUTRAL


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    recipient_count: int


class CreateCommentUseCase:
    """Use case for commenting on a resource or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        notification_service: NotificationService,
        notification_publisher: NotificationPublisher,
        formatter: CommentFormatter,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote domain service
            notification_service: Computes notification recipients
            notification_publisher: Delivers notifications
            formatter: Comment body formatter
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.notification_service = notification_service
        self.notification_publisher = notification_publisher
        self.formatter = formatter

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the commentable (host resource or parent comment)
        2. Create the comment via comment service (validates body, depth, alignment)
        3. Compute recipients and publish the notification

        Args:
            request: Create comment request

        Returns:
            Create comment response with the rendered comment

        Raises:
            ValidationError: If the reference or the comment is invalid
            NotFoundError: If the commentable does not exist
        """
        try:
            ref = CommentableRef.from_type(
                request.commentable_type, UUID(request.commentable_id)
            )
        except ValueError:
            raise ValidationError("commentable", "Invalid commentable reference")

        commentable = await self.comment_service.resolve_commentable(ref)
        if commentable is None:
            raise NotFoundError("Commentable", str(ref))

        comment = await self.comment_service.create_comment(
            body=request.body,
            author_id=UserId(UUID(request.author_id)),
            commentable=commentable,
            alignment=request.alignment,
        )

        recipients = await self.notification_service.recipients_for(comment)
        await self.notification_publisher.publish(comment, recipients)

        [item] = await build_comment_items(
            [comment], self.formatter, self.comment_service, self.vote_service
        )
        return CreateCommentResponse(comment=item, recipient_count=len(recipients))
