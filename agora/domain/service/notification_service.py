"""Notification recipients domain service."""

from abc import ABC, abstractmethod

import logfire

from agora.domain.model.comment import Comment
from agora.domain.model.commentable import NotifiesOnCommentCreated
from agora.domain.value import UserId

from .base import Service
from .comment_service import CommentService


class NotificationPublisher(ABC):
    """Hands new-comment notifications over to the delivery channel."""

    @abstractmethod
    async def publish(self, comment: Comment, recipients: set[UserId]) -> None:
        """Publish a notification about a new comment.

        Args:
            comment: Newly created comment
            recipients: Users to notify
        """
        pass


class NotificationService(Service):
    """Works out who hears about a new comment.

    Delivery itself happens elsewhere; this service only computes the set.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize notification service.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def recipients_for(self, comment: Comment) -> set[UserId]:
        """Compute the users to notify about a comment.

        The comment author is always included. When the comment replies to
        another comment, that comment's recipients are added; when it
        replies to a resource that names followers, those are added.

        Args:
            comment: Newly created comment

        Returns:
            User IDs to notify
        """
        with logfire.span(
            "notification_service.recipients_for", comment_id=str(comment.id)
        ):
            recipients = {comment.author_id}

            commentable = await self.comment_service.resolve_commentable(
                comment.commentable
            )
            if isinstance(commentable, Comment):
                recipients |= await self.recipients_for(commentable)
            elif isinstance(commentable, NotifiesOnCommentCreated):
                recipients |= set(commentable.users_to_notify_on_comment_created())

            logfire.info(
                "Notification recipients computed",
                comment_id=str(comment.id),
                count=len(recipients),
            )
            return recipients
