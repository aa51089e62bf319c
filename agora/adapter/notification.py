"""Notification publisher implementations."""

import logfire

from agora.domain.model.comment import Comment
from agora.domain.service.notification_service import NotificationPublisher
from agora.domain.value import UserId


class LoggingNotificationPublisher(NotificationPublisher):
    """Emits a structured event per new comment.

    Delivery (mail, push, in-app) is picked up downstream from the event.
    """

    async def publish(self, comment: Comment, recipients: set[UserId]) -> None:
        logfire.info(
            "Comment notification",
            comment_id=str(comment.id),
            root_commentable=str(comment.root_commentable),
            recipients=sorted(str(r) for r in recipients),
        )


class InMemoryNotificationPublisher(NotificationPublisher):
    """Collects published notifications for inspection in tests."""

    def __init__(self) -> None:
        self.published: list[tuple[Comment, set[UserId]]] = []

    async def publish(self, comment: Comment, recipients: set[UserId]) -> None:
        self.published.append((comment, set(recipients)))

    def recipients_of(self, comment: Comment) -> set[UserId]:
        """Recipients recorded for a comment, empty if none."""
        for published, recipients in self.published:
            if published.id == comment.id:
                return recipients
        return set()
