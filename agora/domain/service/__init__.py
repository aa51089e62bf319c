"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .notification_service import NotificationPublisher, NotificationService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "NotificationPublisher",
    "NotificationService",
    "Service",
    "VoteService",
]
