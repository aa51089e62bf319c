"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import APISettings, CommentSettings
from agora.domain.repository import (
    CommentableRepository,
    CommentRepository,
    ModerationRepository,
    VoteRepository,
)
from agora.domain.service import CommentService, NotificationService, VoteService
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        commentable_repository: CommentableRepository,
        moderation_repository: ModerationRepository,
        comment_settings: CommentSettings,
        api_settings: APISettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            commentable_repository=commentable_repository,
            moderation_repository=moderation_repository,
            comment_settings=comment_settings,
            api_settings=api_settings,
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, comment_service: CommentService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, comment_service=comment_service
        )

    @provide
    def get_notification_service(
        self, comment_service: CommentService
    ) -> NotificationService:
        """Provide notification recipients domain service."""
        return NotificationService(comment_service=comment_service)
