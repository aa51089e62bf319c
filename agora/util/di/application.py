"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentatorsUseCase,
    GetCommentsUseCase,
    GetThreadsUseCase,
)
from agora.application.usecase.vote import CastVoteUseCase, RemoveVoteUseCase
from agora.domain.content import CommentFormatter
from agora.domain.service import (
    CommentService,
    NotificationPublisher,
    NotificationService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        notification_service: NotificationService,
        notification_publisher: NotificationPublisher,
        formatter: CommentFormatter,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            notification_service=notification_service,
            notification_publisher=notification_publisher,
            formatter=formatter,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        formatter: CommentFormatter,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            formatter=formatter,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_threads_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        formatter: CommentFormatter,
    ) -> GetThreadsUseCase:
        """Provide get threads use case."""
        return GetThreadsUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            formatter=formatter,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_commentators_use_case(
        self, comment_service: CommentService
    ) -> GetCommentatorsUseCase:
        """Provide get commentators use case."""
        return GetCommentatorsUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)
