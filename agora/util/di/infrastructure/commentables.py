"""Host resource infrastructure providers."""

from dishka import Scope, from_context, provide

from agora.adapter.commentable import CommentableRegistry, RegistryCommentableRepository
from agora.domain.repository import CommentableRepository
from agora.util.di.base import ProviderBase


class CommentablesProvider(ProviderBase):
    """Commentables component base."""

    __mock_component__ = "commentables"


class ProdCommentablesProvider(CommentablesProvider):
    """Resolves host resources through the registry handed in at startup.

    The registry is passed as container context, see create_container.
    """

    __is_mock__ = False

    registry = from_context(provides=CommentableRegistry, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_commentable_repository(
        self, registry: CommentableRegistry
    ) -> CommentableRepository:
        """Provide registry-backed commentable repository."""
        return RegistryCommentableRepository(registry)
