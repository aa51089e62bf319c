"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from agora.config import APISettings, CommentSettings, Settings
from agora.domain.content import AVAILABLE_PROCESSORS, CommentFormatter
from agora.util.di.base import ProviderBase
from agora.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment engine settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_api_settings(self, settings: Settings) -> APISettings:
        """Provide API settings."""
        return settings.api

    @provide(scope=Scope.APP)
    def provide_comment_formatter(
        self, comment_settings: CommentSettings
    ) -> CommentFormatter:
        """Provide the comment formatter with the configured processors.

        Raises:
            ConfigurationError: If a configured processor name is unknown
        """
        unknown = [
            name
            for name in comment_settings.content_processors
            if name not in AVAILABLE_PROCESSORS
        ]
        if unknown:
            raise ConfigurationError(
                "comments.content_processors", f"Unknown processors: {unknown}"
            )

        return CommentFormatter(
            processors=[
                AVAILABLE_PROCESSORS[name]()
                for name in comment_settings.content_processors
            ],
            allowed_tags=comment_settings.allowed_tags,
            allowed_attributes=comment_settings.allowed_attributes,
            container=comment_settings.container_tag,
        )
