"""Notification infrastructure providers."""

from dishka import Scope, provide

from agora.adapter.notification import LoggingNotificationPublisher
from agora.domain.service import NotificationPublisher
from agora.util.di.base import ProviderBase


class NotificationsProvider(ProviderBase):
    """Notifications component base."""

    __mock_component__ = "notifications"


class ProdNotificationsProvider(NotificationsProvider):
    """Production notifications provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_publisher(self) -> NotificationPublisher:
        """Provide notification publisher."""
        return LoggingNotificationPublisher()
