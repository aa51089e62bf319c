"""Mock providers for testing."""

from .commentables import MockCommentablesProvider
from .notifications import MockNotificationsProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCommentablesProvider",
    "MockNotificationsProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
