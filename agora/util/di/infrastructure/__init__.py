"""Infrastructure providers."""

# Import bases
from .commentables import CommentablesProvider
from .notifications import NotificationsProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .commentables import ProdCommentablesProvider  # noqa: F401
from .notifications import ProdNotificationsProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CommentablesProvider",
    "NotificationsProvider",
    "PersistenceProvider",
    "ProdCommentablesProvider",
    "ProdNotificationsProvider",
    "ProdPersistenceProvider",
]
