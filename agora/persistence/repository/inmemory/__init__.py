"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .commentable import InMemoryCommentableRepository
from .moderation import InMemoryModerationRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentableRepository",
    "InMemoryModerationRepository",
    "InMemoryVoteRepository",
]
