"""Repository interfaces for Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.commentable import CommentableRepository
from agora.domain.repository.moderation import ModerationRepository
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "CommentableRepository",
    "ModerationRepository",
    "VoteRepository",
]
