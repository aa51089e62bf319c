"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    CommentId,
    ResourceId,
    UserId,
    VoteId,
)
from agora.domain.value.types import (
    COMMENT_TYPE,
    Alignment,
    CommentableKind,
    CommentableRef,
    VoteWeight,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "VoteId",
    "ResourceId",
    # Types
    "COMMENT_TYPE",
    "Alignment",
    "CommentableKind",
    "CommentableRef",
    "VoteWeight",
]
