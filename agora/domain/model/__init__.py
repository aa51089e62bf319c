"""Domain model entities for Agora."""

from agora.domain.model.comment import MAX_BODY_LENGTH, MAX_DEPTH, Comment
from agora.domain.model.commentable import Commentable, NotifiesOnCommentCreated
from agora.domain.model.resource import CommentableResource
from agora.domain.model.vote import Vote

__all__ = [
    "MAX_BODY_LENGTH",
    "MAX_DEPTH",
    "Comment",
    "Commentable",
    "CommentableResource",
    "NotifiesOnCommentCreated",
    "Vote",
]
