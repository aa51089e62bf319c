"""Comment entity.

Comments are threaded discussions attached to host resources. Every node
carries the resource the whole thread belongs to (root_commentable), so
thread-wide queries never have to walk the tree.
"""

from datetime import datetime

from pydantic import Field, field_validator

from agora.domain.model.common import DomainModel
from agora.domain.value import Alignment, CommentableRef, CommentId, UserId

# Deepest level a reply can be attached at (depths 0..MAX_DEPTH exist)
MAX_DEPTH = 3

MAX_BODY_LENGTH = 10000


class Comment(DomainModel):
    """Comment entity.

    Represents a reply to a host resource or to another comment.

    Threading is managed through:
    - commentable: What this comment directly replies to
    - root_commentable: The resource the whole thread hangs from
    - depth: Nesting level (0 for direct replies to the resource)
    """

    id: CommentId
    body: str = Field(min_length=1, max_length=MAX_BODY_LENGTH)
    author_id: UserId
    commentable: CommentableRef
    root_commentable: CommentableRef
    depth: int = Field(default=0, ge=0)
    alignment: Alignment = Alignment.NEUTRAL
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("root_commentable")
    @classmethod
    def validate_root_is_resource(cls, v: CommentableRef) -> CommentableRef:
        """Threads always hang from a host resource."""
        if v.is_comment:
            raise ValueError("Root commentable must be a resource")
        return v

    @property
    def commentable_ref(self) -> CommentableRef:
        """Reference used when this comment is replied to."""
        return CommentableRef.comment(self.id)

    def accepts_new_comments(self, max_depth: int = MAX_DEPTH) -> bool:
        """Whether a reply to this comment would stay within the depth limit."""
        return self.depth < max_depth
