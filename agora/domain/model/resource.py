"""Snapshot of a host resource as seen by the comment engine."""

from uuid import UUID

from pydantic import Field, field_validator

from agora.domain.model.common import DomainModel
from agora.domain.value import COMMENT_TYPE, CommentableRef, UserId


class CommentableResource(DomainModel):
    """Host resource that accepts comments.

    Loaders registered by the host application return these snapshots.
    Hosts with richer needs can return any object implementing the
    Commentable protocol instead.
    """

    resource_type: str
    id: UUID
    comments_open: bool = True
    followers: frozenset[UserId] = Field(default_factory=frozenset)

    @field_validator("resource_type")
    @classmethod
    def validate_resource_type(cls, v: str) -> str:
        """Reject the reserved comment type name."""
        if v == COMMENT_TYPE:
            raise ValueError(f"'{COMMENT_TYPE}' is not a valid resource type")
        return v

    @property
    def commentable_ref(self) -> CommentableRef:
        return CommentableRef.resource(self.resource_type, self.id)

    def accepts_new_comments(self) -> bool:
        return self.comments_open

    def users_to_notify_on_comment_created(self) -> set[UserId]:
        return set(self.followers)
