"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum
from uuid import UUID

from pydantic import field_validator, model_validator

from agora.domain.value.common import ValueObject

# Type name persisted for references that point at another comment
COMMENT_TYPE = "comment"


class Alignment(IntEnum):
    """Position the author declares towards the commentable."""

    AGAINST = -1
    NEUTRAL = 0
    IN_FAVOR = 1


class VoteWeight(IntEnum):
    """Weight of a comment vote."""

    DOWN = -1
    UP = 1


class CommentableKind(str, Enum):
    """Kind of entity a comment can be attached to."""

    RESOURCE = "resource"
    COMMENT = "comment"


class CommentableRef(ValueObject):
    """Tagged reference to something that can receive comments.

    Either a host application resource (identified by its resource type and
    id) or another comment. Depth and root propagation only ever look at
    the tag, never at the referenced object.
    """

    kind: CommentableKind
    id: UUID
    resource_type: str = COMMENT_TYPE

    @field_validator("resource_type")
    @classmethod
    def validate_resource_type(cls, v: str) -> str:
        """Validate resource type format."""
        if not re.match(r"^[a-z][a-z0-9_]{0,63}$", v):
            raise ValueError(
                "Resource type must be 1-64 characters, lowercase, "
                "alphanumeric with underscores"
            )
        return v

    @model_validator(mode="after")
    def validate_kind_matches_type(self) -> "CommentableRef":
        """Keep the comment type name reserved for comment references."""
        if self.kind == CommentableKind.COMMENT and self.resource_type != COMMENT_TYPE:
            raise ValueError("Comment references cannot carry a resource type")
        if self.kind == CommentableKind.RESOURCE and self.resource_type == COMMENT_TYPE:
            raise ValueError(f"'{COMMENT_TYPE}' is not a valid resource type")
        return self

    @classmethod
    def resource(cls, resource_type: str, resource_id: UUID) -> "CommentableRef":
        """Reference a host application resource."""
        return cls(
            kind=CommentableKind.RESOURCE, resource_type=resource_type, id=resource_id
        )

    @classmethod
    def comment(cls, comment_id: UUID) -> "CommentableRef":
        """Reference another comment."""
        return cls(kind=CommentableKind.COMMENT, id=comment_id)

    @classmethod
    def from_type(cls, type_name: str, ref_id: UUID) -> "CommentableRef":
        """Rebuild a reference from its persisted (type, id) pair."""
        if type_name == COMMENT_TYPE:
            return cls.comment(ref_id)
        return cls.resource(type_name, ref_id)

    @property
    def is_comment(self) -> bool:
        return self.kind == CommentableKind.COMMENT

    def __str__(self) -> str:
        return f"{self.resource_type}:{self.id}"
