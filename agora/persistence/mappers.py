"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from agora.domain.model import Comment, Vote
from agora.domain.value import (
    Alignment,
    CommentableRef,
    CommentId,
    UserId,
    VoteId,
    VoteWeight,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        commentable=CommentableRef.from_type(
            row["commentable_type"], _uuid(row["commentable_id"])
        ),
        root_commentable=CommentableRef.from_type(
            row["root_commentable_type"], _uuid(row["root_commentable_id"])
        ),
        depth=row["depth"],
        alignment=Alignment(row["alignment"]),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    References are flattened into their (type, id) column pairs.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "body": comment.body,
        "author_id": comment.author_id,
        "commentable_type": comment.commentable.resource_type,
        "commentable_id": comment.commentable.id,
        "root_commentable_type": comment.root_commentable.resource_type,
        "root_commentable_id": comment.root_commentable.id,
        "depth": comment.depth,
        "alignment": int(comment.alignment),
        "created_at": comment.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        weight=VoteWeight(row["weight"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    vote_dict = vote.model_dump()
    vote_dict["weight"] = int(vote.weight)
    return vote_dict
