"""In-memory comment repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentableRef, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_root(self, root: CommentableRef) -> list[Comment]:
        """Find every comment of a thread, oldest first."""
        comments = [
            c for c in self._comments.values() if c.root_commentable == root
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment, oldest first."""
        parent = CommentableRef.comment(parent_id)
        children = [c for c in self._comments.values() if c.commentable == parent]
        children.sort(key=lambda c: c.created_at)
        return children

    async def find_children_of(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find direct replies to several comments, oldest first."""
        parents = {CommentableRef.comment(parent_id) for parent_id in parent_ids}
        children = [c for c in self._comments.values() if c.commentable in parents]
        children.sort(key=lambda c: c.created_at)
        return children

    async def find_author_ids_by_roots(
        self, resource_type: str, resource_ids: Sequence[UUID]
    ) -> set[UserId]:
        """Find distinct authors of comments on the given resources."""
        wanted = set(resource_ids)
        return {
            c.author_id
            for c in self._comments.values()
            if c.root_commentable.resource_type == resource_type
            and c.root_commentable.id in wanted
        }

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment
