"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import COMMENT_TYPE, CommentableRef, CommentId, UserId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_root(self, root: CommentableRef) -> List[Comment]:
        """Find every comment of a thread, at any depth."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.root_commentable_type == root.resource_type,
                    comments_table.c.root_commentable_id == root.id,
                )
            )
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.commentable_type == COMMENT_TYPE,
                    comments_table.c.commentable_id == parent_id,
                )
            )
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children_of(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies to several comments (batch query)."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.commentable_type == COMMENT_TYPE,
                    comments_table.c.commentable_id.in_(parent_ids),
                )
            )
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_author_ids_by_roots(
        self, resource_type: str, resource_ids: Sequence[UUID]
    ) -> set[UserId]:
        """Find distinct authors of comments on the given resources."""
        if not resource_ids:
            return set()

        stmt = (
            select(comments_table.c.author_id)
            .where(
                and_(
                    comments_table.c.root_commentable_type == resource_type,
                    comments_table.c.root_commentable_id.in_(resource_ids),
                )
            )
            .distinct()
        )
        result = await self.session.execute(stmt)
        return {UserId(row.author_id) for row in result.fetchall()}

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
