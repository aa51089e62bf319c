"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import CommentId, UserId, VoteWeight
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import comment_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Vote]:
        """Find an author's vote on a comment."""
        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The unique_comment_vote constraint rejects duplicates atomically.
        """
        stmt = insert(comment_votes_table).values(**vote_to_dict(vote))
        # Savepoint keeps the request transaction usable after a duplicate
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete an author's vote on a comment."""
        stmt = delete(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_comment(self, comment_id: CommentId, weight: VoteWeight) -> int:
        """Count votes of a given weight on a comment."""
        stmt = (
            select(func.count())
            .select_from(comment_votes_table)
            .where(comment_votes_table.c.comment_id == comment_id)
            .where(comment_votes_table.c.weight == int(weight))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, Dict[VoteWeight, int]]:
        """Count votes per weight on multiple comments (batch query)."""
        if not comment_ids:
            return {}

        stmt = (
            select(
                comment_votes_table.c.comment_id,
                comment_votes_table.c.weight,
                func.count().label("total"),
            )
            .where(comment_votes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_votes_table.c.comment_id, comment_votes_table.c.weight)
        )
        result = await self.session.execute(stmt)
        counts: Dict[CommentId, Dict[VoteWeight, int]] = {}
        for row in result.fetchall():
            counts.setdefault(CommentId(row.comment_id), {})[
                VoteWeight(row.weight)
            ] = row.total
        return counts

    async def find_by_author_and_comments(
        self, author_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Vote]:
        """Find an author's votes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.author_id == author_id,
                comment_votes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
