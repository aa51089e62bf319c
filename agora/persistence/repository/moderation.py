"""PostgreSQL implementation of the moderation lookup."""

from typing import Sequence

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import ModerationRepository
from agora.domain.value import COMMENT_TYPE, CommentId
from agora.persistence.tables import moderations_table


class PostgresModerationRepository(ModerationRepository):
    """Reads hidden state from the moderation service's table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_hidden_ids(self, comment_ids: Sequence[CommentId]) -> set[CommentId]:
        """Return the subset of the given comments that are hidden."""
        if not comment_ids:
            return set()

        stmt = select(moderations_table.c.reportable_id).where(
            and_(
                moderations_table.c.reportable_type == COMMENT_TYPE,
                moderations_table.c.reportable_id.in_(comment_ids),
                moderations_table.c.hidden_at.is_not(None),
            )
        )
        result = await self.session.execute(stmt)
        return {CommentId(row.reportable_id) for row in result.fetchall()}
