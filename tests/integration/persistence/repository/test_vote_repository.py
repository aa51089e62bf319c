"""Integration tests for VoteRepository.

These tests verify that one vote per author and comment is enforced by the
database itself, and that a rejected duplicate leaves the request
transaction usable.
"""

from datetime import datetime
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment, Vote
from agora.domain.repository import CommentRepository, VoteRepository
from agora.domain.value import (
    Alignment,
    CommentableRef,
    CommentId,
    VoteId,
    VoteWeight,
)
from tests.conftest import new_user
from tests.harness import create_env_fixture

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def session(integration_env) -> AsyncSession:
    """Request session on a migrated database, skipping when there is none."""
    session = await integration_env.get(AsyncSession)
    try:
        await session.execute(text("SELECT 1 FROM comment_votes LIMIT 1"))
    except (OSError, DBAPIError) as e:
        await session.rollback()
        pytest.skip(f"Migrated PostgreSQL database not available: {e}")
    return session


async def saved_comment(integration_env) -> Comment:
    comment_repo = await integration_env.get(CommentRepository)
    root = CommentableRef.from_type("proposal", uuid4())
    return await comment_repo.save(
        Comment(
            id=CommentId(uuid4()),
            body="Vote on me",
            author_id=new_user(),
            commentable=root,
            root_commentable=root,
            depth=0,
            alignment=Alignment.NEUTRAL,
            created_at=datetime.now(),
        )
    )


def make_vote(comment_id: CommentId, author_id, weight: VoteWeight) -> Vote:
    return Vote(
        id=VoteId(uuid4()), comment_id=comment_id, author_id=author_id, weight=weight
    )


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository.

    These tests verify the unique_comment_vote constraint and the savepoint
    around vote inserts.
    """

    @pytest.mark.asyncio
    async def test_duplicate_vote_rejected_by_database(self, integration_env, session):
        """A second vote by the same author raises IntegrityError."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        comment = await saved_comment(integration_env)
        voter = new_user()
        await vote_repo.save(make_vote(comment.id, voter, VoteWeight.UP))

        # Act / Assert
        with pytest.raises(IntegrityError):
            await vote_repo.save(make_vote(comment.id, voter, VoteWeight.DOWN))

    @pytest.mark.asyncio
    async def test_session_commits_after_duplicate(self, integration_env, session):
        """The first vote survives and the transaction still commits."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        comment = await saved_comment(integration_env)
        voter = new_user()
        other = new_user()
        await vote_repo.save(make_vote(comment.id, voter, VoteWeight.UP))

        # Act
        with pytest.raises(IntegrityError):
            await vote_repo.save(make_vote(comment.id, voter, VoteWeight.DOWN))
        await vote_repo.save(make_vote(comment.id, other, VoteWeight.DOWN))
        await session.commit()

        # Assert
        stored = await vote_repo.find_by_comment_and_author(comment.id, voter)
        assert stored is not None
        assert stored.weight == VoteWeight.UP
        counts = await vote_repo.count_by_comments([comment.id])
        assert counts == {comment.id: {VoteWeight.UP: 1, VoteWeight.DOWN: 1}}
