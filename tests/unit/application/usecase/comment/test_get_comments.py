"""Unit tests for the comment listing use cases."""

from uuid import uuid4

import pytest

from agora.application.usecase.comment import (
    GetCommentatorsRequest,
    GetCommentatorsUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetThreadsRequest,
    GetThreadsUseCase,
)
from agora.domain.error import (
    CapabilityUnsupportedError,
    NotFoundError,
    ValidationError,
)
from agora.domain.service import CommentService, VoteService
from agora.persistence.repository.inmemory import (
    InMemoryCommentableRepository,
    InMemoryModerationRepository,
)
from tests.conftest import make_resource, new_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for listing a resource's thread."""

    @pytest.mark.asyncio
    async def test_tree_order_with_viewer_votes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comments = await unit_env.get(CommentService)
        votes = await unit_env.get(VoteService)
        commentables = await unit_env.get(InMemoryCommentableRepository)
        resource = commentables.add(make_resource())
        viewer = new_user()
        first = await comments.create_comment(
            body="first", author_id=new_user(), commentable=resource
        )
        second = await comments.create_comment(
            body="second", author_id=new_user(), commentable=resource
        )
        reply = await comments.create_comment(
            body="reply", author_id=new_user(), commentable=first
        )
        await votes.cast_vote(second.id, viewer, -1)

        # Act
        response = await use_case.execute(
            GetCommentsRequest(
                resource_type="proposal",
                resource_id=str(resource.id),
                viewer_id=str(viewer),
            )
        )

        # Assert
        assert response.total == 3
        assert [c.comment_id for c in response.comments] == [
            str(first.id),
            str(reply.id),
            str(second.id),
        ]
        assert [c.thread_count for c in response.comments] == [1, 0, 0]
        assert [(c.up_votes, c.down_votes) for c in response.comments] == [
            (0, 0),
            (0, 0),
            (0, 1),
        ]
        assert response.comments[2].viewer_vote == -1
        assert response.comments[0].viewer_vote is None

    @pytest.mark.asyncio
    async def test_anonymous_viewer_has_no_votes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comments = await unit_env.get(CommentService)
        commentables = await unit_env.get(InMemoryCommentableRepository)
        resource = commentables.add(make_resource())
        await comments.create_comment(
            body="hi", author_id=new_user(), commentable=resource
        )

        # Act
        response = await use_case.execute(
            GetCommentsRequest(resource_type="proposal", resource_id=str(resource.id))
        )

        # Assert
        assert response.comments[0].viewer_vote is None

    @pytest.mark.asyncio
    async def test_comment_reference_rejected(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                GetCommentsRequest(resource_type="comment", resource_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_unsupported_type_rejected(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(CapabilityUnsupportedError):
            await use_case.execute(
                GetCommentsRequest(resource_type="meeting", resource_id=str(uuid4()))
            )


class TestGetThreadsUseCase:
    """Tests for listing the replies to a comment."""

    @pytest.mark.asyncio
    async def test_hidden_replies_excluded(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadsUseCase)
        comments = await unit_env.get(CommentService)
        commentables = await unit_env.get(InMemoryCommentableRepository)
        moderation = await unit_env.get(InMemoryModerationRepository)
        resource = commentables.add(make_resource())
        parent = await comments.create_comment(
            body="parent", author_id=new_user(), commentable=resource
        )
        visible = await comments.create_comment(
            body="visible", author_id=new_user(), commentable=parent
        )
        hidden = await comments.create_comment(
            body="hidden", author_id=new_user(), commentable=parent
        )
        moderation.hide(hidden.id)

        # Act
        response = await use_case.execute(GetThreadsRequest(comment_id=str(parent.id)))

        # Assert
        assert response.total == 1
        assert response.threads[0].comment_id == str(visible.id)

    @pytest.mark.asyncio
    async def test_unknown_comment_not_found(self, unit_env):
        use_case = await unit_env.get(GetThreadsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadsRequest(comment_id=str(uuid4())))


class TestGetCommentatorsUseCase:
    """Tests for listing commentators across resources."""

    @pytest.mark.asyncio
    async def test_sorted_distinct_authors(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentatorsUseCase)
        comments = await unit_env.get(CommentService)
        commentables = await unit_env.get(InMemoryCommentableRepository)
        resource = commentables.add(make_resource())
        alice, bob = new_user(), new_user()
        top = await comments.create_comment(
            body="a", author_id=alice, commentable=resource
        )
        await comments.create_comment(body="b", author_id=bob, commentable=top)
        await comments.create_comment(body="c", author_id=alice, commentable=resource)

        # Act
        response = await use_case.execute(
            GetCommentatorsRequest(
                resource_type="proposal", resource_ids=[str(resource.id)]
            )
        )

        # Assert
        assert response.user_ids == sorted([str(alice), str(bob)])

    @pytest.mark.asyncio
    async def test_unsupported_type_rejected(self, unit_env):
        use_case = await unit_env.get(GetCommentatorsUseCase)

        with pytest.raises(CapabilityUnsupportedError):
            await use_case.execute(
                GetCommentatorsRequest(resource_type="meeting", resource_ids=[])
            )
