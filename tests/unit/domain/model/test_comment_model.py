"""Unit tests for comment domain models and references."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from agora.domain.model import Comment, CommentableResource
from agora.domain.value import Alignment, CommentableKind, CommentableRef, CommentId, UserId


def make_comment(depth: int = 0, **overrides) -> Comment:
    root = CommentableRef.resource("proposal", uuid4())
    values = dict(
        id=CommentId(uuid4()),
        body="text",
        author_id=UserId(uuid4()),
        commentable=root,
        root_commentable=root,
        depth=depth,
    )
    values.update(overrides)
    return Comment(**values)


class TestCommentableRef:
    """Tests for the tagged commentable reference."""

    def test_from_type_builds_comment_reference(self):
        ref = CommentableRef.from_type("comment", uuid4())

        assert ref.kind == CommentableKind.COMMENT
        assert ref.is_comment

    def test_from_type_builds_resource_reference(self):
        ref = CommentableRef.from_type("proposal", uuid4())

        assert ref.kind == CommentableKind.RESOURCE
        assert ref.resource_type == "proposal"

    def test_resource_cannot_use_comment_type(self):
        with pytest.raises(ValidationError):
            CommentableRef.resource("comment", uuid4())

    def test_rejects_malformed_type(self):
        with pytest.raises(ValidationError):
            CommentableRef.resource("Bad Type", uuid4())

    def test_references_compare_by_value(self):
        resource_id = uuid4()

        assert CommentableRef.resource("proposal", resource_id) == (
            CommentableRef.from_type("proposal", resource_id)
        )

    def test_str_is_type_and_id(self):
        resource_id = uuid4()

        assert str(CommentableRef.resource("debate", resource_id)) == (
            f"debate:{resource_id}"
        )


class TestComment:
    """Tests for the Comment entity."""

    def test_accepts_replies_below_max_depth(self):
        assert make_comment(depth=2).accepts_new_comments(max_depth=3)

    def test_rejects_replies_at_max_depth(self):
        assert not make_comment(depth=3).accepts_new_comments(max_depth=3)

    def test_reference_points_at_itself(self):
        comment = make_comment()

        assert comment.commentable_ref == CommentableRef.comment(comment.id)

    def test_root_must_be_resource(self):
        with pytest.raises(ValidationError):
            make_comment(root_commentable=CommentableRef.comment(uuid4()))

    def test_negative_depth_rejected(self):
        with pytest.raises(ValidationError):
            make_comment(depth=-1)

    def test_alignment_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            make_comment(alignment=2)

    def test_default_alignment_is_neutral(self):
        assert make_comment().alignment == Alignment.NEUTRAL


class TestCommentableResource:
    """Tests for the host resource snapshot."""

    def test_reports_followers(self):
        follower = UserId(uuid4())
        resource = CommentableResource(
            resource_type="proposal", id=uuid4(), followers=frozenset({follower})
        )

        assert resource.users_to_notify_on_comment_created() == {follower}

    def test_comment_type_is_reserved(self):
        with pytest.raises(ValidationError):
            CommentableResource(resource_type="comment", id=uuid4())
