"""End-to-end tests for comment and vote endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from agora.adapter.commentable import CommentableRegistry
from agora.interface.api.app import create_app
from tests.conftest import make_resource, new_user
from tests.di import build_test_container

PROPOSAL = make_resource("proposal")
CLOSED_PROPOSAL = make_resource("proposal", comments_open=False)


@pytest.fixture
def client():
    """Create test client; proposals are the only commentable resource type."""
    proposals = {p.id: p for p in (PROPOSAL, CLOSED_PROPOSAL)}

    async def load_proposal(resource_id):
        return proposals.get(resource_id)

    registry = CommentableRegistry()
    registry.register("proposal", load_proposal)

    test_container = build_test_container(
        unmock={"commentables"}, commentable_registry=registry
    )
    return TestClient(create_app(container=test_container))


def auth(user_id=None) -> dict[str, str]:
    return {"X-User-Id": str(user_id or new_user())}


def post_comment(client, commentable_type, commentable_id, body="Hello", headers=None):
    return client.post(
        "/comments",
        json={
            "commentable_type": commentable_type,
            "commentable_id": str(commentable_id),
            "body": body,
        },
        headers=headers or auth(),
    )


class TestCommentEndpoints:
    """End-to-end tests for the comment API.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_comment_without_auth_fails(self, client):
        """Should return 401 when not authenticated."""
        # Act
        response = client.post(
            "/comments",
            json={
                "commentable_type": "proposal",
                "commentable_id": str(PROPOSAL.id),
                "body": "anonymous",
            },
        )

        # Assert
        assert response.status_code == 401

    def test_malformed_user_header_rejected(self, client):
        response = client.get(
            f"/commentables/proposal/{PROPOSAL.id}/comments",
            headers={"X-User-Id": "not-a-uuid"},
        )

        assert response.status_code == 400

    def test_create_and_list_thread(self, client):
        """Comments and replies come back in tree order."""
        # Arrange
        top = post_comment(client, "proposal", PROPOSAL.id, "top")
        assert top.status_code == 201
        top_id = top.json()["comment"]["comment_id"]

        # Act
        reply = post_comment(client, "comment", top_id, "reply")
        listing = client.get(f"/commentables/proposal/{PROPOSAL.id}/comments")

        # Assert
        assert reply.status_code == 201
        assert reply.json()["comment"]["depth"] == 1
        assert listing.status_code == 200
        data = listing.json()
        assert data["total"] == 2
        assert [c["comment_id"] for c in data["comments"]] == [
            top_id,
            reply.json()["comment"]["comment_id"],
        ]
        assert data["comments"][0]["thread_count"] == 1

    def test_body_is_escaped(self, client):
        response = post_comment(
            client, "proposal", PROPOSAL.id, "<script>alert(1)</script>"
        )

        assert response.status_code == 201
        assert "<script>" not in response.json()["comment"]["formatted_body"]

    def test_marked_section_in_body_is_dropped(self, client):
        """A body holding a <![...]> section still creates and lists."""
        # Act
        created = post_comment(client, "proposal", PROPOSAL.id, "<![foo[x]]> hi")
        listing = client.get(f"/commentables/proposal/{PROPOSAL.id}/comments")

        # Assert
        assert created.status_code == 201
        formatted = created.json()["comment"]["formatted_body"]
        assert "hi" in formatted
        assert "<!" not in formatted
        assert listing.status_code == 200
        assert listing.json()["total"] == 1

    def test_reply_beyond_max_depth_rejected(self, client):
        """Should return 422 once the thread is too deep."""
        # Arrange
        parent = post_comment(client, "proposal", PROPOSAL.id, "depth 0")
        parent_id = parent.json()["comment"]["comment_id"]
        for depth in range(1, 4):
            response = post_comment(client, "comment", parent_id, f"depth {depth}")
            assert response.status_code == 201
            parent_id = response.json()["comment"]["comment_id"]

        # Act
        response = post_comment(client, "comment", parent_id, "too deep")

        # Assert
        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "commentable"

    def test_empty_body_rejected(self, client):
        response = post_comment(client, "proposal", PROPOSAL.id, "  ")

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "body"

    def test_closed_resource_rejected(self, client):
        response = post_comment(client, "proposal", CLOSED_PROPOSAL.id)

        assert response.status_code == 422

    def test_unknown_resource_returns_404(self, client):
        response = post_comment(client, "proposal", uuid4())

        assert response.status_code == 404

    def test_threads_of_unknown_comment_returns_404(self, client):
        response = client.get(f"/comments/{uuid4()}/threads")

        assert response.status_code == 404

    def test_threads_of_comment(self, client):
        # Arrange
        top = post_comment(client, "proposal", PROPOSAL.id, "top")
        top_id = top.json()["comment"]["comment_id"]
        post_comment(client, "comment", top_id, "first reply")

        # Act
        response = client.get(f"/comments/{top_id}/threads")

        # Assert
        assert response.status_code == 200
        assert response.json()["total"] == 1

    def test_commentators(self, client):
        # Arrange
        author = new_user()
        post_comment(client, "proposal", PROPOSAL.id, headers=auth(author))

        # Act
        response = client.get(
            "/commentables/proposal/commentators", params={"ids": [str(PROPOSAL.id)]}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user_ids"] == [str(author)]

    def test_commentators_of_unsupported_type(self, client):
        """Should return 422 for resource types without comments."""
        response = client.get(
            "/commentables/meeting/commentators", params={"ids": [str(uuid4())]}
        )

        assert response.status_code == 422


class TestVoteEndpoints:
    """End-to-end tests for the vote API."""

    def test_vote_then_duplicate(self, client):
        """Should return 409 for a second vote by the same user."""
        # Arrange
        comment = post_comment(client, "proposal", PROPOSAL.id)
        comment_id = comment.json()["comment"]["comment_id"]
        headers = auth()

        # Act
        first = client.post(
            f"/comments/{comment_id}/votes", json={"weight": 1}, headers=headers
        )
        second = client.post(
            f"/comments/{comment_id}/votes", json={"weight": -1}, headers=headers
        )

        # Assert
        assert first.status_code == 201
        assert first.json()["up_votes"] == 1
        assert second.status_code == 409

    def test_vote_without_auth_fails(self, client):
        response = client.post(f"/comments/{uuid4()}/votes", json={"weight": 1})

        assert response.status_code == 401

    def test_vote_on_unknown_comment(self, client):
        response = client.post(
            f"/comments/{uuid4()}/votes", json={"weight": 1}, headers=auth()
        )

        assert response.status_code == 404

    def test_invalid_weight(self, client):
        comment = post_comment(client, "proposal", PROPOSAL.id)
        comment_id = comment.json()["comment"]["comment_id"]

        response = client.post(
            f"/comments/{comment_id}/votes", json={"weight": 3}, headers=auth()
        )

        assert response.status_code == 422

    def test_remove_vote_and_viewer_state(self, client):
        # Arrange
        comment = post_comment(client, "proposal", PROPOSAL.id)
        comment_id = comment.json()["comment"]["comment_id"]
        headers = auth()
        client.post(f"/comments/{comment_id}/votes", json={"weight": -1}, headers=headers)
        listing = client.get(
            f"/commentables/proposal/{PROPOSAL.id}/comments", headers=headers
        )

        # Act
        response = client.delete(f"/comments/{comment_id}/votes", headers=headers)

        # Assert
        assert listing.json()["comments"][0]["viewer_vote"] == -1
        assert response.status_code == 200
        assert response.json()["success"] is True
