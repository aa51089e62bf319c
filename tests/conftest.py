"""Test configuration and helpers."""

from uuid import UUID, uuid4

from agora.domain.model import CommentableResource
from agora.domain.value import UserId


def make_resource(
    resource_type: str = "proposal",
    resource_id: UUID | None = None,
    comments_open: bool = True,
    followers: set[UserId] | None = None,
) -> CommentableResource:
    """Build a host resource snapshot for tests.

    Args:
        resource_type: Host resource type name
        resource_id: Resource ID (random when omitted)
        comments_open: Whether the resource accepts new comments
        followers: Users notified about new comments

    Returns:
        CommentableResource value
    """
    return CommentableResource(
        resource_type=resource_type,
        id=resource_id or uuid4(),
        comments_open=comments_open,
        followers=frozenset(followers or set()),
    )


def new_user() -> UserId:
    """Random user ID."""
    return UserId(uuid4())
