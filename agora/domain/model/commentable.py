"""Capabilities host resources expose to the comment engine.

The engine never owns resource schemas. A host resource takes part in
threads by satisfying these protocols.
"""

from typing import Protocol, runtime_checkable

from agora.domain.value import CommentableRef, UserId


@runtime_checkable
class Commentable(Protocol):
    """Something comments can be attached to."""

    @property
    def commentable_ref(self) -> CommentableRef: ...

    def accepts_new_comments(self) -> bool: ...


@runtime_checkable
class NotifiesOnCommentCreated(Protocol):
    """Resource that names who should hear about new comments on it."""

    def users_to_notify_on_comment_created(self) -> set[UserId]: ...
