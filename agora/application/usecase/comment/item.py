"""Comment representation shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.content import CommentFormatter
from agora.domain.model import Comment
from agora.domain.service import CommentService, VoteService
from agora.domain.value import UserId, VoteWeight


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    author_id: str
    commentable_type: str
    commentable_id: str
    root_commentable_type: str
    root_commentable_id: str
    body: str
    formatted_body: str
    depth: int
    alignment: int
    up_votes: int
    down_votes: int
    thread_count: int
    accepts_new_comments: bool
    viewer_vote: int | None  # 1, -1, or None when not voted / anonymous
    created_at: datetime


async def build_comment_items(
    comments: list[Comment],
    formatter: CommentFormatter,
    comment_service: CommentService,
    vote_service: VoteService,
    viewer_id: UserId | None = None,
) -> list[CommentItem]:
    """Render comments with their vote totals and the viewer's vote state."""
    comment_ids = [comment.id for comment in comments]

    # Batch queries for totals and thread counts (avoid N+1)
    vote_counts = await vote_service.vote_counts_for(comment_ids)
    thread_counts = await comment_service.thread_counts_of(comment_ids)

    viewer_votes: dict = {}
    if viewer_id and comments:
        viewer_votes = await vote_service.get_user_votes_for_comments(
            author_id=viewer_id,
            comment_ids=comment_ids,
        )

    items = []
    for comment in comments:
        up_votes, down_votes = vote_counts.get(comment.id, (0, 0))
        weight: VoteWeight | None = viewer_votes.get(comment.id)
        items.append(
            CommentItem(
                comment_id=str(comment.id),
                author_id=str(comment.author_id),
                commentable_type=comment.commentable.resource_type,
                commentable_id=str(comment.commentable.id),
                root_commentable_type=comment.root_commentable.resource_type,
                root_commentable_id=str(comment.root_commentable.id),
                body=comment.body,
                formatted_body=formatter.format(comment.body),
                depth=comment.depth,
                alignment=int(comment.alignment),
                up_votes=up_votes,
                down_votes=down_votes,
                thread_count=thread_counts.get(comment.id, 0),
                accepts_new_comments=comment.accepts_new_comments(
                    comment_service.max_depth
                ),
                viewer_vote=int(weight) if weight is not None else None,
                created_at=comment.created_at,
            )
        )
    return items
