"""Vote entity.

Votes let participants rate comments up or down.
Each author can cast one vote per comment.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentId, UserId, VoteId, VoteWeight


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per author per comment (enforced by database unique constraint)
    - Weight is +1 (up) or -1 (down)
    """

    id: VoteId
    comment_id: CommentId
    author_id: UserId
    weight: VoteWeight
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_up(self) -> bool:
        return self.weight == VoteWeight.UP
