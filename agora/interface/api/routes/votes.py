"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from agora.domain.error import DomainError
from agora.interface.api.identity import optional_user_id, require_user_id
from agora.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    weight: int  # 1 (up) or -1 (down)


@router.post(
    "/{comment_id}/votes",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    comment_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    user_id: str | None = Depends(optional_user_id),
) -> CastVoteResponse:
    """Up or down vote a comment.

    Requires authentication. A user votes at most once per comment.

    Raises:
        HTTPException: 401 when anonymous, 404 for unknown comments,
            409 for repeated votes, 422 for invalid weights
    """
    author_id = require_user_id(user_id, "vote")

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                comment_id=str(comment_id), author_id=author_id, weight=request.weight
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{comment_id}/votes", response_model=RemoveVoteResponse)
async def remove_vote(
    comment_id: UUID,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    user_id: str | None = Depends(optional_user_id),
) -> RemoveVoteResponse:
    """Withdraw the acting user's vote from a comment.

    Requires authentication.
    """
    author_id = require_user_id(user_id, "remove votes")

    return await remove_vote_use_case.execute(
        RemoveVoteRequest(comment_id=str(comment_id), author_id=author_id)
    )
