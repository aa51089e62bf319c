"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentatorsRequest,
    GetCommentatorsResponse,
    GetCommentatorsUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetThreadsRequest,
    GetThreadsResponse,
    GetThreadsUseCase,
)
from agora.domain.error import DomainError
from agora.interface.api.identity import optional_user_id, require_user_id
from agora.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    commentable_type: str  # Resource type, or "comment" to reply
    commentable_id: UUID
    body: str
    alignment: int = 0


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    user_id: str | None = Depends(optional_user_id),
) -> CreateCommentResponse:
    """Comment on a resource or reply to a comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        user_id: Acting user from the X-User-Id header

    Returns:
        Created comment, rendered

    Raises:
        HTTPException: If not authenticated, validation fails or the
            commentable does not exist
    """
    author_id = require_user_id(user_id, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            commentable_type=request.commentable_type,
            commentable_id=str(request.commentable_id),
            body=request.body,
            author_id=author_id,
            alignment=request.alignment,
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get(
    "/commentables/{resource_type}/{resource_id}/comments",
    response_model=GetCommentsResponse,
)
async def get_comments(
    resource_type: str,
    resource_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    user_id: str | None = Depends(optional_user_id),
) -> GetCommentsResponse:
    """Get the whole thread of a resource in tree order.

    Authentication is optional. When present, each comment carries the
    viewer's own vote.
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                resource_type=resource_type,
                resource_id=str(resource_id),
                viewer_id=user_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/comments/{comment_id}/threads", response_model=GetThreadsResponse)
async def get_threads(
    comment_id: UUID,
    get_threads_use_case: FromDishka[GetThreadsUseCase],
    user_id: str | None = Depends(optional_user_id),
) -> GetThreadsResponse:
    """Get the visible direct replies to a comment."""
    try:
        return await get_threads_use_case.execute(
            GetThreadsRequest(comment_id=str(comment_id), viewer_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get(
    "/commentables/{resource_type}/commentators",
    response_model=GetCommentatorsResponse,
)
async def get_commentators(
    resource_type: str,
    get_commentators_use_case: FromDishka[GetCommentatorsUseCase],
    ids: list[UUID] = Query(default=[]),
) -> GetCommentatorsResponse:
    """List the users who commented on any of the given resources.

    Args:
        resource_type: Resource type
        get_commentators_use_case: Get commentators use case from DI
        ids: Resource IDs, repeated query parameter

    Returns:
        Distinct author IDs
    """
    try:
        return await get_commentators_use_case.execute(
            GetCommentatorsRequest(
                resource_type=resource_type, resource_ids=[str(i) for i in ids]
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
