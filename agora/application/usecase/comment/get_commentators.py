"""Get commentators use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.error import CapabilityUnsupportedError
from agora.domain.service import CommentService


class GetCommentatorsRequest(BaseModel):
    """Get commentators request."""

    resource_type: str
    resource_ids: list[str]  # UUID strings


class GetCommentatorsResponse(BaseModel):
    """Get commentators response."""

    resource_type: str
    user_ids: list[str]


class GetCommentatorsUseCase(
    BaseUseCase[GetCommentatorsRequest, GetCommentatorsResponse]
):
    """Use case for listing everyone who commented on a set of resources."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get commentators use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: GetCommentatorsRequest
    ) -> GetCommentatorsResponse:
        """Execute get commentators flow.

        Args:
            request: Resource type and IDs

        Returns:
            Distinct author IDs, sorted

        Raises:
            CapabilityUnsupportedError: If the resource type has no comments
        """
        resource_ids = [UUID(rid) for rid in request.resource_ids]
        user_ids = await self.comment_service.commentator_ids_in(
            request.resource_type, resource_ids
        )
        if user_ids is None:
            raise CapabilityUnsupportedError(request.resource_type)

        return GetCommentatorsResponse(
            resource_type=request.resource_type,
            user_ids=sorted(str(uid) for uid in user_ids),
        )
