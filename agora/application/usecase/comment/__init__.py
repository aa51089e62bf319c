"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_commentators import (
    GetCommentatorsRequest,
    GetCommentatorsResponse,
    GetCommentatorsUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_threads import GetThreadsRequest, GetThreadsResponse, GetThreadsUseCase
from .item import CommentItem

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentatorsRequest",
    "GetCommentatorsResponse",
    "GetCommentatorsUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetThreadsRequest",
    "GetThreadsResponse",
    "GetThreadsUseCase",
]
