"""Commentable resource lookup interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.commentable import Commentable
from agora.domain.value import CommentableRef


class CommentableRepository(ABC):
    """Resolves references to host application resources.

    The host application owns the resources; implementations only bridge
    to wherever it keeps them.
    """

    @abstractmethod
    def supports(self, resource_type: str) -> bool:
        """Whether resources of this type can receive comments."""
        pass

    @abstractmethod
    async def find_by_ref(self, ref: CommentableRef) -> Optional[Commentable]:
        """Load the resource a reference points at.

        Args:
            ref: Resource reference (never a comment reference)

        Returns:
            The resource if found and comment-enabled, None otherwise
        """
        pass
