"""Comment domain service."""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire

from agora.config import APISettings, CommentSettings
from agora.domain.error import ValidationError
from agora.domain.model.comment import MAX_BODY_LENGTH, Comment
from agora.domain.model.commentable import Commentable
from agora.domain.repository import (
    CommentableRepository,
    CommentRepository,
    ModerationRepository,
)
from agora.domain.value import Alignment, CommentableRef, CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        commentable_repository: CommentableRepository,
        moderation_repository: ModerationRepository,
        comment_settings: CommentSettings,
        api_settings: APISettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            commentable_repository: Host resource lookup
            moderation_repository: Moderation state lookup
            comment_settings: Comment engine settings
            api_settings: API settings (for building resource URLs)
        """
        self.comment_repository = comment_repository
        self.commentable_repository = commentable_repository
        self.moderation_repository = moderation_repository
        self.settings = comment_settings
        self.api_settings = api_settings

    @property
    def max_depth(self) -> int:
        return self.settings.max_depth

    def supports(self, resource_type: str) -> bool:
        """Whether resources of this type can hold comments."""
        return self.commentable_repository.supports(resource_type)

    async def create_comment(
        self,
        body: str,
        author_id: UserId,
        commentable: Commentable,
        alignment: int = Alignment.NEUTRAL,
    ) -> Comment:
        """Create a comment on a resource or a reply to another comment.

        Validations run in order: body, commentable, alignment.

        Args:
            body: Raw comment text
            author_id: Author user ID
            commentable: Resource or comment being replied to
            alignment: Author's position (-1, 0 or 1)

        Returns:
            Created comment with depth and root resource set

        Raises:
            ValidationError: If any of the validations fails
        """
        ref = commentable.commentable_ref
        with logfire.span(
            "comment_service.create_comment",
            commentable=str(ref),
            author_id=str(author_id),
            alignment=alignment,
        ):
            if not body or not body.strip():
                logfire.warn("Empty comment body", commentable=str(ref))
                raise ValidationError("body", "Comment body cannot be empty")
            if len(body) > MAX_BODY_LENGTH:
                logfire.warn(
                    "Comment body too long", commentable=str(ref), length=len(body)
                )
                raise ValidationError(
                    "body", f"Comment body cannot exceed {MAX_BODY_LENGTH} characters"
                )

            if isinstance(commentable, Comment):
                await self._check_can_reply(commentable)
                depth = commentable.depth + 1
                root = commentable.root_commentable
            else:
                if ref.is_comment or not commentable.accepts_new_comments():
                    logfire.warn("Resource closed for comments", commentable=str(ref))
                    raise ValidationError(
                        "commentable", "This resource does not accept new comments"
                    )
                depth = 0
                root = ref

            try:
                declared = Alignment(alignment)
            except ValueError:
                logfire.warn("Invalid alignment", alignment=alignment)
                raise ValidationError("alignment", "Alignment must be -1, 0 or 1")

            comment = Comment(
                id=CommentId(uuid4()),
                body=body,
                author_id=author_id,
                commentable=ref,
                root_commentable=root,
                depth=depth,
                alignment=declared,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                root_commentable=str(root),
                depth=depth,
            )
            return saved

    async def _check_can_reply(self, parent: Comment) -> None:
        if not parent.accepts_new_comments(self.max_depth):
            logfire.warn(
                "Reply exceeds maximum depth",
                parent_id=str(parent.id),
                parent_depth=parent.depth,
                max_depth=self.max_depth,
            )
            raise ValidationError(
                "commentable",
                f"Replies cannot be nested deeper than {self.max_depth} levels",
            )

        root = await self.commentable_repository.find_by_ref(parent.root_commentable)
        if root is None or not root.accepts_new_comments():
            logfire.warn(
                "Thread closed for replies",
                parent_id=str(parent.id),
                root_commentable=str(parent.root_commentable),
            )
            raise ValidationError(
                "commentable", "This thread does not accept new comments"
            )

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def resolve_commentable(self, ref: CommentableRef) -> Commentable | None:
        """Load whatever a reference points at.

        Args:
            ref: Reference to a resource or a comment

        Returns:
            The comment or host resource, None if it cannot be found
        """
        if ref.is_comment:
            return await self.comment_repository.find_by_id(CommentId(ref.id))
        if not self.supports(ref.resource_type):
            return None
        return await self.commentable_repository.find_by_ref(ref)

    async def threads_of(self, comment_id: CommentId) -> list[Comment]:
        """Get visible direct replies to a comment.

        Args:
            comment_id: Parent comment ID

        Returns:
            Replies not hidden by moderation, oldest first
        """
        with logfire.span("comment_service.threads_of", comment_id=str(comment_id)):
            children = await self.comment_repository.find_children(comment_id)
            visible = await self._without_hidden(children)
            logfire.info(
                "Comment threads retrieved",
                comment_id=str(comment_id),
                count=len(visible),
                hidden=len(children) - len(visible),
            )
            return visible

    async def thread_count_of(self, comment_id: CommentId) -> int:
        """Count visible direct replies to a comment."""
        return len(await self.threads_of(comment_id))

    async def thread_counts_of(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count visible direct replies to several comments (batch query).

        Args:
            comment_ids: Parent comment IDs

        Returns:
            Reply count per parent, 0 for comments without visible replies
        """
        counts = {comment_id: 0 for comment_id in comment_ids}
        if not counts:
            return counts
        children = await self.comment_repository.find_children_of(list(counts))
        for child in await self._without_hidden(children):
            parent_id = CommentId(child.commentable.id)
            if parent_id in counts:
                counts[parent_id] += 1
        return counts

    async def get_comments_for(self, root: CommentableRef) -> list[Comment]:
        """Get a whole thread in tree order.

        Siblings are ordered by creation time. Hidden comments are left out,
        together with the replies below them.

        Args:
            root: Resource the thread belongs to

        Returns:
            Visible comments, depth-first
        """
        with logfire.span("comment_service.get_comments_for", root=str(root)):
            comments = await self.comment_repository.find_by_root(root)
            visible = await self._without_hidden(comments)

            children: dict[CommentableRef, list[Comment]] = {}
            for comment in sorted(visible, key=lambda c: c.created_at):
                children.setdefault(comment.commentable, []).append(comment)

            ordered: list[Comment] = []
            stack = list(reversed(children.get(root, [])))
            while stack:
                comment = stack.pop()
                ordered.append(comment)
                stack.extend(reversed(children.get(comment.commentable_ref, [])))

            logfire.info(
                "Comments retrieved for resource", root=str(root), count=len(ordered)
            )
            return ordered

    async def commentator_ids_in(
        self, resource_type: str, resource_ids: Sequence[UUID]
    ) -> set[UserId] | None:
        """Get the distinct authors commenting on a set of resources.

        Args:
            resource_type: Type of the resources
            resource_ids: IDs of the resources

        Returns:
            Author IDs of comments at any depth, or None when the resource
            type does not support comments at all
        """
        with logfire.span(
            "comment_service.commentator_ids_in",
            resource_type=resource_type,
            resource_count=len(resource_ids),
        ):
            if not self.supports(resource_type):
                logfire.info(
                    "Resource type not commentable", resource_type=resource_type
                )
                return None
            if not resource_ids:
                return set()
            return await self.comment_repository.find_author_ids_by_roots(
                resource_type, resource_ids
            )

    def reported_content_url(self, comment: Comment) -> str:
        """Build a deep link to a comment inside its root resource.

        Args:
            comment: Reported comment

        Returns:
            URL of the root resource with the comment ID as query parameter
        """
        root = comment.root_commentable
        resource_url = self.settings.resource_url_template.format(
            base_url=self.api_settings.frontend_url,
            resource_type=root.resource_type,
            resource_id=root.id,
        )
        return f"{resource_url}?commentId={comment.id}"

    async def _without_hidden(self, comments: list[Comment]) -> list[Comment]:
        if not comments:
            return []
        hidden = await self.moderation_repository.find_hidden_ids(
            [c.id for c in comments]
        )
        return [c for c in comments if c.id not in hidden]
