"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries the offending field so callers can surface field-level messages.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DuplicateVoteError(DomainError):
    """Raised when an author votes twice on the same comment."""

    def __init__(self, comment_id: str, author_id: str):
        self.comment_id = comment_id
        self.author_id = author_id
        super().__init__(f"User {author_id} already voted on comment {comment_id}")


class CapabilityUnsupportedError(DomainError):
    """Raised when a resource type does not support comments."""

    def __init__(self, resource_type: str):
        self.resource_type = resource_type
        super().__init__(f"Resource type '{resource_type}' does not support comments")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
