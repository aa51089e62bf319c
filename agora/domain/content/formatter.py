"""Comment body formatter.

Single entry point for rendering a comment body:

    raw body -> sanitize -> quote parsing -> processor chain -> container

Rendering happens on read; formatted output is never persisted.
"""

from typing import Iterable, Sequence

from agora.domain.content.processor import ContentProcessor, ProcessorChain
from agora.domain.content.quote_parser import parse_quotes
from agora.domain.content.sanitizer import DEFAULT_ALLOWED_ATTRIBUTES, sanitize


class CommentFormatter:
    """Turns raw comment text into safe, enriched markup."""

    def __init__(
        self,
        processors: Sequence[ContentProcessor] = (),
        allowed_tags: Iterable[str] = (),
        allowed_attributes: Iterable[str] = DEFAULT_ALLOWED_ATTRIBUTES,
        container: str = "div",
    ) -> None:
        """Initialize comment formatter.

        Args:
            processors: Content processors, in the order they must run
            allowed_tags: Tags that survive sanitization
            allowed_attributes: Attributes that survive on allowed tags
            container: Element wrapping the whole output
        """
        self.chain = ProcessorChain(processors)
        self.allowed_tags = tuple(allowed_tags)
        self.allowed_attributes = tuple(allowed_attributes)
        self.container = container

    def sanitize(self, body: str) -> str:
        """Strip disallowed markup from a raw body."""
        return sanitize(body, self.allowed_tags, self.allowed_attributes)

    def format(self, body: str) -> str:
        """Render a raw comment body.

        Args:
            body: Raw text as submitted

        Returns:
            Markup wrapped in the container element
        """
        structured = parse_quotes(self.sanitize(body))
        return self.chain.render(structured, self.container)
