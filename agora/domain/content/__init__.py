"""Comment content pipeline."""

from agora.domain.content.formatter import CommentFormatter
from agora.domain.content.link import LinkProcessor
from agora.domain.content.processor import ContentProcessor, ProcessorChain
from agora.domain.content.quote_parser import QuoteParser, parse_quotes
from agora.domain.content.sanitizer import sanitize

# Processors that can be enabled by name in configuration
AVAILABLE_PROCESSORS: dict[str, type[ContentProcessor]] = {
    LinkProcessor.name: LinkProcessor,
}

__all__ = [
    "AVAILABLE_PROCESSORS",
    "CommentFormatter",
    "ContentProcessor",
    "LinkProcessor",
    "ProcessorChain",
    "QuoteParser",
    "parse_quotes",
    "sanitize",
]
