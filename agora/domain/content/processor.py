"""Content processors.

A processor receives the markup built so far and returns new markup,
replacing the substrings it recognizes and leaving the rest untouched.
Processors run after sanitization, so whatever text they re-emit must
already be escaped.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import logfire


class ContentProcessor(ABC):
    """Single-step markup transformation."""

    name: str = "processor"

    @abstractmethod
    def apply(self, markup: str) -> str:
        """Transform markup.

        Args:
            markup: Current markup

        Returns:
            Transformed markup
        """
        pass


class ProcessorChain:
    """Ordered list of processors applied one after another."""

    def __init__(self, processors: Sequence[ContentProcessor]) -> None:
        """Initialize processor chain.

        Args:
            processors: Processors in the order they must run
        """
        self.processors = tuple(processors)

    def render(self, markup: str, container: str = "div") -> str:
        """Run every processor and wrap the result in a container element.

        A processor that raises, or returns something other than a string,
        is skipped: its input passes through unchanged to the next one.

        Args:
            markup: Quote-structured markup
            container: Name of the wrapping element

        Returns:
            Processed markup inside the container
        """
        for processor in self.processors:
            try:
                processed = processor.apply(markup)
            except Exception as e:
                logfire.error(
                    "Content processor failed",
                    processor=processor.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                continue
            if not isinstance(processed, str):
                logfire.error(
                    "Content processor returned no markup",
                    processor=processor.name,
                    result_type=type(processed).__name__,
                )
                continue
            markup = processed
        return f"<{container}>{markup}</{container}>"
