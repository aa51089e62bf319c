"""Quote parser.

Turns sanitized comment text into paragraph and quote markup. A run of
lines starting with '>' is a quoted block; everything else is grouped into
blank-line-delimited paragraphs.

    > quoted line one
    > quoted line two
    >
    > second quoted paragraph

    answer

Within a paragraph, lines are joined with a line break.
"""

from enum import Enum

QUOTE_MARKER = ">"
QUOTE_OPEN = '<blockquote class="comment__quote">'
QUOTE_CLOSE = "</blockquote>"
LINE_BREAK = "\n<br />"


class _State(Enum):
    OUTSIDE = "outside"
    IN_QUOTE = "in_quote"


def _paragraph(lines: list[str]) -> str:
    return f"<p>{LINE_BREAK.join(lines)}</p>"


class QuoteParser:
    """Line-oriented state machine over sanitized text."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._blocks: list[str] = []
        self._lines: list[str] = []
        self._quote: list[list[str]] = []
        self._state = _State.OUTSIDE

    def parse(self, text: str) -> str:
        """Render text as a sequence of paragraph and quote blocks.

        Args:
            text: Sanitized comment text

        Returns:
            Markup for the blocks, without an outer container
        """
        self._reset()
        lines = text.replace("\r\n", "\n").split("\n")

        for index, line in enumerate(lines):
            next_line = lines[index + 1] if index + 1 < len(lines) else None
            if self._state is _State.OUTSIDE:
                self._outside(line)
            else:
                self._in_quote(line, next_line)

        self._close_paragraph()
        self._close_quote()
        return "".join(self._blocks)

    def _outside(self, line: str) -> None:
        if line.startswith(QUOTE_MARKER):
            self._close_paragraph()
            self._state = _State.IN_QUOTE
            self._quote = [[]]
            self._append_quoted(line)
        elif not line.strip():
            self._close_paragraph()
        else:
            self._lines.append(line)

    def _in_quote(self, line: str, next_line: str | None) -> None:
        if line.startswith(QUOTE_MARKER):
            self._append_quoted(line)
        elif not line.strip() and next_line is not None and next_line.startswith(
            QUOTE_MARKER
        ):
            self._quote.append([])
        else:
            self._close_quote()
            self._state = _State.OUTSIDE
            self._outside(line)

    def _append_quoted(self, line: str) -> None:
        content = line[len(QUOTE_MARKER) :]
        if content.startswith(" "):
            content = content[1:]
        if content.strip():
            self._quote[-1].append(content)
        elif self._quote[-1]:
            self._quote.append([])

    def _close_paragraph(self) -> None:
        if self._lines:
            self._blocks.append(_paragraph(self._lines))
            self._lines = []

    def _close_quote(self) -> None:
        paragraphs = [_paragraph(lines) for lines in self._quote if lines]
        if paragraphs:
            self._blocks.append(QUOTE_OPEN + "".join(paragraphs) + QUOTE_CLOSE)
        self._quote = []


def parse_quotes(text: str) -> str:
    """Render sanitized text as paragraph and quote markup."""
    return QuoteParser().parse(text)
