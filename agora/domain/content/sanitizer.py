"""User input sanitizer.

Strips every tag that is not explicitly allowed, keeping its text, and
drops every attribute that is not explicitly allowed. Text is re-escaped so
the output is safe to embed in markup.
"""

from html import escape
from html.parser import HTMLParser
from typing import Iterable

# Elements whose content is never shown, even as text
_DROPPED_CONTENT_TAGS = frozenset({"script", "style", "iframe", "object", "template"})

# Attributes holding a URL and the schemes they may use
_URL_ATTRIBUTES = frozenset({"href", "src", "cite"})
_SAFE_SCHEMES = ("http:", "https:", "mailto:")

# Elements that never have a closing tag
_VOID_TAGS = frozenset({"br", "hr", "img"})

DEFAULT_ALLOWED_ATTRIBUTES = frozenset({"href", "title"})


def _escape_text(text: str) -> str:
    # '>' stays literal: quote markers live at the start of lines
    return text.replace("&", "&amp;").replace("<", "&lt;")


def _is_safe_url(value: str) -> bool:
    # Browsers ignore whitespace and control characters inside the scheme
    compact = "".join(ch for ch in value if ch > " ").lower()
    if ":" not in compact.split("/", 1)[0]:
        return True  # relative URL
    return compact.startswith(_SAFE_SCHEMES)


class _SanitizingParser(HTMLParser):
    def __init__(
        self, allowed_tags: frozenset[str], allowed_attributes: frozenset[str]
    ) -> None:
        super().__init__(convert_charrefs=True)
        self.allowed_tags = allowed_tags
        self.allowed_attributes = allowed_attributes
        self.parts: list[str] = []
        self._dropping = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _DROPPED_CONTENT_TAGS:
            self._dropping += 1
            return
        if self._dropping or tag not in self.allowed_tags:
            return
        self.parts.append(self._render_tag(tag, attrs))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self._dropping or tag not in self.allowed_tags:
            return
        self.parts.append(self._render_tag(tag, attrs, self_closing=True))

    def handle_endtag(self, tag: str) -> None:
        if tag in _DROPPED_CONTENT_TAGS:
            self._dropping = max(0, self._dropping - 1)
            return
        if self._dropping or tag not in self.allowed_tags or tag in _VOID_TAGS:
            return
        self.parts.append(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        if not self._dropping:
            self.parts.append(_escape_text(data))

    def parse_marked_section(self, i: int, report: int = 1) -> int:
        # Marked sections (<![CDATA[...]]>, <![if IE]>, ...) are dropped whole.
        # An unterminated one returns -1 and close() emits it as text.
        closing = "]]>" if self.rawdata.startswith("<![CDATA[", i) else "]>"
        end = self.rawdata.find(closing, i + 3)
        if end < 0:
            return -1
        return end + len(closing)

    def _render_tag(
        self,
        tag: str,
        attrs: list[tuple[str, str | None]],
        self_closing: bool = False,
    ) -> str:
        rendered = [tag]
        for name, value in attrs:
            if name not in self.allowed_attributes or name.startswith("on"):
                continue
            if value is None:
                continue
            if name in _URL_ATTRIBUTES and not _is_safe_url(value):
                continue
            rendered.append(f'{name}="{escape(value, quote=True)}"')
        closing = " /" if self_closing or tag in _VOID_TAGS else ""
        return f"<{' '.join(rendered)}{closing}>"


def sanitize(
    text: str,
    allowed_tags: Iterable[str] = (),
    allowed_attributes: Iterable[str] = DEFAULT_ALLOWED_ATTRIBUTES,
) -> str:
    """Sanitize raw user input.

    Args:
        text: Raw text as submitted
        allowed_tags: Tags kept in the output (all others are unwrapped)
        allowed_attributes: Attributes kept on allowed tags

    Returns:
        Markup containing only allowed tags and attributes
    """
    parser = _SanitizingParser(
        frozenset(t.lower() for t in allowed_tags),
        frozenset(a.lower() for a in allowed_attributes),
    )
    parser.feed(text.replace("\r\n", "\n"))
    parser.close()
    return "".join(parser.parts)
