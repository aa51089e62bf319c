"""Link processor: turns bare URLs into anchors."""

import re

from agora.domain.content.processor import ContentProcessor

# Quotes and angle brackets never belong to a URL in escaped markup
URL_PATTERN = re.compile(r"https?://[^\s<>\"']+", re.IGNORECASE)
TAG_PATTERN = re.compile(r"(<[^>]*>)")

# Sentence punctuation right after a URL is not part of it
_TRAILING_PUNCTUATION = ".,;:!?)"


def _anchor(url: str) -> str:
    return f'<a href="{url}" target="_blank" rel="nofollow noopener">{url}</a>'


def _linkify(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        url = match.group(0)
        trailing = ""
        while url and url[-1] in _TRAILING_PUNCTUATION:
            # Keep a closing parenthesis that balances one inside the URL
            if url[-1] == ")" and url.count("(") >= url.count(")"):
                break
            trailing = url[-1] + trailing
            url = url[:-1]
        return _anchor(url) + trailing

    return URL_PATTERN.sub(replace, text)


class LinkProcessor(ContentProcessor):
    """Converts plain-text http(s) URLs to safe anchors.

    Text inside tags and inside existing anchors is left alone.
    """

    name = "link"

    def apply(self, markup: str) -> str:
        parts = TAG_PATTERN.split(markup)
        anchor_depth = 0
        for index, part in enumerate(parts):
            if index % 2:
                tag = part.lower()
                if tag.startswith("<a ") or tag == "<a>":
                    anchor_depth += 1
                elif tag == "</a>":
                    anchor_depth = max(0, anchor_depth - 1)
            elif part and not anchor_depth:
                parts[index] = _linkify(part)
        return "".join(parts)
