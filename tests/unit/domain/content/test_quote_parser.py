"""Unit tests for the quote parser."""

from agora.domain.content.quote_parser import QuoteParser, parse_quotes

QUOTE = '<blockquote class="comment__quote">'


class TestParagraphs:
    """Text outside quotes."""

    def test_single_line(self):
        assert parse_quotes("hello") == "<p>hello</p>"

    def test_lines_in_paragraph_joined_with_line_break(self):
        assert parse_quotes("hello\nworld") == "<p>hello\n<br />world</p>"

    def test_blank_line_separates_paragraphs(self):
        assert parse_quotes("one\n\ntwo") == "<p>one</p><p>two</p>"

    def test_empty_text_renders_nothing(self):
        assert parse_quotes("") == ""

    def test_marker_inside_line_is_not_a_quote(self):
        assert parse_quotes("a > b") == "<p>a > b</p>"


class TestQuotes:
    """Runs of '>' lines."""

    def test_quote_lines_joined_then_answer_paragraph(self):
        result = parse_quotes("> line one\n> line two\n\nanswer")

        assert result == (
            f"{QUOTE}<p>line one\n<br />line two</p></blockquote><p>answer</p>"
        )

    def test_bare_marker_separates_quote_paragraphs(self):
        result = parse_quotes("> para one\n>\n> para two\n\nanswer")

        assert result == (
            f"{QUOTE}<p>para one</p><p>para two</p></blockquote><p>answer</p>"
        )

    def test_blank_line_followed_by_quote_continues_quote(self):
        result = parse_quotes("> first\n\n> second")

        assert result == f"{QUOTE}<p>first</p><p>second</p></blockquote>"

    def test_unprefixed_line_closes_quote(self):
        result = parse_quotes("> quoted\nreply")

        assert result == f"{QUOTE}<p>quoted</p></blockquote><p>reply</p>"

    def test_quote_at_end_of_input_is_closed(self):
        assert parse_quotes("intro\n\n> tail") == (
            f"<p>intro</p>{QUOTE}<p>tail</p></blockquote>"
        )

    def test_marker_without_space(self):
        assert parse_quotes(">tight") == f"{QUOTE}<p>tight</p></blockquote>"

    def test_lone_marker_renders_nothing(self):
        assert parse_quotes(">") == ""

    def test_parser_instance_is_reusable(self):
        parser = QuoteParser()

        parser.parse("> one")

        assert parser.parse("two") == "<p>two</p>"
