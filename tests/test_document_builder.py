"""Tests for scribe.services.document_builder (quoting, dates, separators)."""

from datetime import datetime, timezone

import pytest

from scribe.models import Block, BlockKind, Comment, Document, RenderOptions
from scribe.services.document_builder import (
    PLAIN_SEPARATOR,
    QUOTED_SEPARATOR,
    build_content,
    build_document,
    build_ticket_body,
    format_datetime,
    quote,
    render_block,
    render_parts,
)

T0 = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


def _comment(n: int, body: str, created_at: datetime = T0) -> Comment:
    return Comment(id=n, body=body, author="octocat", created_at=created_at)


PLAIN = RenderOptions()
QUOTED = RenderOptions(quote=True)


class TestQuote:
    """quote() prefixes every line with the quote marker."""

    def test_single_line(self) -> None:
        assert quote("hello") == ">hello"

    def test_crlf_lines(self) -> None:
        assert quote("a\r\nb\r\nc") == ">a\r\n>b\r\n>c"

    def test_lf_lines(self) -> None:
        assert quote("a\nb") == ">a\n>b"

    def test_marker_count_is_line_breaks_plus_one(self) -> None:
        """N line breaks give N+1 markers."""
        for text in ["x", "x\r\ny", "x\r\n\r\ny\r\nz", "\r\n"]:
            breaks = text.count("\r\n")
            assert quote(text).count(">") == breaks + 1

    def test_empty_text(self) -> None:
        assert quote("") == ">"


class TestFormatDatetime:
    """format_datetime converts UTC to the configured zone."""

    def test_converts_to_zone(self) -> None:
        assert format_datetime(T0, "Asia/Tokyo", "%Y-%m-%d %H:%M") == "2024-01-15 19:00"

    def test_parses_iso_string(self) -> None:
        assert format_datetime("2024-01-15T10:00:00Z", "UTC", "%H:%M:%S") == "10:00:00"

    def test_naive_is_utc(self) -> None:
        naive = datetime(2024, 1, 15, 23, 30)
        assert format_datetime(naive, "Europe/Berlin", "%d %H:%M") == "16 00:30"


class TestBuildTicketBody:
    """build_ticket_body renders the issue description block."""

    def test_empty_without_body(self) -> None:
        assert build_ticket_body(None, T0, RenderOptions(with_date=True)) == ""
        assert build_ticket_body("", T0, QUOTED) == ""

    def test_plain(self) -> None:
        assert build_ticket_body("desc", None, PLAIN) == "desc\r\n"

    def test_quoted(self) -> None:
        """Quoted description with no comments has no trailing separator."""
        assert build_ticket_body("desc", None, QUOTED) == ">desc\r\n"

    def test_quoted_multiline(self) -> None:
        assert build_ticket_body("a\r\nb", None, QUOTED) == ">a\r\n>b\r\n"

    def test_with_date(self) -> None:
        opts = RenderOptions(with_date=True, time_format="%Y-%m-%d")
        assert build_ticket_body("desc", T0, opts) == "desc\r\n\r\n> 2024-01-15\r\n"

    def test_with_date_but_no_timestamp(self) -> None:
        opts = RenderOptions(with_date=True)
        assert build_ticket_body("desc", None, opts) == "desc\r\n"


class TestBuildContent:
    """build_content renders comments with separators between blocks."""

    @pytest.mark.parametrize("options", [PLAIN, QUOTED, RenderOptions(quote=True, with_date=True)])
    @pytest.mark.parametrize("ticket_body", ["", "desc\r\n"])
    def test_no_comments_is_empty(self, options: RenderOptions, ticket_body: str) -> None:
        assert build_content([], ticket_body, options) == ""

    def test_two_comments_plain(self) -> None:
        comments = [_comment(1, "hi"), _comment(2, "bye")]
        assert build_content(comments, "", PLAIN) == "hi\r\n\r\n---\r\n\r\nbye\r\n"

    def test_two_comments_quoted(self) -> None:
        comments = [_comment(1, "hi"), _comment(2, "bye")]
        assert build_content(comments, "", QUOTED) == ">hi\r\n\r\n>---\r\n>\r\n>bye\r\n"

    def test_separator_before_first_comment_when_ticket_body(self) -> None:
        content = build_content([_comment(1, "hi")], ">desc\r\n", QUOTED)
        assert content == "\r\n>---\r\n>\r\n>hi\r\n"

    def test_no_separator_before_first_comment_without_ticket_body(self) -> None:
        assert build_content([_comment(1, "hi")], "", PLAIN) == "hi\r\n"

    def test_with_date(self) -> None:
        opts = RenderOptions(with_date=True, timezone="UTC", time_format="%H:%M")
        assert build_content([_comment(1, "hi")], "", opts) == "hi\r\n\r\n> 10:00\r\n"

    def test_order_is_preserved(self) -> None:
        """Comments are rendered in the order given, not by timestamp."""
        later = datetime(2025, 1, 1, tzinfo=timezone.utc)
        comments = [_comment(1, "second", later), _comment(2, "first", T0)]
        content = build_content(comments, "", PLAIN)
        assert content.index("second") < content.index("first")


class TestDocument:
    """build_document / render_parts: one document, two rendered parts."""

    def test_separator_count_is_blocks_minus_one(self) -> None:
        for n_comments in range(0, 5):
            for body in ("", "desc"):
                comments = [_comment(i, f"c{i}") for i in range(n_comments)]
                document = build_document(body, T0, comments)
                text = "".join(render_parts(document, PLAIN))
                assert text.count(PLAIN_SEPARATOR) == document.separator_count
                expected_blocks = n_comments + (1 if body else 0)
                assert len(document.blocks) == expected_blocks

    def test_parts_concatenate_to_document(self) -> None:
        comments = [_comment(1, "a\r\nb"), _comment(2, "c")]
        opts = RenderOptions(quote=True, with_date=True)
        ticket_body = build_ticket_body("desc", T0, opts)
        content = build_content(comments, ticket_body, opts)
        document = build_document("desc", T0, comments)
        assert (ticket_body, content) == render_parts(document, opts)
        assert (ticket_body + content).count(QUOTED_SEPARATOR) == 2

    def test_first_block_is_ticket_body(self) -> None:
        document = build_document("desc", None, [_comment(1, "hi")])
        assert document.blocks[0].kind == BlockKind.TICKET_BODY
        assert document.blocks[1].kind == BlockKind.COMMENT

    def test_empty_document_renders_empty(self) -> None:
        assert render_parts(Document(), QUOTED) == ("", "")

    def test_comments_only_document_has_no_leading_separator(self) -> None:
        document = build_document(None, None, [_comment(1, "hi"), _comment(2, "bye")])
        assert render_parts(document, QUOTED) == ("", ">hi\r\n\r\n>---\r\n>\r\n>bye\r\n")

    def test_ticket_body_only_document(self) -> None:
        assert render_parts(build_document("desc", None, []), QUOTED) == (">desc\r\n", "")

    def test_render_block_quotes_body_not_date(self) -> None:
        block = Block(kind=BlockKind.COMMENT, body="x", created_at=T0)
        opts = RenderOptions(quote=True, with_date=True, time_format="%Y")
        assert render_block(block, opts) == ">x\r\n\r\n> 2024\r\n"
