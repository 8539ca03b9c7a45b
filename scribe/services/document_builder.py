"""Render an issue description and its comments into one text document.

Output uses CRLF line breaks throughout; GitHub normalizes files with mixed
line endings to CRLF, so the whole document is written that way.
"""

import re
from datetime import datetime, timezone
from typing import List, Sequence, Tuple
from zoneinfo import ZoneInfo

from scribe.models import Block, BlockKind, Comment, Document, RenderOptions

NEWLINE = "\r\n"
QUOTE_MARKER = ">"

PLAIN_SEPARATOR = f"{NEWLINE}---{NEWLINE}{NEWLINE}"
QUOTED_SEPARATOR = f"{NEWLINE}>---{NEWLINE}>{NEWLINE}"

_LINE_BREAK = re.compile(r"\r\n|\n")


def quote(text: str) -> str:
    """Block-quote every line: a marker at the start and after each line break."""
    return QUOTE_MARKER + _LINE_BREAK.sub(lambda m: m.group(0) + QUOTE_MARKER, text)


def format_datetime(timestamp: datetime | str, tz: str = "UTC", time_format: str = "%Y-%m-%d %H:%M:%S") -> str:
    """Format a UTC timestamp in the given IANA time zone.

    Naive datetimes are taken as UTC; strings are parsed as ISO 8601.
    """
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(ZoneInfo(tz)).strftime(time_format)


def separator(options: RenderOptions) -> str:
    return QUOTED_SEPARATOR if options.quote else PLAIN_SEPARATOR


def render_block(block: Block, options: RenderOptions) -> str:
    """Body (quoted if asked), optional date line, trailing line break."""
    text = quote(block.body) if options.quote else block.body
    if options.with_date and block.created_at is not None:
        date = format_datetime(block.created_at, options.timezone, options.time_format)
        text += f"{NEWLINE}{NEWLINE}> {date}"
    return text + NEWLINE


def comment_blocks(comments: Sequence[Comment]) -> List[Block]:
    return [Block(kind=BlockKind.COMMENT, body=c.body, created_at=c.created_at) for c in comments]


def build_document(
    body: str | None,
    created_at: datetime | None,
    comments: Sequence[Comment],
) -> Document:
    """Issue description block (when there is one) followed by comment blocks."""
    blocks: List[Block] = []
    if body:
        blocks.append(Block(kind=BlockKind.TICKET_BODY, body=body, created_at=created_at))
    blocks.extend(comment_blocks(comments))
    return Document(blocks=blocks)


def _render_comments(blocks: Sequence[Block], ticket_body: str, options: RenderOptions) -> str:
    if not blocks:
        return ""
    lead = separator(options) if ticket_body else ""
    return lead + separator(options).join(render_block(b, options) for b in blocks)


def render_parts(document: Document, options: RenderOptions) -> Tuple[str, str]:
    """Render a document as (ticket body, comment content).

    The two parts concatenate to the whole document: one separator between
    each pair of consecutive blocks and none before the first.
    """
    blocks = document.blocks
    ticket_body = ""
    if blocks and blocks[0].kind == BlockKind.TICKET_BODY:
        ticket_body = render_block(blocks[0], options)
        blocks = blocks[1:]
    return ticket_body, _render_comments(blocks, ticket_body, options)


def build_ticket_body(body: str | None, created_at: datetime | None, options: RenderOptions) -> str:
    """Rendered issue description, or empty text when there is none."""
    return render_parts(build_document(body, created_at, []), options)[0]


def build_content(comments: Sequence[Comment], ticket_body: str, options: RenderOptions) -> str:
    """Rendered comments, to be placed right after ticket_body.

    A separator precedes the first comment only when ticket_body already
    occupies the first block.
    """
    return _render_comments(comment_blocks(comments), ticket_body, options)
