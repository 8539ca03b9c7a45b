"""Rendered thread document: typed blocks plus render options.

A document is an ordered list of visible blocks (the issue description,
then comments). Separators are not stored: they sit between consecutive
blocks and are produced at render time, so the first block is never
preceded by one.
"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class BlockKind(str, Enum):
    """What a block was rendered from."""

    TICKET_BODY = "ticket_body"
    COMMENT = "comment"


class Block(BaseModel):
    """One visible block: raw body text and its UTC creation time."""

    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    body: str
    created_at: datetime | None = None


class Document(BaseModel):
    """Ordered blocks of a thread."""

    blocks: List[Block] = Field(default_factory=list)

    @property
    def separator_count(self) -> int:
        return max(len(self.blocks) - 1, 0)


class RenderOptions(BaseModel):
    """Per-mode rendering switches."""

    model_config = ConfigDict(frozen=True)

    quote: bool = False
    with_date: bool = False
    timezone: str = "UTC"
    time_format: str = "%Y-%m-%d %H:%M:%S"
