"""Data models for issues, comments and rendered documents (Pydantic)."""

from scribe.models.comment import Comment
from scribe.models.document import Block, BlockKind, Document, RenderOptions
from scribe.models.issue import Issue

__all__ = ["Block", "BlockKind", "Comment", "Document", "Issue", "RenderOptions"]
