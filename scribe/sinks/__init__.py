"""Sinks for the rendered document: file commit and issue comment."""

from scribe.sinks.file import FileSink
from scribe.sinks.issue import IssueSink

__all__ = ["FileSink", "IssueSink"]
