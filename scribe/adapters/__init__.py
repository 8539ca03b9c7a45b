"""Issue tracker adapters."""

from scribe.adapters.base import TrackerAdapter, TrackerError
from scribe.adapters.github import GitHubAdapter

__all__ = ["GitHubAdapter", "TrackerAdapter", "TrackerError"]
