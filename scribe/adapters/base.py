"""Abstract base for issue tracker adapters."""

from abc import ABC, abstractmethod
from typing import List

from scribe.models import Comment, Issue


class TrackerError(Exception):
    """Raised when an issue tracker API call fails."""

    pass


class TrackerAdapter(ABC):
    """Abstract interface for issue trackers (GitHub, GitHub Enterprise)."""

    @abstractmethod
    def list_comments(
        self,
        repo: str,
        issue_number: int,
        page: int = 1,
        per_page: int = 100,
    ) -> List[Comment]:
        """Fetch one page of comments on an issue, oldest first."""
        ...

    @abstractmethod
    def list_open_issues(self, repo: str, limit: int = 100) -> List[Issue]:
        """List open issues (exclude PRs), most recently created first."""
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue."""
        ...
