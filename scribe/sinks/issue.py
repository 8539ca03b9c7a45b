"""Issue sink: post the rendered thread as a comment on an issue."""

import logging

from scribe.adapters.base import TrackerAdapter, TrackerError
from scribe.config import LATEST, AppConfig
from scribe.models import Comment
from scribe.services.document_builder import NEWLINE

log = logging.getLogger("scribe.sinks.issue")


def escape_backticks(text: str) -> str:
    return text.replace("`", "\\`")


def title_line(title: str, url: str) -> str:
    """Markdown heading linking back to the source issue."""
    return f"# ✅ [{escape_backticks(title)}]({url}){NEWLINE}"


def resolve_target_issue(adapter: TrackerAdapter, repo: str, target: str) -> int:
    """Issue number to post to.

    An empty target or 'latest' means the most recently created open issue
    in repo.
    """
    target = target.strip()
    if target and target != LATEST:
        return int(target)
    issues = adapter.list_open_issues(repo, limit=1)
    if not issues:
        raise TrackerError(f"No open issues in {repo} to resolve '{LATEST}'")
    log.info("Resolved '%s' in %s to #%d", LATEST, repo, issues[0].number)
    return issues[0].number


def compose_comment(ticket_body: str, content: str, title: str, url: str, header: str = "") -> str:
    prefix = f"{header}{NEWLINE}{NEWLINE}" if header else ""
    return f"{prefix}{title_line(title, url)}{ticket_body}{content}"


class IssueSink:
    """Posts the document as a new comment on the target issue."""

    def __init__(self, adapter: TrackerAdapter, config: AppConfig) -> None:
        self._adapter = adapter
        self._config = config

    def send(self, ticket_body: str, content: str) -> Comment:
        repo = self._config.target_repo
        number = resolve_target_issue(self._adapter, repo, self._config.target_issue_number)
        body = compose_comment(
            ticket_body,
            content,
            self._config.issue_title,
            self._config.issue_url,
            header=self._config.with_header,
        )
        comment = self._adapter.create_comment(repo, number, body)
        log.info("Posted comment %d on %s#%d", comment.id, repo, number)
        return comment
