"""Fetch the full comment thread of an issue, page by page."""

import logging
from typing import List

from scribe.adapters.base import TrackerAdapter
from scribe.models import Comment

PER_PAGE = 100

log = logging.getLogger("scribe.services.comment_fetcher")


def fetch_comments(
    adapter: TrackerAdapter,
    repo: str,
    issue_number: int,
    per_page: int = PER_PAGE,
) -> List[Comment]:
    """Return every comment on the issue in the order the tracker lists them.

    Pages are requested until one comes back shorter than per_page. Tracker
    errors propagate unchanged.
    """
    comments: List[Comment] = []
    page = 1
    while True:
        batch = adapter.list_comments(repo, issue_number, page=page, per_page=per_page)
        log.debug("Fetched page %d of %s#%d: %d comments", page, repo, issue_number, len(batch))
        comments.extend(batch)
        if len(batch) < per_page:
            break
        page += 1
    log.info("Fetched %d comments from %s#%d", len(comments), repo, issue_number)
    return comments
