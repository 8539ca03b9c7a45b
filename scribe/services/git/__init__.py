"""Git operations: identity, commits, push."""

from scribe.services.git._run import GitRunnerError
from scribe.services.git.commits import add_and_commit, configure_identity
from scribe.services.git.push_pull import commit_file_and_push, push

__all__ = [
    "GitRunnerError",
    "add_and_commit",
    "commit_file_and_push",
    "configure_identity",
    "push",
]
