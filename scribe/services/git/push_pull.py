"""Push to remote."""

import logging
from pathlib import Path

from scribe.services.git._run import _run_git
from scribe.services.git.commits import add_and_commit, configure_identity


def push(
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Push the current branch to its upstream."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["push"], cwd=cwd, log=log)
    if log:
        log.info("Pushed to remote")


def commit_file_and_push(
    path: Path,
    commit_message: str,
    committer_name: str,
    committer_email: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Configure identity, stage and commit one file, then push.

    Pass committer_name and committer_email from config (COMMITTER_NAME,
    COMMITTER_EMAIL).
    """
    configure_identity(committer_name, committer_email, repo_dir=repo_dir, log=log)
    add_and_commit(path, commit_message, repo_dir=repo_dir, log=log)
    push(repo_dir=repo_dir, log=log)
