"""Set committer identity, stage a path and commit."""

import logging
from pathlib import Path

from scribe.services.git._run import _run_git


def configure_identity(
    name: str,
    email: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Write user.name and user.email into the repository config."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["config", "user.name", name], cwd=cwd, log=log)
    _run_git(["config", "user.email", email], cwd=cwd, log=log)


def add_and_commit(
    path: Path,
    commit_message: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Stage a single path and commit it.

    Raises GitRunnerError on failure, including when there is nothing to
    commit.

    Args:
        path: File to stage, absolute or relative to repo_dir.
        commit_message: Commit message.
        repo_dir: Repository directory; uses cwd if None.
        log: Optional logger.
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["add", "--", str(path)], cwd=cwd, log=log)
    _run_git(["commit", "-m", commit_message], cwd=cwd, log=log)
    if log:
        log.info("Committed %s: %s", path, commit_message)
