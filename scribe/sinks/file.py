"""File sink: append the rendered thread to a file, commit and push it."""

import logging
from pathlib import Path

from scribe.config import AppConfig
from scribe.services.document_builder import NEWLINE
from scribe.services.git import commit_file_and_push

log = logging.getLogger("scribe.sinks.file")


def sanitize_path(raw: str) -> Path:
    """Drop backticks from a configured path."""
    return Path(raw.replace("`", ""))


def compose_file(
    existing: str | None,
    ticket_body: str,
    content: str,
    header: str = "",
    extra_text_when_modified: str = "",
) -> str:
    """Full file text: prior content and marker, or header for a new file."""
    if existing is not None:
        return f"{existing}{NEWLINE}{extra_text_when_modified}{NEWLINE}{ticket_body}{content}"
    prefix = f"{header}{NEWLINE}{NEWLINE}" if header else ""
    return f"{prefix}{ticket_body}{content}"


def write_file(
    path: Path,
    ticket_body: str,
    content: str,
    header: str = "",
    extra_text_when_modified: str = "",
) -> str:
    """Write the document to path and return the commit message.

    Existing content is kept and the new document appended after it; the
    header is only used when the file is created. Line breaks and any
    bytes of the existing file that are not valid UTF-8 are written as-is.
    """
    existing: str | None = None
    if path.exists():
        existing = path.read_bytes().decode("utf-8", errors="surrogateescape")
        message = f"Update {path.name}"
    else:
        message = f"Add {path.name}"
    path.parent.mkdir(parents=True, exist_ok=True)
    text = compose_file(existing, ticket_body, content, header, extra_text_when_modified)
    path.write_bytes(text.encode("utf-8", errors="surrogateescape"))
    log.info("Wrote %d characters to %s", len(text), path)
    return message


class FileSink:
    """Writes the document into the working tree and pushes a commit."""

    def __init__(self, config: AppConfig, repo_dir: Path | None = None) -> None:
        self._config = config
        self._repo_dir = Path(repo_dir) if repo_dir is not None else Path.cwd()

    @property
    def path(self) -> Path:
        return self._repo_dir / sanitize_path(self._config.filepath)

    def send(self, ticket_body: str, content: str) -> None:
        path = self.path
        message = write_file(
            path,
            ticket_body,
            content,
            header=self._config.with_header,
            extra_text_when_modified=self._config.extra_text_when_modified,
        )
        commit_file_and_push(
            path,
            message,
            self._config.committer_name,
            self._config.committer_email,
            repo_dir=self._repo_dir,
            log=log,
        )
