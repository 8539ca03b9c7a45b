"""Run the configured modes: fetch comments once, render and send per mode."""

import logging
from pathlib import Path

from scribe.adapters.base import TrackerAdapter
from scribe.config import MODE_FILE, MODE_ISSUE, AppConfig, ConfigError
from scribe.models import Comment, RenderOptions
from scribe.services.comment_fetcher import fetch_comments
from scribe.services.document_builder import build_document, render_parts
from scribe.sinks import FileSink, IssueSink

log = logging.getLogger("scribe.runner")


def render_options(config: AppConfig, mode: str) -> RenderOptions:
    return RenderOptions(
        quote=config.quote_for(mode),
        with_date=config.with_date,
        timezone=config.timezone,
        time_format=config.time_format,
    )


def run_mode(
    mode: str,
    comments: list[Comment],
    config: AppConfig,
    adapter: TrackerAdapter,
    repo_dir: Path | None = None,
) -> None:
    """Render the thread for one mode and hand it to that mode's sink."""
    options = render_options(config, mode)
    document = build_document(config.issue_body, config.issue_created_at, comments)
    ticket_body, content = render_parts(document, options)
    log.info(
        "Running mode %s (blocks=%d, separators=%d, quote=%s, with_date=%s)",
        mode,
        len(document.blocks),
        document.separator_count,
        options.quote,
        options.with_date,
    )
    if mode == MODE_FILE:
        FileSink(config, repo_dir=repo_dir).send(ticket_body, content)
    elif mode == MODE_ISSUE:
        IssueSink(adapter, config).send(ticket_body, content)
    else:
        raise ConfigError(f"unknown mode: {mode!r}")


def run(config: AppConfig, adapter: TrackerAdapter, repo_dir: Path | None = None) -> None:
    """Run every configured mode in order; the first failure aborts the rest."""
    if config.issue_number is None:
        raise ConfigError("ISSUE_NUMBER is not set")
    comments = fetch_comments(adapter, config.github.repository, config.issue_number)
    for mode in config.modes:
        run_mode(mode, comments, config, adapter, repo_dir=repo_dir)
