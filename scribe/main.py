"""Scribe entry point.

Reads the comment thread of an issue and writes it to a file in the
repository (mode "file") and/or posts it as a comment on another issue
(mode "issue"). Usage: scribe [--config scribe.yaml] [--check].
"""

import argparse
import logging
import sys
from pathlib import Path

from scribe.adapters.github import GitHubAdapter
from scribe.config import ConfigError, load_config
from scribe.logging import ScribeLogging
from scribe.runner import run


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="scribe",
        description="Scribe - archive an issue's comment thread to a file or another issue",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("scribe.yaml"),
        help="Path to optional YAML config file (env vars still apply)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, run modes, map failures to exit status."""
    args = parse_args(argv)
    log = logging.getLogger("scribe.main")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        log.error("Configuration error: %s", e)
        return 1

    ScribeLogging(config.logging).setup()

    if args.check:
        print("Config OK:", config.github.repository, ",".join(config.modes))
        return 0

    adapter = GitHubAdapter(token=config.github_token_resolved or "", api_url=config.github.api_url)
    try:
        run(config, adapter)
    except ConfigError as e:
        log.error("Configuration error: %s", e)
        return 1
    except Exception as e:
        log.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
