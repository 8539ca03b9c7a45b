"""Root logger setup for a scribe run.

Everything scribe logs goes under the "scribe" namespace:
- INFO: comments fetched, each mode started, file written, commit pushed,
  comment posted (with its target issue)
- DEBUG: every comment page requested and every git command line
- WARNING: git stderr when a command fails
- ERROR: configuration errors and the fatal error that ends the run

The level comes from LOGGING_LEVEL (or logging.level in the YAML file) and
the line format from LOGGING_FORMAT.
"""

import logging

from scribe.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# urllib3 logs each request line at DEBUG; scribe already logs its pages
NOISY_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names mean INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class ScribeLogging:
    """Configures the root logger from LoggingConfig once, at startup."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Apply level and format to the root logger and quiet HTTP internals."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(self._level, logging.INFO))
