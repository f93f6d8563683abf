"""Logging from config, env and the -v flag.

Levels (inclusive):
- ERROR: critical errors only
- WARNING: non-critical issues and ERROR (default)
- INFO: actions taken (profile saved, URL opened), WARNING, and ERROR
- DEBUG: request lines, raw response bodies, all levels above

Configure via config.yaml (logging.level, logging.format), env
(LOGGING_LEVEL, LOGGING_FORMAT) or `yag -v`, which forces DEBUG.
"""

import logging

from yag.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(levelname)s - %(message)s"


def _resolve_level(level: str, verbose: bool = False) -> int:
    """Level constant for a configured name; unknown names mean WARNING, -v means DEBUG."""
    if verbose:
        return logging.DEBUG
    return LEVELS.get(level.upper().strip(), LEVELS[DEFAULT_LEVEL])


class YagLogging:
    """Root logger setup for one yag invocation."""

    def __init__(self, config: LoggingConfig, verbose: bool = False) -> None:
        self.level = _resolve_level(config.level, verbose)
        self.format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        # force: drop handlers from an earlier setup
        logging.basicConfig(level=self.level, format=self.format, force=True)
