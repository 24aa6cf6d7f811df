"""
Logging setup for command-line use.

Library modules only call logging.getLogger(__name__); handlers are
attached here, by the entry point.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
    verbose: bool = False,
    debug: bool = False,
) -> None:
    """
    Configure root logging.

    Args:
        level: Log level when neither verbose nor debug is set
        log_format: Log message format
        log_file: Optional file to log to in addition to stderr
        verbose: Set level to INFO
        debug: Set level to DEBUG (wins over verbose)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=log_format, handlers=handlers)
