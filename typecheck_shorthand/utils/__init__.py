"""
Utility functions and helpers.

This module contains shared utilities used across typecheck_shorthand
components.

Example:
    ```python
    from typecheck_shorthand.utils import setup_logging

    setup_logging(level="DEBUG", log_file="typecheck.log")
    ```
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Union[str, int] = "INFO", log_file: Optional[Path] = None) -> None:
    """
    Attach a handler to the package logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level name or number
        log_file: Optional file to log to instead of stderr
    """
    logger = logging.getLogger("typecheck_shorthand")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


__all__ = ["setup_logging"]
