"""
Logging configuration for amenhotep.

Log records go to stderr through a rich handler so that dry-run output on
stdout stays clean.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure logging with a rich handler for colored output.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging

    Returns:
        Configured logger instance for amenhotep
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )

    logger = logging.getLogger("amenhotep")
    logger.handlers = [handler]
    logger.setLevel(level)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'amenhotep.pipeline.scanner')
              If None, returns the root amenhotep logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("amenhotep")

    if not name.startswith("amenhotep"):
        name = f"amenhotep.{name}"

    return logging.getLogger(name)
