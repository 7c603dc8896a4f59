"""Logging setup for the farmhand shell and scripts."""

import logging

from rich.logging import RichHandler


def configure_logging(log_level: str = "WARNING") -> None:
    """
    Route all farmhand loggers through a rich console handler.

    Calling this more than once replaces the previously installed handler
    instead of stacking duplicates.
    """
    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if isinstance(existing, RichHandler):
            root_logger.removeHandler(existing)
    root_logger.setLevel(log_level.upper())
    root_logger.addHandler(handler)
