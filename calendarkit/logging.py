"""
Console logging setup for applications using calendarkit.

The library itself only creates module-level loggers under the
``calendarkit`` namespace and never configures handlers on import. Call
``configure_logging`` from an application entry point to see its output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_LOGGER = "calendarkit"


def config_console_handler(level: int = logging.INFO, color: bool = True) -> RichHandler:
    """
    Build a RichHandler writing to stderr.

    At DEBUG level the handler also shows the source location of each record.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    debug_mode = level <= logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s"))

    return handler


def configure_logging(level: int | str = logging.INFO, color: bool = True) -> logging.Logger:
    """
    Attach a console handler to the ``calendarkit`` logger.

    Calling it again replaces the previously installed handler instead of
    stacking a second one.

    Args:
        level: Numeric level or level name, e.g. ``"DEBUG"``
        color: Enable colored output

    Returns:
        The configured ``calendarkit`` logger
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logger = logging.getLogger(PROJECT_LOGGER)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    logger.addHandler(config_console_handler(level=level, color=color))
    logger.setLevel(level)

    return logger
