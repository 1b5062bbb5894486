"""
Logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger with a
format that includes the timestamp, logger name, level and message.
It only configures logging once, so repeated ``build_app`` calls (as in
tests) do not stack handlers.
"""

from __future__ import annotations

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case-insensitive.
            Unknown names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
