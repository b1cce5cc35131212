from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import LoggingConfig


def setup_logging(cfg: LoggingConfig, console: Console | None = None) -> logging.Logger:
    """Configure the ``cargo2port`` logger.

    Log records always go to stderr so stdout only ever carries the
    rendered cargo.crates block.
    """
    logger = logging.getLogger("cargo2port")
    logger.setLevel(_level_from_string(cfg.level))
    logger.handlers = []
    logger.propagate = False

    if cfg.console:
        console_handler = RichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_time=False,
            show_level=True,
            show_path=False,
        )
        console_handler.setLevel(_level_from_string(cfg.level))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)
    else:
        logger.addHandler(logging.NullHandler())

    return logger


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.WARNING)
