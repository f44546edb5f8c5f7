"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "WARNING", *, force: bool = False) -> None:
    """Configure the root logger for console output.

    Unknown level names raise ValueError so a typo on the command line is not
    silently ignored.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        resolved = level

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        root_logger.setLevel(resolved)
        return

    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=force)
