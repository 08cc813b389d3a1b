"""Logging helpers for the Gemini chat component."""

import sys

from loguru import logger

from gemini_chat.core.constants import LOGS_FPATH

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def configure_logger(source: str) -> None:
    """Configure Loguru logging."""
    # Clear any previously added handlers
    logger.remove()

    # Console handler: ERROR and above
    logger.add(sink=sys.stderr, level="ERROR", format=LOG_FORMAT)

    # File handler: DEBUG+, rotated daily, keep 7 days, zipped
    LOGS_FPATH.mkdir(parents=True, exist_ok=True)
    log_path = LOGS_FPATH / f"{source}_{'{time:YYYYMMDD}'}.log"

    logger.add(
        sink=str(log_path),
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    logger.info(
        f"Logger configured for source '{source}'. "
        f"Sinks: stderr (level=ERROR+), file (level=DEBUG+) at '{log_path}'."
    )


def add_console_sink(verbose: int) -> None:
    """Add a console side channel: -v for INFO, -vv for DEBUG."""
    if verbose <= 0:
        return
    level = "DEBUG" if verbose > 1 else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>",
    )
