"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

# Bound by the dispatcher for the duration of one event
NO_EVENT = {"event": "-", "block": "-", "log_index": "-"}

EVENT_CONTEXT = "{extra[event]}@{extra[block]}:{extra[log_index]}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Console sink at ``level``; daily DEBUG file sink tagged with the event being projected."""
    logger.remove()
    logger.configure(extra=NO_EVENT)

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
        f"<cyan>{EVENT_CONTEXT}</cyan> | <level>{{message}}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "indexer_{time:YYYY-MM-DD}.log",
            format=f"{{time:YYYY-MM-DD HH:mm:ss}} | {{level: <7}} | {EVENT_CONTEXT} | {{name}}:{{line}} | {{message}}",
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
        )
        logger.info("Logging to {} (console level {})", log_dir, level)

    return logger
