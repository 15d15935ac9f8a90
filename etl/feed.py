"""Event feed - decoded logs as newline-delimited JSON."""

import json
from collections.abc import Iterator
from pathlib import Path

from loguru import logger


def read_feed(path: str | Path) -> Iterator[dict]:
    """Yield events in file order; the feed is already in block/tx/log order."""
    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning("Skipping malformed line {} in {}: {}", line_no, path, e)
