"""Main indexing orchestration."""

import asyncio
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from app.repositories.db import get_write_connection
from app.store import EntityStore
from council_client import FlowCouncilClient, set_rpc_config
from etl.dispatch import Dispatcher, Outcome
from etl.feed import read_feed
from settings import DB_PATH, FACTORY_ADDRESSES, MAX_CONCURRENT, RPC_TIMEOUT, RPC_URL, STRICT_MODE


async def index_events(events: Iterable[dict], dispatcher: Dispatcher) -> dict[str, int]:
    """Process events strictly one at a time, in order."""
    for event in events:
        await dispatcher.process(event)

    return {outcome.value: dispatcher.counts[outcome] for outcome in Outcome}


async def _index_async(path: Path, db_path: str, strict: bool) -> dict[str, int]:
    """Async indexing implementation."""
    conn = get_write_connection(db_path)
    store = EntityStore(conn)
    set_rpc_config(RPC_URL, RPC_TIMEOUT)

    try:
        async with FlowCouncilClient(max_concurrent=MAX_CONCURRENT) as client:
            dispatcher = Dispatcher(store, client, strict=strict, factories=FACTORY_ADDRESSES)
            stats = await index_events(read_feed(path), dispatcher)
    finally:
        conn.close()

    logger.info("Indexing complete: {}", stats)
    return stats


def index_feed(
    path: str | Path,
    db_path: str = DB_PATH,
    strict: bool = STRICT_MODE,
) -> dict[str, int]:
    """Main indexing entry point."""
    logger.info("Indexing {}{}", path, " [STRICT]" if strict else "")
    return asyncio.run(_index_async(Path(path), db_path, strict))
