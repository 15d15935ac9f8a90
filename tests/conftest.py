"""Shared fixtures: in-memory store, captured warnings, event builders."""

import duckdb
import pytest
from loguru import logger

from app.models import Council
from app.models.common import ids
from app.repositories.db import init_tables
from app.store import EntityStore
from council_client.contract import CouncilConfigSchema
from council_client.events import EVENT_SCHEMAS

EVENT_NAMES = {schema: name for name, schema in EVENT_SCHEMAS.items()}

COUNCIL = "0x" + "c0" * 20
SUPER_TOKEN = "0x" + "70" * 20


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def store(conn):
    return EntityStore(conn)


@pytest.fixture
def logged_warnings():
    """Messages logged at WARNING and above while the test runs."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_event():
    """Build a typed event: make_event(VoterAddedEvent, account=..., voting_power=...)."""

    def make(
        schema,
        address=COUNCIL,
        block_number=100,
        block_timestamp=1_700_000_000,
        transaction_hash="0x" + "ab" * 32,
        log_index=0,
        **params,
    ):
        return schema(
            event=EVENT_NAMES[schema],
            address=address,
            block_number=block_number,
            block_timestamp=block_timestamp,
            transaction_hash=transaction_hash,
            log_index=log_index,
            params=params,
        )

    return make


class FakeReader:
    """Contract reader stand-in recording its calls."""

    def __init__(self, max_voting_spread=3, error=None):
        self.max_voting_spread = max_voting_spread
        self.error = error
        self.calls = []

    async def config(self, address, block_number=None):
        self.calls.append((address, block_number))
        if self.error:
            raise self.error
        return CouncilConfigSchema(super_token=SUPER_TOKEN, max_voting_spread=self.max_voting_spread)


@pytest.fixture
def reader():
    return FakeReader()


@pytest.fixture
def failing_reader():
    return FakeReader(error=ConnectionError("node unavailable"))


@pytest.fixture
def council(store):
    """A council created directly in the store and registered for delivery."""
    entity = Council(
        id=COUNCIL,
        metadata="0x",
        distribution_pool="0x" + "d0" * 20,
        voter_manager_role=ids.VOTER_MANAGER_ROLE,
        recipient_manager_role=ids.RECIPIENT_MANAGER_ROLE,
        super_token=SUPER_TOKEN,
        max_voting_spread=3,
        voters_count=0,
        created_at_block=1,
        created_at_timestamp=1_699_999_000,
    )
    store.councils.save(entity)
    store.registry.register(COUNCIL, 1, 1_699_999_000)
    return entity
