"""Tests for council creation and configuration projectors."""

import asyncio

import pytest

from app.models.common import ids
from app.services import ConfigurationProjector, CouncilLifecycle
from council_client.events import FlowCouncilCreatedEvent, MaxVotingSpreadSetEvent

FACTORY = "0x" + "f0" * 20
NEW_COUNCIL = "0x" + "C1" * 20
POOL = "0x" + "d0" * 20
COUNCIL = "0x" + "c0" * 20


def created(make_event, **envelope):
    return make_event(
        FlowCouncilCreatedEvent,
        address=FACTORY,
        flow_council=NEW_COUNCIL,
        metadata="0x1234",
        distribution_pool=POOL,
        **envelope,
    )


class TestCouncilCreated:
    def test_creates_council(self, store, reader, make_event):
        council = asyncio.run(CouncilLifecycle(store, reader).on_council_created(created(make_event)))

        stored = store.councils.load(NEW_COUNCIL.lower())
        assert stored == council
        assert stored.voters_count == 0
        assert stored.metadata == "0x1234"
        assert stored.distribution_pool == POOL
        assert stored.max_voting_spread == 3
        assert stored.voter_manager_role == ids.role_digest("VOTER_MANAGER_ROLE")
        assert stored.recipient_manager_role == ids.role_digest("RECIPIENT_MANAGER_ROLE")
        assert stored.created_at_block == 100

    def test_reads_config_at_creation_block(self, store, reader, make_event):
        asyncio.run(CouncilLifecycle(store, reader).on_council_created(created(make_event, block_number=42)))

        assert reader.calls == [(NEW_COUNCIL.lower(), 42)]

    def test_registers_instance(self, store, reader, make_event):
        asyncio.run(CouncilLifecycle(store, reader).on_council_created(created(make_event)))

        assert store.registry.is_tracked(NEW_COUNCIL)
        assert not store.registry.is_tracked(FACTORY)

    def test_replay_is_idempotent(self, store, reader, make_event):
        lifecycle = CouncilLifecycle(store, reader)
        first = asyncio.run(lifecycle.on_council_created(created(make_event)))
        second = asyncio.run(lifecycle.on_council_created(created(make_event)))

        assert first == second
        assert store.councils.count() == 1
        assert store.registry.addresses() == [NEW_COUNCIL.lower()]

    def test_reader_failure_writes_nothing(self, store, failing_reader, make_event):
        with pytest.raises(ConnectionError):
            asyncio.run(CouncilLifecycle(store, failing_reader).on_council_created(created(make_event)))

        assert store.councils.count() == 0
        assert store.registry.addresses() == []


class TestMaxVotingSpreadSet:
    def test_updates_council(self, store, council, make_event):
        ConfigurationProjector(store).on_max_voting_spread_set(
            make_event(MaxVotingSpreadSetEvent, max_voting_spread=10)
        )

        assert store.councils.load(COUNCIL).max_voting_spread == 10

    def test_keeps_other_fields(self, store, council, make_event):
        ConfigurationProjector(store).on_max_voting_spread_set(
            make_event(MaxVotingSpreadSetEvent, max_voting_spread=10)
        )

        stored = store.councils.load(COUNCIL)
        assert stored.super_token == council.super_token
        assert stored.created_at_block == council.created_at_block

    def test_missing_council_is_silent(self, store, make_event, logged_warnings):
        ConfigurationProjector(store).on_max_voting_spread_set(
            make_event(MaxVotingSpreadSetEvent, max_voting_spread=10)
        )

        assert store.councils.count() == 0
        assert logged_warnings == []

    def test_missing_council_warns_when_strict(self, store, make_event, logged_warnings):
        ConfigurationProjector(store, strict=True).on_max_voting_spread_set(
            make_event(MaxVotingSpreadSetEvent, max_voting_spread=10)
        )

        assert store.councils.count() == 0
        assert any("Flow Council not found" in m for m in logged_warnings)
