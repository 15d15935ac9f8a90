"""Council lifecycle projector - one-time council creation."""

from loguru import logger

from app.models import Council
from app.models.common import ids
from app.store import EntityStore
from council_client.events import FlowCouncilCreatedEvent


class CouncilLifecycle:
    """Creates councils from factory events and starts tracking them.

    ``reader`` is anything with an async ``config(address, block_number)``
    returning ``super_token`` and ``max_voting_spread``, usually a
    ``FlowCouncilClient``.
    """

    def __init__(self, store: EntityStore, reader):
        self._store = store
        self._reader = reader
        logger.debug("CouncilLifecycle initialized")

    async def on_council_created(self, event: FlowCouncilCreatedEvent) -> Council:
        """Read immutable config, save the council, register the instance.

        Reader errors propagate; nothing is written for this event.
        """
        address = ids.to_hex(event.params.flow_council)
        config = await self._reader.config(address, event.block_number)

        council = Council(
            id=ids.council_id(address),
            metadata=ids.to_hex(event.params.metadata),
            distribution_pool=ids.to_hex(event.params.distribution_pool),
            voter_manager_role=ids.VOTER_MANAGER_ROLE,
            recipient_manager_role=ids.RECIPIENT_MANAGER_ROLE,
            super_token=ids.to_hex(config.super_token),
            max_voting_spread=config.max_voting_spread,
            voters_count=0,
            created_at_block=event.block_number,
            created_at_timestamp=event.block_timestamp,
        )
        self._store.councils.save(council)
        self._store.registry.register(address, event.block_number, event.block_timestamp)

        logger.info("Flow Council {} created at block {}", council.id, event.block_number)
        return council
