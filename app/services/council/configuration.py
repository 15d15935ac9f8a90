"""Configuration projector - mutable council settings."""

from loguru import logger

from app.models.common import ids
from app.store import EntityStore
from council_client.events import MaxVotingSpreadSetEvent


class ConfigurationProjector:
    """Projects MaxVotingSpreadSet onto the council."""

    def __init__(self, store: EntityStore, strict: bool = False):
        self._store = store
        self._strict = strict
        logger.debug("ConfigurationProjector initialized (strict={})", strict)

    def on_max_voting_spread_set(self, event: MaxVotingSpreadSetEvent) -> None:
        """Overwrite max_voting_spread. A missing council is a silent no-op unless strict."""
        council = self._store.councils.load(ids.council_id(event.address))

        if council is None:
            if self._strict:
                logger.warning("Flow Council not found for max voting spread {}", ids.council_id(event.address))
            return

        council.max_voting_spread = event.params.max_voting_spread
        self._store.councils.save(council)
