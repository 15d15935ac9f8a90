"""Event dispatch - route each decoded event to its projector."""

import inspect
from collections import Counter
from enum import StrEnum

from loguru import logger
from pydantic import ValidationError

from app.models.common.ids import to_hex
from app.services import (
    BallotProjector,
    ConfigurationProjector,
    CouncilLifecycle,
    MembershipProjector,
    RoleProjector,
)
from app.store import EntityStore
from council_client.events import EVENT_SCHEMAS, EventName, EventSchema


class Outcome(StrEnum):
    """What happened to one event."""

    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


class Dispatcher:
    """Runs one projector per event, one transaction per event.

    Council events are routed only for instances in the registry; factory
    events only for the configured factory addresses (any address when none
    are configured). Failures roll back the event and never stop the stream.
    """

    def __init__(
        self,
        store: EntityStore,
        reader,
        strict: bool = False,
        factories: list[str] | None = None,
    ):
        self._store = store
        self._factories = {to_hex(a) for a in factories or []}
        self.counts: Counter = Counter()

        lifecycle = CouncilLifecycle(store, reader)
        roles = RoleProjector(store)
        membership = MembershipProjector(store, strict)
        ballots = BallotProjector(store, strict)
        configuration = ConfigurationProjector(store, strict)

        self._handlers = {
            EventName.FLOW_COUNCIL_CREATED: lifecycle.on_council_created,
            EventName.ROLE_GRANTED: roles.on_role_granted,
            EventName.ROLE_REVOKED: roles.on_role_revoked,
            EventName.VOTER_ADDED: membership.on_voter_added,
            EventName.VOTER_REMOVED: membership.on_voter_removed,
            EventName.VOTER_EDITED: membership.on_voter_edited,
            EventName.RECIPIENT_ADDED: membership.on_recipient_added,
            EventName.RECIPIENT_REMOVED: membership.on_recipient_removed,
            EventName.VOTED: ballots.on_voted,
            EventName.MAX_VOTING_SPREAD_SET: configuration.on_max_voting_spread_set,
        }
        logger.debug("Dispatcher initialized: {} handlers, strict={}", len(self._handlers), strict)

    def _is_routed(self, name: EventName, event: EventSchema) -> bool:
        """Unregistered councils are dropped here, so projector "council not found" warnings only fire on direct calls."""
        if name == EventName.FLOW_COUNCIL_CREATED:
            return not self._factories or to_hex(event.address) in self._factories
        return self._store.registry.is_tracked(event.address)

    async def _apply(self, name: EventName, event: EventSchema) -> None:
        with logger.contextualize(event=name.value, block=event.block_number, log_index=event.log_index):
            self._store.begin()
            try:
                result = self._handlers[name](event)
                if inspect.isawaitable(result):
                    await result
                self._store.commit()
            except Exception:
                self._store.rollback()
                raise

    async def process(self, payload: dict) -> Outcome:
        """Project one decoded event."""
        outcome = await self._process(payload)
        self.counts[outcome] += 1
        return outcome

    async def _process(self, payload: dict) -> Outcome:
        try:
            name = EventName(payload.get("event"))
        except ValueError:
            logger.debug("Unhandled event {}", payload.get("event"))
            return Outcome.SKIPPED

        try:
            event = EVENT_SCHEMAS[name].model_validate(payload)
        except ValidationError as e:
            logger.error("Invalid {} payload: {}", name, e)
            return Outcome.FAILED

        if not self._is_routed(name, event):
            logger.debug("{} from untracked address {}, skipping", name, event.address)
            return Outcome.SKIPPED

        try:
            await self._apply(name, event)
        except Exception as e:
            logger.error(
                "Failed {} at block {} (tx {}, log {}): {}",
                name,
                event.block_number,
                event.transaction_hash,
                event.log_index,
                e,
            )
            return Outcome.FAILED

        return Outcome.APPLIED
