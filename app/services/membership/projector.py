"""Membership projector - voters, recipients and the council voter count."""

from loguru import logger

from app.models import Recipient, Voter
from app.models.common import ids
from app.store import EntityStore
from council_client.events import (
    RecipientAddedEvent,
    RecipientRemovedEvent,
    VoterAddedEvent,
    VoterEditedEvent,
    VoterRemovedEvent,
)


class MembershipProjector:
    """Projects voter and recipient lifecycle events.

    ``Council.voters_count`` moves by one on every applied add/remove. By
    default duplicates are applied as they come (the counter can drift); in
    strict mode an add for a live voter or a remove for an absent one is
    rejected.
    """

    def __init__(self, store: EntityStore, strict: bool = False):
        self._store = store
        self._strict = strict
        logger.debug("MembershipProjector initialized (strict={})", strict)

    def on_voter_added(self, event: VoterAddedEvent) -> None:
        council_id = ids.council_id(event.address)
        account = ids.to_hex(event.params.account)
        council = self._store.councils.load(council_id)

        if council is None:
            logger.warning("Flow Council not found for voter {}, flow council {}", account, council_id)
            return

        voter_id = ids.voter_id(council_id, account)
        if self._strict and self._store.voters.exists(voter_id):
            logger.warning("Voter {} already exists, ignoring duplicate add", voter_id)
            return

        self._store.voters.save(
            Voter(
                id=voter_id,
                account=account,
                voting_power=event.params.voting_power,
                flow_council=council_id,
                created_at_block=event.block_number,
                created_at_timestamp=event.block_timestamp,
            )
        )
        council.voters_count += 1
        self._store.councils.save(council)

    def on_voter_removed(self, event: VoterRemovedEvent) -> None:
        council_id = ids.council_id(event.address)
        account = ids.to_hex(event.params.account)
        council = self._store.councils.load(council_id)

        if council is None:
            logger.warning("Flow Council not found for voter {}, flow council {}", account, council_id)
            return

        voter_id = ids.voter_id(council_id, account)
        if self._strict and not self._store.voters.exists(voter_id):
            logger.warning("Voter {} not found, ignoring remove", voter_id)
            return

        council.voters_count -= 1
        self._store.voters.remove(voter_id)
        self._store.councils.save(council)

    def on_voter_edited(self, event: VoterEditedEvent) -> None:
        """Overwrite voting power only; the counter is untouched."""
        voter_id = ids.voter_id(event.address, event.params.account)
        voter = self._store.voters.load(voter_id)

        if voter is None:
            logger.warning("Voter not found for id {}", voter_id)
            return

        voter.voting_power = event.params.voting_power
        self._store.voters.save(voter)

    def on_recipient_added(self, event: RecipientAddedEvent) -> None:
        council_id = ids.council_id(event.address)
        account = ids.to_hex(event.params.account)

        self._store.recipients.save(
            Recipient(
                id=ids.recipient_id(council_id, account),
                account=account,
                metadata=ids.to_hex(event.params.metadata),
                flow_council=council_id,
                created_at_block=event.block_number,
                created_at_timestamp=event.block_timestamp,
            )
        )

    def on_recipient_removed(self, event: RecipientRemovedEvent) -> None:
        self._store.recipients.remove(ids.recipient_id(event.address, event.params.account))
