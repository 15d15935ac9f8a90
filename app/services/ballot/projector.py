"""Ballot projector - vote history and latest allocations."""

from loguru import logger

from app.models import Ballot, LatestVote, Vote
from app.models.common import ids
from app.store import EntityStore
from council_client.events import VotedEvent


class BallotProjector:
    """Projects Voted events into Ballot, Vote and LatestVote records."""

    def __init__(self, store: EntityStore, strict: bool = False):
        self._store = store
        self._strict = strict
        logger.debug("BallotProjector initialized (strict={})", strict)

    def _missing_recipients(self, council_id: str, event: VotedEvent) -> list[str]:
        return [
            ids.to_hex(item.recipient)
            for item in event.params.votes
            if not self._store.recipients.exists(ids.recipient_id(council_id, item.recipient))
        ]

    def on_voted(self, event: VotedEvent) -> Ballot | None:
        """Record one ballot.

        Entries are applied in order. A missing recipient aborts the event:
        votes written for earlier entries stay and no ballot is saved. In
        strict mode every recipient is checked before anything is written.
        """
        council_id = ids.council_id(event.address)
        account = ids.to_hex(event.params.account)
        voter = self._store.voters.load(ids.voter_id(council_id, account))

        if voter is None:
            logger.warning("Voter {} not found, skipping allocation", account)
            return None

        if self._strict:
            missing = self._missing_recipients(council_id, event)
            if missing:
                logger.warning("Recipients {} not found, skipping allocation", missing)
                return None

        timestamp = event.block_timestamp
        vote_ids = []

        for item in event.params.votes:
            recipient = self._store.recipients.load(ids.recipient_id(council_id, item.recipient))

            if recipient is None:
                logger.warning(
                    "Recipient {} not found, skipping allocation ({} of {} votes written)",
                    ids.to_hex(item.recipient),
                    len(vote_ids),
                    len(event.params.votes),
                )
                return None

            vote = Vote(
                id=ids.vote_id(account, recipient.account, timestamp),
                recipient=recipient.id,
                voted_by=account,
                amount=item.amount,
                created_at_block=event.block_number,
                created_at_timestamp=timestamp,
            )
            self._store.votes.save(vote)
            vote_ids.append(vote.id)

            # upsert: the latest entry for a recipient wins
            self._store.latest_votes.save(
                LatestVote(
                    id=ids.latest_vote_id(council_id, account, recipient.account),
                    recipient=recipient.id,
                    voted_by=account,
                    amount=item.amount,
                    created_at_block=event.block_number,
                    created_at_timestamp=timestamp,
                )
            )

        ballot = Ballot(
            id=ids.ballot_id(event.transaction_hash, event.log_index),
            flow_council=council_id,
            voter=voter.id,
            votes=vote_ids,
            created_at_block=event.block_number,
            created_at_timestamp=timestamp,
        )
        self._store.ballots.save(ballot)

        voter.ballot = ballot.id
        self._store.voters.save(voter)

        logger.debug("Ballot {}: {} votes by {}", ballot.id, len(vote_ids), account)
        return ballot
