"""Ballot repositories - ballots, vote history and latest votes."""

from app.models import Ballot, LatestVote, Vote
from app.repositories.base import BaseRepository


class BallotRepository(BaseRepository[Ballot]):
    """Repository for Ballot entities."""

    table = "ballot"
    entity = Ballot

    def for_voter(self, voter_id: str) -> list[Ballot]:
        """Ballots cast by a voter, oldest first."""
        rows = self.fetchall(
            f"SELECT {', '.join(self._columns)} FROM ballot WHERE voter = ? ORDER BY created_at_block, id",
            [voter_id],
        )
        return [self.entity.from_row(dict(zip(self._columns, r))) for r in rows]


class VoteRepository(BaseRepository[Vote]):
    """Repository for immutable Vote history."""

    table = "vote"
    entity = Vote


class LatestVoteRepository(BaseRepository[LatestVote]):
    """Repository for current voter -> recipient allocations."""

    table = "latest_vote"
    entity = LatestVote
