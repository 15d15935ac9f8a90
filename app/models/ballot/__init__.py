"""Ballot domain models - ballots, votes and latest votes."""

from app.models.ballot.ballot import BALLOT_DDL
from app.models.ballot.entities import Ballot, LatestVote, Vote
from app.models.ballot.vote import LATEST_VOTE_DDL, VOTE_DDL

__all__ = [
    "BALLOT_DDL",
    "VOTE_DDL",
    "LATEST_VOTE_DDL",
    "Ballot",
    "Vote",
    "LatestVote",
]
