"""Models package - DDL and entities for all domains."""

from app.models.ballot import (
    BALLOT_DDL,
    LATEST_VOTE_DDL,
    VOTE_DDL,
    Ballot,
    LatestVote,
    Vote,
)
from app.models.common import DATA_SOURCE_DDL, BaseEntity
from app.models.council import COUNCIL_DDL, MANAGER_DDL, Council, FlowCouncilManager
from app.models.membership import RECIPIENT_DDL, VOTER_DDL, Recipient, Voter

ALL_DDL = [
    # Council
    COUNCIL_DDL,
    MANAGER_DDL,
    # Membership
    VOTER_DDL,
    RECIPIENT_DDL,
    # Ballot
    BALLOT_DDL,
    VOTE_DDL,
    LATEST_VOTE_DDL,
    # Common
    DATA_SOURCE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "DATA_SOURCE_DDL",
    # Council
    "COUNCIL_DDL",
    "MANAGER_DDL",
    "Council",
    "FlowCouncilManager",
    # Membership
    "VOTER_DDL",
    "RECIPIENT_DDL",
    "Voter",
    "Recipient",
    # Ballot
    "BALLOT_DDL",
    "VOTE_DDL",
    "LATEST_VOTE_DDL",
    "Ballot",
    "Vote",
    "LatestVote",
    # All DDL
    "ALL_DDL",
]
