"""Repositories package - data access layer for the entity store."""

from app.repositories.ballot import BallotRepository, LatestVoteRepository, VoteRepository
from app.repositories.base import BaseRepository
from app.repositories.common import FLOW_COUNCIL_TEMPLATE, InstanceRegistry
from app.repositories.council import CouncilRepository, ManagerRepository
from app.repositories.db import (
    get_read_connection,
    get_write_connection,
    init_tables,
)
from app.repositories.membership import RecipientRepository, VoterRepository

__all__ = [
    # DB
    "get_read_connection",
    "get_write_connection",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "FLOW_COUNCIL_TEMPLATE",
    "InstanceRegistry",
    # Council
    "CouncilRepository",
    "ManagerRepository",
    # Membership
    "VoterRepository",
    "RecipientRepository",
    # Ballot
    "BallotRepository",
    "VoteRepository",
    "LatestVoteRepository",
]
