"""Ballot domain entities."""

from dataclasses import dataclass, field
from typing import ClassVar

from app.models.common import BaseEntity


@dataclass
class Ballot(BaseEntity):
    """Immutable record of one Voted log."""

    flow_council: str
    voter: str
    created_at_block: int
    created_at_timestamp: int
    votes: list[str] = field(default_factory=list)


@dataclass
class Vote(BaseEntity):
    """One recipient/amount line of a ballot."""

    BIG_INTS: ClassVar[tuple[str, ...]] = ("amount",)

    recipient: str
    voted_by: str
    amount: int
    created_at_block: int
    created_at_timestamp: int


@dataclass
class LatestVote(Vote):
    """Current allocation of a voter to a recipient, overwritten on every vote."""
