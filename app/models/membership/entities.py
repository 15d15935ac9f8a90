"""Membership domain entities."""

from dataclasses import dataclass
from typing import ClassVar

from app.models.common import BaseEntity


@dataclass
class Voter(BaseEntity):
    """Voting power of one account within one council."""

    BIG_INTS: ClassVar[tuple[str, ...]] = ("voting_power",)

    account: str
    voting_power: int
    flow_council: str
    created_at_block: int
    created_at_timestamp: int
    ballot: str | None = None


@dataclass
class Recipient(BaseEntity):
    """An account eligible to receive votes."""

    account: str
    metadata: str
    flow_council: str
    created_at_block: int
    created_at_timestamp: int
