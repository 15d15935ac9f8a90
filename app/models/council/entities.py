"""Council domain entities."""

from dataclasses import dataclass
from typing import ClassVar

from app.models.common import BaseEntity


@dataclass
class Council(BaseEntity):
    """One deployed FlowCouncil contract."""

    BIG_INTS: ClassVar[tuple[str, ...]] = ("max_voting_spread",)

    metadata: str
    distribution_pool: str
    voter_manager_role: str
    recipient_manager_role: str
    super_token: str
    max_voting_spread: int
    voters_count: int
    created_at_block: int
    created_at_timestamp: int


@dataclass
class FlowCouncilManager(BaseEntity):
    """An account holding a management role on a council."""

    account: str
    role: str
    flow_council: str
    created_at_block: int
    created_at_timestamp: int
