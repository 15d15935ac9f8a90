"""Immutable FlowCouncil configuration read at creation time."""

from pydantic import BaseModel


class CouncilConfigSchema(BaseModel):
    """superToken() and maxVotingSpread() of a council instance."""

    super_token: str
    max_voting_spread: int
