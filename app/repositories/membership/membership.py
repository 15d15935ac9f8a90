"""Membership repositories - voters and recipients."""

from app.models import Recipient, Voter
from app.repositories.base import BaseRepository


class VoterRepository(BaseRepository[Voter]):
    """Repository for Voter entities."""

    table = "voter"
    entity = Voter

    def count_for_council(self, council_id: str) -> int:
        """Live voters of a council."""
        return self.count("flow_council = ?", [council_id])


class RecipientRepository(BaseRepository[Recipient]):
    """Repository for Recipient entities."""

    table = "recipient"
    entity = Recipient
