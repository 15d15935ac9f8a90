"""Membership domain models - voters and recipients."""

from app.models.membership.entities import Recipient, Voter
from app.models.membership.recipient import RECIPIENT_DDL
from app.models.membership.voter import VOTER_DDL

__all__ = [
    "VOTER_DDL",
    "RECIPIENT_DDL",
    "Voter",
    "Recipient",
]
