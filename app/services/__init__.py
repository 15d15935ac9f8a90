"""Services package - event projector exports."""

from app.services.ballot import BallotProjector
from app.services.council import ConfigurationProjector, CouncilLifecycle, RoleProjector
from app.services.membership import MembershipProjector

__all__ = [
    "BallotProjector",
    "ConfigurationProjector",
    "CouncilLifecycle",
    "MembershipProjector",
    "RoleProjector",
]
