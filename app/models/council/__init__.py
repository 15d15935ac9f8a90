"""Council domain models - councils and role managers."""

from app.models.council.council import COUNCIL_DDL
from app.models.council.entities import Council, FlowCouncilManager
from app.models.council.manager import MANAGER_DDL

__all__ = [
    "COUNCIL_DDL",
    "MANAGER_DDL",
    "Council",
    "FlowCouncilManager",
]
