from app.services.council.configuration import ConfigurationProjector
from app.services.council.lifecycle import CouncilLifecycle
from app.services.council.roles import RoleProjector

__all__ = ["ConfigurationProjector", "CouncilLifecycle", "RoleProjector"]
