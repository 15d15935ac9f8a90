"""Role registry projector - manager role grants per council."""

from loguru import logger

from app.models import FlowCouncilManager
from app.models.common import ids
from app.store import EntityStore
from council_client.events import RoleGrantedEvent, RoleRevokedEvent


class RoleProjector:
    """Projects RoleGranted/RoleRevoked into FlowCouncilManager records."""

    def __init__(self, store: EntityStore):
        self._store = store
        logger.debug("RoleProjector initialized")

    def on_role_granted(self, event: RoleGrantedEvent) -> None:
        """Upsert the grant; grants for untracked councils are dropped."""
        role = ids.to_hex(event.params.role)
        account = ids.to_hex(event.params.account)
        council = self._store.councils.load(ids.council_id(event.address))

        if council is None:
            logger.warning("Flow Council not found for role {} and account {}", role, account)
            return

        self._store.managers.save(
            FlowCouncilManager(
                id=ids.manager_id(council.id, role, account),
                account=account,
                role=role,
                flow_council=council.id,
                created_at_block=event.block_number,
                created_at_timestamp=event.block_timestamp,
            )
        )

    def on_role_revoked(self, event: RoleRevokedEvent) -> None:
        self._store.managers.remove(ids.manager_id(event.address, event.params.role, event.params.account))
