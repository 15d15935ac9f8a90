"""Tests for the role registry projector."""

from app.models.common import ids
from app.services import RoleProjector
from council_client.events import RoleGrantedEvent, RoleRevokedEvent

COUNCIL = "0x" + "c0" * 20
MANAGER = "0x" + "e1" * 20
ROLE = ids.VOTER_MANAGER_ROLE


class TestRoleGranted:
    def test_creates_manager(self, store, council, make_event):
        RoleProjector(store).on_role_granted(make_event(RoleGrantedEvent, role=ROLE, account=MANAGER))

        manager = store.managers.load(ids.manager_id(COUNCIL, ROLE, MANAGER))
        assert manager.account == MANAGER
        assert manager.role == ROLE
        assert manager.flow_council == COUNCIL
        assert manager.created_at_block == 100

    def test_unknown_council_discarded(self, store, make_event, logged_warnings):
        RoleProjector(store).on_role_granted(make_event(RoleGrantedEvent, role=ROLE, account=MANAGER))

        assert store.managers.count() == 0
        assert any("Flow Council not found" in m for m in logged_warnings)

    def test_regrant_overwrites_single_record(self, store, council, make_event):
        projector = RoleProjector(store)
        projector.on_role_granted(make_event(RoleGrantedEvent, role=ROLE, account=MANAGER))
        projector.on_role_granted(make_event(RoleGrantedEvent, block_number=200, role=ROLE, account=MANAGER))

        assert store.managers.count() == 1
        assert store.managers.load(ids.manager_id(COUNCIL, ROLE, MANAGER)).created_at_block == 200

    def test_roles_are_separate_records(self, store, council, make_event):
        projector = RoleProjector(store)
        projector.on_role_granted(make_event(RoleGrantedEvent, role=ROLE, account=MANAGER))
        projector.on_role_granted(make_event(RoleGrantedEvent, role=ids.RECIPIENT_MANAGER_ROLE, account=MANAGER))

        assert len(store.managers.for_council(COUNCIL)) == 2


class TestRoleRevoked:
    def test_grant_then_revoke_leaves_nothing(self, store, council, make_event):
        projector = RoleProjector(store)
        projector.on_role_granted(make_event(RoleGrantedEvent, role=ROLE, account=MANAGER))
        projector.on_role_revoked(make_event(RoleRevokedEvent, role=ROLE, account=MANAGER))

        assert store.managers.load(ids.manager_id(COUNCIL, ROLE, MANAGER)) is None

    def test_revoke_without_grant_is_noop(self, store, council, make_event, logged_warnings):
        RoleProjector(store).on_role_revoked(make_event(RoleRevokedEvent, role=ROLE, account=MANAGER))

        assert store.managers.count() == 0
        assert logged_warnings == []

    def test_revoke_keeps_other_accounts(self, store, council, make_event):
        other = "0x" + "e2" * 20
        projector = RoleProjector(store)
        projector.on_role_granted(make_event(RoleGrantedEvent, role=ROLE, account=MANAGER))
        projector.on_role_granted(make_event(RoleGrantedEvent, role=ROLE, account=other))
        projector.on_role_revoked(make_event(RoleRevokedEvent, role=ROLE, account=MANAGER))

        assert [m.account for m in store.managers.for_council(COUNCIL)] == [other]
