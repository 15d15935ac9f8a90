"""Tests for entity id derivation."""

from web3 import Web3

from app.models.common import ids

COUNCIL = "0x" + "c0" * 20
ACCOUNT = "0x" + "a1" * 20


class TestToHex:
    def test_bytes(self):
        assert ids.to_hex(b"\x01\xab") == "0x01ab"

    def test_lowercases(self):
        assert ids.to_hex("0xABCDEF") == "0xabcdef"

    def test_adds_prefix(self):
        assert ids.to_hex("abcd") == "0xabcd"


class TestRoleDigest:
    def test_keccak_of_role_name(self):
        expected = "0x" + Web3.keccak(text="VOTER_MANAGER_ROLE").hex().removeprefix("0x")
        assert ids.VOTER_MANAGER_ROLE == expected

    def test_width(self):
        assert len(ids.RECIPIENT_MANAGER_ROLE) == 66
        assert ids.RECIPIENT_MANAGER_ROLE == ids.RECIPIENT_MANAGER_ROLE.lower()

    def test_roles_differ(self):
        assert ids.VOTER_MANAGER_ROLE != ids.RECIPIENT_MANAGER_ROLE


class TestCompositeIds:
    def test_voter_and_recipient_share_scheme(self):
        assert ids.voter_id(COUNCIL, ACCOUNT) == f"{COUNCIL}-{ACCOUNT}"
        assert ids.recipient_id(COUNCIL, ACCOUNT) == f"{COUNCIL}-{ACCOUNT}"

    def test_case_insensitive(self):
        assert ids.voter_id(COUNCIL.upper().replace("0X", "0x"), ACCOUNT) == ids.voter_id(COUNCIL, ACCOUNT)

    def test_manager(self):
        role = ids.VOTER_MANAGER_ROLE
        assert ids.manager_id(COUNCIL, role, ACCOUNT) == f"{COUNCIL}-{role}-{ACCOUNT}"

    def test_ballot_uses_decimal_log_index(self):
        tx = "0x" + "ab" * 32
        assert ids.ballot_id(tx, 12) == f"{tx}-12"

    def test_vote_omits_council_and_ballot(self):
        recipient = "0x" + "b2" * 20
        assert ids.vote_id(ACCOUNT, recipient, 1700000000) == f"{ACCOUNT}-{recipient}-1700000000"

    def test_latest_vote(self):
        recipient = "0x" + "b2" * 20
        assert ids.latest_vote_id(COUNCIL, ACCOUNT, recipient) == f"{COUNCIL}-{ACCOUNT}-{recipient}"
