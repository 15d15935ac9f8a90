"""Deterministic entity ids derived from event data."""

from web3 import Web3

VOTER_MANAGER_ROLE_NAME = "VOTER_MANAGER_ROLE"
RECIPIENT_MANAGER_ROLE_NAME = "RECIPIENT_MANAGER_ROLE"


def to_hex(value: bytes | str) -> str:
    """Render bytes or a hex string as lowercase 0x-prefixed hex."""
    if isinstance(value, (bytes, bytearray)):
        return Web3.to_hex(value)
    value = value.lower()
    return value if value.startswith("0x") else f"0x{value}"


def role_digest(name: str) -> str:
    """keccak-256 of an ASCII role name."""
    return Web3.to_hex(Web3.keccak(text=name))


VOTER_MANAGER_ROLE = role_digest(VOTER_MANAGER_ROLE_NAME)
RECIPIENT_MANAGER_ROLE = role_digest(RECIPIENT_MANAGER_ROLE_NAME)


def council_id(address: str) -> str:
    return to_hex(address)


def manager_id(council: str, role: str, account: str) -> str:
    return f"{to_hex(council)}-{to_hex(role)}-{to_hex(account)}"


def voter_id(council: str, account: str) -> str:
    return f"{to_hex(council)}-{to_hex(account)}"


def recipient_id(council: str, account: str) -> str:
    return f"{to_hex(council)}-{to_hex(account)}"


def ballot_id(tx_hash: str, log_index: int) -> str:
    """One ballot per Voted log, unique even for repeated votes by one voter."""
    return f"{to_hex(tx_hash)}-{log_index}"


def vote_id(voter: str, recipient: str, timestamp: int) -> str:
    """Vote ids omit the ballot, so equal timestamps for one voter/recipient pair collide."""
    return f"{to_hex(voter)}-{to_hex(recipient)}-{timestamp}"


def latest_vote_id(council: str, voter: str, recipient: str) -> str:
    return f"{to_hex(council)}-{to_hex(voter)}-{to_hex(recipient)}"
