"""FlowCouncil contract reader - view calls over eth_call."""

from loguru import logger
from web3 import Web3

from council_client.base import BaseClient
from council_client.contract.schemas import CouncilConfigSchema


def selector(signature: str) -> str:
    """First four bytes of keccak-256 of a function signature."""
    return Web3.to_hex(Web3.keccak(text=signature)[:4])


SUPER_TOKEN = selector("superToken()")
MAX_VOTING_SPREAD = selector("maxVotingSpread()")


def decode_address(word: str) -> str:
    """Address from the last 20 bytes of an ABI word."""
    return "0x" + word.removeprefix("0x")[-40:].lower().rjust(40, "0")


def decode_uint(word: str) -> int:
    return int(word.removeprefix("0x") or "0", 16)


class FlowCouncilClient(BaseClient):
    """Client for FlowCouncil view functions."""

    async def _view(self, address: str, data: str, block_number: int | None) -> str:
        block = hex(block_number) if block_number is not None else "latest"
        return await self._call("eth_call", [{"to": address, "data": data}, block])

    async def super_token(self, address: str, block_number: int | None = None) -> str:
        """superToken() - the distributed token."""
        return decode_address(await self._view(address, SUPER_TOKEN, block_number))

    async def max_voting_spread(self, address: str, block_number: int | None = None) -> int:
        """maxVotingSpread() - max recipients per voter."""
        return decode_uint(await self._view(address, MAX_VOTING_SPREAD, block_number))

    async def config(self, address: str, block_number: int | None = None) -> CouncilConfigSchema:
        """Both immutable settings, read at the creation block."""
        config = CouncilConfigSchema(
            super_token=await self.super_token(address, block_number),
            max_voting_spread=await self.max_voting_spread(address, block_number),
        )
        logger.debug("Council {} config: {}", address, config)
        return config
