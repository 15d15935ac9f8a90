"""FlowCouncil contract reader."""

from council_client.contract.client import FlowCouncilClient, decode_address, decode_uint, selector
from council_client.contract.schemas import CouncilConfigSchema

__all__ = [
    "FlowCouncilClient",
    "CouncilConfigSchema",
    "decode_address",
    "decode_uint",
    "selector",
]
