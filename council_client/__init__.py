"""FlowCouncil chain client package - contract reads and event schemas."""

from council_client.base import BaseClient, RpcError, set_rpc_config
from council_client.contract import CouncilConfigSchema, FlowCouncilClient

__all__ = [
    # Base
    "BaseClient",
    "RpcError",
    "set_rpc_config",
    # Clients
    "FlowCouncilClient",
    "CouncilConfigSchema",
]
