"""Tests for the FlowCouncil contract reader."""

import asyncio
import json

import httpx
import pytest

from council_client import FlowCouncilClient, RpcError
from council_client.contract import decode_address, decode_uint, selector
from council_client.contract.client import MAX_VOTING_SPREAD, SUPER_TOKEN

COUNCIL = "0x" + "c0" * 20
TOKEN = "0x" + "ab" * 20


class TestDecoding:
    def test_selector_width(self):
        assert len(selector("superToken()")) == 10

    def test_address(self):
        assert decode_address("0x" + "0" * 24 + TOKEN[2:].upper()) == TOKEN

    def test_uint(self):
        assert decode_uint("0x" + "0" * 63 + "a") == 10

    def test_empty_uint(self):
        assert decode_uint("0x") == 0


def node(requests):
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        requests.append(body)
        call, block = body["params"]
        if call["data"] == SUPER_TOKEN:
            result = "0x" + "0" * 24 + TOKEN[2:]
        elif call["data"] == MAX_VOTING_SPREAD:
            result = "0x" + f"{7:064x}"
        else:
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "error": {"code": -32000, "message": "execution reverted"}})
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    return httpx.MockTransport(handler)


async def read_config(transport, block_number=None):
    async with FlowCouncilClient(transport=transport) as client:
        return await client.config(COUNCIL, block_number)


class TestFlowCouncilClient:
    def test_config(self):
        requests = []
        config = asyncio.run(read_config(node(requests), 16))

        assert config.super_token == TOKEN
        assert config.max_voting_spread == 7
        assert [r["method"] for r in requests] == ["eth_call", "eth_call"]
        assert all(r["params"][1] == "0x10" for r in requests)
        assert all(r["params"][0]["to"] == COUNCIL for r in requests)

    def test_latest_block_by_default(self):
        requests = []
        asyncio.run(read_config(node(requests)))

        assert requests[0]["params"][1] == "latest"

    def test_rpc_error(self):
        async def call():
            async with FlowCouncilClient(transport=node([])) as client:
                return await client._view(COUNCIL, selector("unknown()"), None)

        with pytest.raises(RpcError, match="execution reverted"):
            asyncio.run(call())
