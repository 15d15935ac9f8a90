"""Base JSON-RPC client with retry logic."""

import asyncio
import itertools

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

# Default settings
RPC_URL = "http://localhost:8545"
RPC_TIMEOUT = 60


def set_rpc_config(url: str, timeout: int) -> None:
    """Set RPC configuration."""
    global RPC_URL, RPC_TIMEOUT
    RPC_URL = url
    RPC_TIMEOUT = timeout


class RpcError(Exception):
    """Error object returned by the node."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"RPC error {code}: {message}")


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async JSON-RPC client with rate limiting and exponential backoff."""

    def __init__(self, max_concurrent: int = 20, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport
        self._sem = asyncio.Semaphore(max_concurrent)
        self._ids = itertools.count(1)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=RPC_TIMEOUT,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total RPC requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _call(self, method: str, params: list):
        """JSON-RPC request with retry logic."""
        async with self._sem:
            self._request_count += 1
            payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
            resp = await self._client.post(RPC_URL, json=payload)
            resp.raise_for_status()
            body = resp.json()
            if "error" in body:
                error = body["error"]
                raise RpcError(error.get("code", 0), error.get("message", ""))
            return body["result"]
