"""
RPC chain provider built on web3.py.

Answers quote, pool and gas questions with read-only calls against the
Uniswap V3 quoter, factory and pool contracts. Contract reverts are the
quoter's way of saying "no liquidity" and are returned as None; transport
and node failures raise ProviderError.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Final, TypeVar

import aiohttp
from web3 import AsyncWeb3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception
from web3.providers import AsyncHTTPProvider

from triarb.config.constants import (
    FALLBACK_MAX_FEE_PER_GAS_GWEI,
    FALLBACK_PRIORITY_FEE_GWEI,
    WEI_PER_GWEI,
)
from triarb.core.errors import ProviderError, UnknownNetworkError
from triarb.core.types import GasPriceSnapshot, Network, PoolState
from triarb.provider.rate_limiter import RateLimiter


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_REQUEST_TIMEOUT: Final[float] = 10.0


# =============================================================================
# Minimal ABIs
# =============================================================================

QUOTER_ABI: Final[list[dict[str, Any]]] = [
    {
        "name": "quoteExactInputSingle",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "tokenIn", "type": "address"},
            {"name": "tokenOut", "type": "address"},
            {"name": "fee", "type": "uint24"},
            {"name": "amountIn", "type": "uint256"},
            {"name": "sqrtPriceLimitX96", "type": "uint160"},
        ],
        "outputs": [{"name": "amountOut", "type": "uint256"}],
    }
]

FACTORY_ABI: Final[list[dict[str, Any]]] = [
    {
        "name": "getPool",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "tokenA", "type": "address"},
            {"name": "tokenB", "type": "address"},
            {"name": "fee", "type": "uint24"},
        ],
        "outputs": [{"name": "pool", "type": "address"}],
    }
]

POOL_ABI: Final[list[dict[str, Any]]] = [
    {
        "name": "liquidity",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint128"}],
    }
]


@dataclass(slots=True)
class _NetworkClient:
    """web3 handles for one network."""

    network: Network
    w3: AsyncWeb3
    quoter: Any
    factory: Any


class Web3ChainProvider:
    """
    Chain provider backed by JSON-RPC.

    Features:
    - One AsyncWeb3 instance per network
    - Token-bucket rate limiting per endpoint
    - Reverts mapped to "no liquidity", transport failures to ProviderError
    """

    def __init__(
        self,
        networks: Mapping[str, Network],
        rate_limiter: RateLimiter | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        """
        Initialize the provider.

        Args:
            networks: Networks to connect to, keyed by id.
            rate_limiter: Shared limiter; a default one is created if omitted.
            request_timeout: Per-request timeout in seconds.
        """
        self._rate_limiter = rate_limiter or RateLimiter()
        self._clients: dict[str, _NetworkClient] = {}

        for network_id, network in networks.items():
            w3 = AsyncWeb3(
                AsyncHTTPProvider(
                    network.rpc_url,
                    request_kwargs={"timeout": aiohttp.ClientTimeout(total=request_timeout)},
                )
            )
            self._clients[network_id] = _NetworkClient(
                network=network,
                w3=w3,
                quoter=w3.eth.contract(
                    address=AsyncWeb3.to_checksum_address(network.quoter),
                    abi=QUOTER_ABI,
                ),
                factory=w3.eth.contract(
                    address=AsyncWeb3.to_checksum_address(network.factory),
                    abi=FACTORY_ABI,
                ),
            )

    def _client(self, network_id: str) -> _NetworkClient:
        client = self._clients.get(network_id)
        if client is None:
            raise UnknownNetworkError(network_id)
        return client

    async def _rpc(
        self,
        client: _NetworkClient,
        operation: str,
        call: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Run one RPC call under the rate limiter, normalizing transport errors.

        Contract reverts are re-raised unchanged for the caller to interpret.

        Raises:
            ProviderError: On connection, timeout or node errors.
        """
        await self._rate_limiter.acquire(client.network.rpc_url)
        try:
            return await call()
        except (ContractLogicError, BadFunctionCallOutput):
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise ProviderError(f"{operation} on {client.network.id}: connection error: {e}") from e
        except Web3Exception as e:
            raise ProviderError(f"{operation} on {client.network.id}: {e}") from e

    # =========================================================================
    # Quote Provider
    # =========================================================================

    async def quote(
        self,
        network: str,
        token_in: str,
        token_out: str,
        fee: int,
        amount_in: int,
    ) -> int | None:
        """Simulate quoteExactInputSingle through eth_call."""
        client = self._client(network)
        fn = client.quoter.functions.quoteExactInputSingle(
            AsyncWeb3.to_checksum_address(token_in),
            AsyncWeb3.to_checksum_address(token_out),
            fee,
            amount_in,
            0,
        )
        try:
            amount_out: int = await self._rpc(client, "quoteExactInputSingle", fn.call)
        except (ContractLogicError, BadFunctionCallOutput) as e:
            logger.debug(f"Quote reverted on {network} ({fee}): {e}")
            return None
        return amount_out

    # =========================================================================
    # Pool Oracle
    # =========================================================================

    async def pool_for(
        self,
        network: str,
        token_a: str,
        token_b: str,
        fee: int,
    ) -> PoolState | None:
        """Look up the pool for a pair and fee tier and read its liquidity."""
        client = self._client(network)
        fn = client.factory.functions.getPool(
            AsyncWeb3.to_checksum_address(token_a),
            AsyncWeb3.to_checksum_address(token_b),
            fee,
        )
        try:
            address: str = await self._rpc(client, "getPool", fn.call)
        except (ContractLogicError, BadFunctionCallOutput):
            return None

        if int(address, 16) == 0:
            return None

        pool = client.w3.eth.contract(address=address, abi=POOL_ABI)
        try:
            liquidity: int = await self._rpc(client, "liquidity", pool.functions.liquidity().call)
        except (ContractLogicError, BadFunctionCallOutput):
            return None

        return PoolState(address=address, liquidity=liquidity)

    # =========================================================================
    # Gas Oracle
    # =========================================================================

    async def current_fees(self, network: str) -> GasPriceSnapshot:
        """
        Read EIP-1559 fee data from the latest block.

        Max fee follows the usual 2 x base fee + priority fee rule; chains
        without a base fee fall back to the legacy gas price.
        """
        client = self._client(network)
        eth = client.w3.eth

        block = await self._rpc(client, "get_block", lambda: eth.get_block("latest"))
        base_fee = block.get("baseFeePerGas") or 0

        try:
            priority_fee = await self._rpc(client, "max_priority_fee", lambda: eth.max_priority_fee)
        except (ContractLogicError, BadFunctionCallOutput, ProviderError) as e:
            logger.debug(f"Priority fee unavailable on {network}: {e}")
            priority_fee = 0
        priority_fee = priority_fee or FALLBACK_PRIORITY_FEE_GWEI * WEI_PER_GWEI

        if base_fee:
            max_fee = base_fee * 2 + priority_fee
        else:
            max_fee = await self._rpc(client, "gas_price", lambda: eth.gas_price)
        max_fee = max_fee or FALLBACK_MAX_FEE_PER_GAS_GWEI * WEI_PER_GWEI

        return GasPriceSnapshot(
            max_fee_per_gas=int(max_fee),
            max_priority_fee_per_gas=int(priority_fee),
            last_block=int(block.get("number") or 0),
        )

    async def block_number(self, network: str) -> int:
        """Get the latest block height."""
        client = self._client(network)
        eth = client.w3.eth
        return int(await self._rpc(client, "block_number", lambda: eth.block_number))

    async def close(self) -> None:
        """Close the HTTP sessions held by the providers."""
        for client in self._clients.values():
            await client.w3.provider.disconnect()
