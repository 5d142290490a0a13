"""
Unit tests for Web3ChainProvider.

RPC round trips are replaced with scripted results; these tests cover how
answers, reverts and transport failures are interpreted.
"""

from unittest.mock import AsyncMock

import aiohttp
import pytest
from web3.exceptions import ContractLogicError

from triarb.config.constants import ZERO_ADDRESS
from triarb.core.errors import ProviderError, UnknownNetworkError
from triarb.core.types import Network
from triarb.provider.web3_provider import Web3ChainProvider


POOL_ADDRESS = "0x" + "12" * 20


@pytest.fixture
def rpc_provider(full_networks: dict[str, Network]) -> Web3ChainProvider:
    return Web3ChainProvider(full_networks)


@pytest.fixture
def arbitrum(full_networks: dict[str, Network]) -> Network:
    return full_networks["arbitrum"]


class TestRpcErrorMapping:
    """Tests for the transport error normalization."""

    @pytest.mark.asyncio
    async def test_connection_error_becomes_provider_error(
        self,
        rpc_provider: Web3ChainProvider,
    ) -> None:
        async def failing() -> int:
            raise aiohttp.ClientConnectionError("connection refused")

        with pytest.raises(ProviderError, match="block_number on arbitrum"):
            await rpc_provider._rpc(rpc_provider._client("arbitrum"), "block_number", failing)

    @pytest.mark.asyncio
    async def test_timeout_becomes_provider_error(self, rpc_provider: Web3ChainProvider) -> None:
        async def slow() -> int:
            raise TimeoutError()

        with pytest.raises(ProviderError):
            await rpc_provider._rpc(rpc_provider._client("polygon"), "gas_price", slow)

    @pytest.mark.asyncio
    async def test_revert_passes_through(self, rpc_provider: Web3ChainProvider) -> None:
        async def reverting() -> int:
            raise ContractLogicError("execution reverted")

        with pytest.raises(ContractLogicError):
            await rpc_provider._rpc(rpc_provider._client("arbitrum"), "quote", reverting)

    @pytest.mark.asyncio
    async def test_unknown_network(self, rpc_provider: Web3ChainProvider) -> None:
        with pytest.raises(UnknownNetworkError):
            await rpc_provider.block_number("optimism")


class TestQuotesAndPools:
    """Tests for quote and pool lookups."""

    @pytest.mark.asyncio
    async def test_quote(
        self,
        rpc_provider: Web3ChainProvider,
        arbitrum: Network,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(rpc_provider, "_rpc", AsyncMock(return_value=500_000_000_000_000_000))
        usdc, weth = arbitrum.tokens["USDC"], arbitrum.tokens["WETH"]

        out = await rpc_provider.quote("arbitrum", usdc.address, weth.address, 3000, 1000 * 10**6)

        assert out == 5 * 10**17

    @pytest.mark.asyncio
    async def test_reverted_quote_is_no_liquidity(
        self,
        rpc_provider: Web3ChainProvider,
        arbitrum: Network,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(
            rpc_provider, "_rpc", AsyncMock(side_effect=ContractLogicError("execution reverted"))
        )
        usdc, lrc = arbitrum.tokens["USDC"], arbitrum.tokens["LRC"]

        assert await rpc_provider.quote("arbitrum", usdc.address, lrc.address, 500, 10**6) is None

    @pytest.mark.asyncio
    async def test_pool_with_liquidity(
        self,
        rpc_provider: Web3ChainProvider,
        arbitrum: Network,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(rpc_provider, "_rpc", AsyncMock(side_effect=[POOL_ADDRESS, 10**24]))
        usdc, weth = arbitrum.tokens["USDC"], arbitrum.tokens["WETH"]

        pool = await rpc_provider.pool_for("arbitrum", usdc.address, weth.address, 500)

        assert pool is not None
        assert pool.address == POOL_ADDRESS
        assert pool.liquidity == 10**24

    @pytest.mark.asyncio
    async def test_zero_address_is_no_pool(
        self,
        rpc_provider: Web3ChainProvider,
        arbitrum: Network,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        rpc = AsyncMock(return_value=ZERO_ADDRESS)
        monkeypatch.setattr(rpc_provider, "_rpc", rpc)
        usdc, weth = arbitrum.tokens["USDC"], arbitrum.tokens["WETH"]

        assert await rpc_provider.pool_for("arbitrum", usdc.address, weth.address, 10000) is None
        assert rpc.await_count == 1


class TestGasFees:
    """Tests for fee data derivation."""

    @pytest.mark.asyncio
    async def test_eip1559_fees(
        self,
        rpc_provider: Web3ChainProvider,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        block = {"baseFeePerGas": 10**8, "number": 250_000_000}
        monkeypatch.setattr(rpc_provider, "_rpc", AsyncMock(side_effect=[block, 10**7]))

        snapshot = await rpc_provider.current_fees("arbitrum")

        assert snapshot.max_fee_per_gas == 2 * 10**8 + 10**7
        assert snapshot.max_priority_fee_per_gas == 10**7
        assert snapshot.last_block == 250_000_000

    @pytest.mark.asyncio
    async def test_legacy_gas_price(
        self,
        rpc_provider: Web3ChainProvider,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """No base fee and no priority fee: legacy gas price, 1 gwei tip."""
        block = {"number": 60_000_000}
        monkeypatch.setattr(rpc_provider, "_rpc", AsyncMock(side_effect=[block, 0, 3 * 10**9]))

        snapshot = await rpc_provider.current_fees("polygon")

        assert snapshot.max_fee_per_gas == 3 * 10**9
        assert snapshot.max_priority_fee_per_gas == 10**9

    @pytest.mark.asyncio
    async def test_block_failure_propagates(
        self,
        rpc_provider: Web3ChainProvider,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(rpc_provider, "_rpc", AsyncMock(side_effect=ProviderError("down")))

        with pytest.raises(ProviderError):
            await rpc_provider.current_fees("arbitrum")
