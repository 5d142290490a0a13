"""
Unit tests for configuration.

Tests settings loading, the static catalog and strategy lookup.
"""

import pytest
from pydantic import ValidationError

from triarb.config.settings import Settings
from triarb.config.strategies import STRATEGIES, get_strategy
from triarb.core.errors import UnknownNetworkError, UnknownStrategyError, UnknownTokenError
from triarb.core.types import Network, TokenCategory
from triarb.market.catalog import TokenCatalog


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ARBITRUM_RPC", "POLYGON_RPC", "PORT", "SIMULATE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.arbitrum_rpc == "https://arb1.arbitrum.io/rpc"
        assert settings.polygon_rpc == "https://polygon-rpc.com"
        assert settings.port == 3000
        assert settings.simulate is False
        assert settings.path_delay == pytest.approx(0.05)
        assert settings.rpc_retry_delay == pytest.approx(0.1)

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARBITRUM_RPC", "https://arbitrum.example.org")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("SIMULATE", "true")

        settings = Settings(_env_file=None)

        assert settings.arbitrum_rpc == "https://arbitrum.example.org"
        assert settings.port == 8080
        assert settings.simulate is True

    def test_rpc_must_be_http(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POLYGON_RPC", "wss://polygon.example.org")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_concurrency_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_concurrent_paths=0)


class TestStrategies:
    """Tests for strategy configuration."""

    def test_known_strategies(self) -> None:
        assert list(STRATEGIES) == ["stable", "defi", "aggressive", "test"]
        assert get_strategy("stable").fee_tiers_per_hop == 2
        assert get_strategy("aggressive").max_paths == 20
        assert TokenCategory.SMALLCAP not in get_strategy("aggressive").categories

    def test_unknown_strategy(self) -> None:
        with pytest.raises(UnknownStrategyError, match="Choose from: stable, defi, aggressive, test"):
            get_strategy("yolo")

    def test_to_dict(self) -> None:
        data = get_strategy("test").to_dict()

        assert data["categories"] == ["major", "stable"]
        assert data["fee_priority"] == [3000]


class TestTokenCatalog:
    """Tests for the network catalog."""

    def test_networks(self, full_networks: dict[str, Network]) -> None:
        catalog = TokenCatalog(full_networks)

        assert catalog.network_ids == ["arbitrum", "polygon"]
        assert catalog.get_network("arbitrum").chain_id == 42161
        assert catalog.get_network("polygon").chain_id == 137
        assert "optimism" not in catalog
        assert len(catalog) == 2

    def test_unknown_network(self, full_networks: dict[str, Network]) -> None:
        with pytest.raises(UnknownNetworkError, match="Network optimism not supported"):
            TokenCatalog(full_networks).get_network("optimism")

    def test_get_token(self, full_networks: dict[str, Network]) -> None:
        catalog = TokenCatalog(full_networks)

        usdc = catalog.get_token("arbitrum", "USDC")
        assert usdc.decimals == 6
        assert usdc.is_stable
        assert catalog.get_token("polygon", "WMATIC").category == TokenCategory.MAJOR

        with pytest.raises(UnknownTokenError):
            catalog.get_token("arbitrum", "WMATIC")

    def test_tokens_by_category_keeps_catalog_order(self, catalog: TokenCatalog) -> None:
        grouped = catalog.tokens_by_category("arbitrum")

        assert list(grouped) == ["stable", "major", "defi"]
        assert [t["symbol"] for t in grouped["stable"]] == ["USDC", "USDT", "DAI"]

    def test_catalog_symbols_unique_per_network(self, full_networks: dict[str, Network]) -> None:
        for network in full_networks.values():
            assert all(symbol == token.symbol for symbol, token in network.tokens.items())
            assert network.tokens["USDC"].decimals == 6
            assert network.tokens["WETH"].decimals == 18
