"""
Token catalog lookups.

Wraps the configured networks and answers the read-only questions the
scanner and the API ask of them: which network, which token, which
tokens per category.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from triarb.core.errors import UnknownNetworkError, UnknownTokenError
from triarb.core.types import Network, Token


class TokenCatalog:
    """
    Read-only view over the supported networks and their tokens.

    Responsibilities:
    - Resolving network identifiers (unknown ids raise before any RPC call)
    - Resolving token symbols per network
    - Grouping tokens by category for introspection endpoints
    """

    __slots__ = ("_networks",)

    def __init__(self, networks: Mapping[str, Network]) -> None:
        self._networks = dict(networks)

    def get_network(self, network_id: str) -> Network:
        """
        Get a configured network.

        Raises:
            UnknownNetworkError: If the network is not configured.
        """
        network = self._networks.get(network_id)
        if network is None:
            raise UnknownNetworkError(network_id)
        return network

    def get_token(self, network_id: str, symbol: str) -> Token:
        """
        Get a token on a network.

        Raises:
            UnknownNetworkError: If the network is not configured.
            UnknownTokenError: If the symbol is not in the network catalog.
        """
        token = self.get_network(network_id).token(symbol)
        if token is None:
            raise UnknownTokenError(symbol, network_id)
        return token

    def tokens_by_category(self, network_id: str) -> dict[str, list[dict[str, Any]]]:
        """
        Group a network's tokens by category, in catalog order.

        Returns:
            Dict of category -> list of token descriptions.
        """
        grouped: dict[str, list[dict[str, Any]]] = {}
        for token in self.get_network(network_id).tokens.values():
            grouped.setdefault(token.category.value, []).append(
                {
                    "symbol": token.symbol,
                    "address": token.address,
                    "decimals": token.decimals,
                    "min_liquidity": token.min_liquidity,
                }
            )
        return grouped

    @property
    def network_ids(self) -> list[str]:
        """Get configured network identifiers."""
        return list(self._networks)

    def __contains__(self, network_id: object) -> bool:
        return network_id in self._networks

    def __iter__(self) -> Iterator[Network]:
        return iter(self._networks.values())

    def __len__(self) -> int:
        return len(self._networks)
