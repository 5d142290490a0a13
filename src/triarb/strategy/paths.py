"""
Candidate path generation.

Builds a directed token graph per network and strategy with NetworkX and
enumerates three-token cycles according to the strategy's topology. Only
tokens from the strategy's allowed categories become nodes.
"""

import logging
from typing import Any, Final

import networkx as nx

from triarb.core.types import Network, Path, Strategy, TokenCategory


logger = logging.getLogger(__name__)


# Bounded prefixes that keep the combinatorics small
DEFI_ANCHOR_LIMIT: Final[int] = 3
DEFI_LEG_LIMIT: Final[int] = 5
MIXED_ANCHOR_LIMIT: Final[int] = 4
MIXED_LEG_LIMIT: Final[int] = 6

PRIORITY_CATEGORIES: Final[frozenset[TokenCategory]] = frozenset(
    {TokenCategory.STABLE, TokenCategory.MAJOR}
)
DEFI_LEG_CATEGORIES: Final[frozenset[TokenCategory]] = frozenset(
    {TokenCategory.MAJOR, TokenCategory.DEFI}
)


class PathGenerator:
    """
    Generates candidate triangular paths.

    Uses a directed graph where:
    - Nodes are the allowed tokens, in catalog order, tagged with category
    - Edges are swappable pairs (both directions)

    Topologies:
    - stable: every ordered triple of distinct stablecoins
    - defi: stable anchor (first 3) x major/defi legs (first 5 each)
    - anything else: stable/major anchor (first 4) x allowed legs (first 6 each)

    Triples are deduplicated by their sorted symbol set; the first direction
    encountered is kept and evaluated in that order, not in the alphabetical
    order of the dedup key, so defi paths always start from the stablecoin.
    Generation stops at the strategy's path cap.
    """

    def __init__(self, network: Network, strategy: Strategy) -> None:
        """
        Initialize the generator.

        Args:
            network: Network whose catalog supplies the tokens.
            strategy: Strategy selecting categories, topology and cap.
        """
        self._network = network
        self._strategy = strategy
        self._graph: nx.DiGraph = nx.DiGraph()
        self._paths: list[Path] = []
        self.build_graph()

    def build_graph(self) -> int:
        """
        Build the token graph from the allowed categories.

        Returns:
            Number of edges added.
        """
        self._graph.clear()
        tokens = self._network.tokens_in(self._strategy.categories)

        for order, token in enumerate(tokens):
            self._graph.add_node(token.symbol, category=token.category, order=order)

        for a in tokens:
            for b in tokens:
                if a.symbol != b.symbol:
                    self._graph.add_edge(a.symbol, b.symbol)

        logger.debug(
            f"Built {self._strategy.name} graph on {self._network.id} with "
            f"{self._graph.number_of_nodes()} tokens, {self._graph.number_of_edges()} edges"
        )
        return int(self._graph.number_of_edges())

    def _tokens(self, categories: frozenset[TokenCategory] | None = None) -> list[str]:
        """Graph nodes in catalog order, optionally restricted to categories."""
        nodes = sorted(self._graph.nodes(data=True), key=lambda n: n[1]["order"])
        return [
            symbol for symbol, data in nodes
            if categories is None or data["category"] in categories
        ]

    def _is_cycle(self, a: str, b: str, c: str) -> bool:
        if a == b or b == c or a == c:
            return False
        g = self._graph
        return g.has_edge(a, b) and g.has_edge(b, c) and g.has_edge(c, a)

    def _candidates(self) -> list[tuple[str, str, str]]:
        """Raw ordered triples for the strategy's topology, duplicates included."""
        name = self._strategy.name
        triples: list[tuple[str, str, str]] = []

        if name == "stable":
            stables = self._tokens(frozenset({TokenCategory.STABLE}))
            for a in stables:
                for b in stables:
                    for c in stables:
                        if self._is_cycle(a, b, c):
                            triples.append((a, b, c))

        elif name == "defi":
            stables = self._tokens(frozenset({TokenCategory.STABLE}))[:DEFI_ANCHOR_LIMIT]
            legs = self._tokens(DEFI_LEG_CATEGORIES)[:DEFI_LEG_LIMIT]
            for a in stables:
                for b in legs:
                    for c in legs:
                        if self._is_cycle(a, b, c):
                            triples.append((a, b, c))

        else:
            anchors = self._tokens(PRIORITY_CATEGORIES)[:MIXED_ANCHOR_LIMIT]
            legs = self._tokens()[:MIXED_LEG_LIMIT]
            for a in anchors:
                for b in legs:
                    for c in legs:
                        if self._is_cycle(a, b, c):
                            triples.append((a, b, c))

        return triples

    def generate(self) -> list[Path]:
        """
        Generate deduplicated candidate paths, at most `max_paths`.

        Returns:
            Paths in generation order.
        """
        paths: list[Path] = []
        seen: set[tuple[str, ...]] = set()
        cap = self._strategy.max_paths

        for triple in self._candidates():
            if len(paths) >= cap:
                break
            path = Path(triple)
            if path.key in seen:
                continue
            seen.add(path.key)
            paths.append(path)

        self._paths = paths
        logger.debug(f"Generated {len(paths)} {self._strategy.name} paths on {self._network.id}")
        return paths

    def get_tokens(self) -> set[str]:
        """Get all tokens in the graph."""
        return set(self._graph.nodes())

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying NetworkX graph."""
        return self._graph

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the last generated paths to serializable format.

        Returns:
            Dict with network, strategy and path data.
        """
        return {
            "network": self._network.id,
            "strategy": self._strategy.name,
            "paths": [
                {"id": p.id, "label": p.label, "tokens": list(p.tokens)}
                for p in self._paths
            ],
        }


def generate_paths(network: Network, strategy: Strategy) -> list[Path]:
    """Generate candidate paths for a network and strategy."""
    return PathGenerator(network, strategy).generate()
