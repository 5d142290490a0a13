#!/usr/bin/env python3
"""
Triangle Discovery Script.

Lists the candidate paths every strategy generates on a network, without
asking any chain for quotes.
"""

import argparse
import sys
from pathlib import Path

import orjson

# Add src to path for direct execution
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from triarb.config.networks import build_networks
from triarb.config.strategies import STRATEGIES
from triarb.strategy.paths import PathGenerator


def main() -> int:
    """Discover and display candidate paths."""
    parser = argparse.ArgumentParser(description="List candidate triangular paths")
    parser.add_argument("--network", default="arbitrum", help="Network id (arbitrum, polygon)")
    parser.add_argument("--export", type=Path, help="Write the paths to this JSON file")
    args = parser.parse_args()

    networks = build_networks()
    network = networks.get(args.network)
    if network is None:
        print(f"Network {args.network} not supported. Choose from: {', '.join(networks)}")
        return 1

    print("=" * 60)
    print(f"  TRIANGLE DISCOVERY ({network.name})")
    print("=" * 60)
    print()

    exported = []
    for strategy in STRATEGIES.values():
        generator = PathGenerator(network, strategy)
        paths = generator.generate()

        print(f"{strategy.name}: {strategy.description}")
        print(
            f"  graph: {generator.graph.number_of_nodes()} tokens, "
            f"{generator.graph.number_of_edges()} edges"
        )
        print(f"  paths: {len(paths)} (cap {strategy.max_paths})")
        for i, path in enumerate(paths, 1):
            print(f"  {i:3}. {path.label}")
        print()

        exported.append(generator.to_dict())

    print("=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print()
    print(f"Tokens on {network.id}: {len(network.tokens)}")
    print(f"Categories:      {', '.join(network.categories)}")
    print()

    if args.export:
        args.export.write_bytes(orjson.dumps(exported, option=orjson.OPT_INDENT_2))
        print(f"Exported to: {args.export}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
