"""
Uniswap V3 Triangular Arbitrage Scanner.

An asynchronous opportunity search engine that evaluates three-hop swap
cycles on AMM networks and ranks them by gas-adjusted profit.
"""

__version__ = "2.0.0"
