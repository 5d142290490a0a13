"""
Exception hierarchy for the scanner.

Configuration errors are raised before any external call is made and are
reported to API clients as bad requests. Provider errors describe transport
failures of the chain provider and are absorbed at the fail-closed points of
the search.
"""


class TriarbError(Exception):
    """Base exception for scanner errors."""


class ConfigurationError(TriarbError):
    """Caller supplied a network, strategy, token or path that is not configured."""


class UnknownNetworkError(ConfigurationError):
    """Network identifier is not configured."""

    def __init__(self, network: str) -> None:
        super().__init__(f"Network {network} not supported")
        self.network = network


class UnknownStrategyError(ConfigurationError):
    """Strategy name is not configured."""

    def __init__(self, strategy: str, choices: list[str]) -> None:
        super().__init__(f"Invalid strategy {strategy!r}. Choose from: {', '.join(choices)}")
        self.strategy = strategy
        self.choices = choices


class UnknownTokenError(ConfigurationError):
    """Token symbol is not in the network catalog."""

    def __init__(self, symbol: str, network: str) -> None:
        super().__init__(f"Token {symbol} not found on {network}")
        self.symbol = symbol
        self.network = network


class InvalidPathError(ConfigurationError):
    """Path is not a cycle of three distinct tokens, or fees are malformed."""


class ProviderError(TriarbError):
    """Quote, pool or gas provider failed to answer (RPC or transport failure)."""


class NoLiquidityError(TriarbError):
    """A hop of an explicitly analysed path returned no quote."""

    def __init__(self, token_in: str, token_out: str) -> None:
        super().__init__(f"No liquidity for {token_in} → {token_out}")
        self.token_in = token_in
        self.token_out = token_out
