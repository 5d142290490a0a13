"""Chain access: quote service, rate limiting and the RPC provider."""

from triarb.provider.quotes import QuoteService
from triarb.provider.rate_limiter import RateLimiter, TokenBucket
from triarb.provider.web3_provider import Web3ChainProvider


__all__ = [
    "QuoteService",
    "RateLimiter",
    "TokenBucket",
    "Web3ChainProvider",
]
