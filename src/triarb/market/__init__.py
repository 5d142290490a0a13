"""Market state: token catalog and the pool and gas caches."""

from triarb.market.catalog import TokenCatalog
from triarb.market.gas import GasPriceCache
from triarb.market.pools import PoolValidationCache


__all__ = [
    "GasPriceCache",
    "PoolValidationCache",
    "TokenCatalog",
]
