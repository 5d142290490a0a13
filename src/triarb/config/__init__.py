"""Configuration module for the scanner."""

from triarb.config.constants import (
    DEFAULT_NETWORK,
    DEFAULT_STRATEGY,
    FEE_TIERS,
    TOP_OPPORTUNITIES,
)
from triarb.config.settings import Settings, get_settings


__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_NETWORK",
    "DEFAULT_STRATEGY",
    "FEE_TIERS",
    "TOP_OPPORTUNITIES",
]
