"""Mock implementations for testing."""

from tests.mocks.chain import FakeClock, ScriptedChainProvider


__all__ = [
    "FakeClock",
    "ScriptedChainProvider",
]
