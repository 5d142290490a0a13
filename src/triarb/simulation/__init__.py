"""Simulation module for demo mode without RPC access."""

from triarb.simulation.provider import SimulatedChainProvider, SimulatedPool


__all__ = [
    "SimulatedChainProvider",
    "SimulatedPool",
]
