"""Telemetry module for logging and metrics."""

from triarb.telemetry.logger import AsyncLogger, setup_logging
from triarb.telemetry.metrics import MetricsCollector


__all__ = [
    "AsyncLogger",
    "MetricsCollector",
    "setup_logging",
]
