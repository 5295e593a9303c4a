"""Event capture: per-category buffers and the per-tick aggregator."""

from devtrace.capture.aggregator import DEFAULT_PROJECTILE_WINDOW, TickAggregator
from devtrace.capture.buffers import EventBuffer, EventBuffers

__all__ = [
    "DEFAULT_PROJECTILE_WINDOW",
    "EventBuffer",
    "EventBuffers",
    "TickAggregator",
]
