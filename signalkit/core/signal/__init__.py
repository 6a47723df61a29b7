"""
Signal/slot implementation, a messaging pattern similar to events,
where callbacks may return values combined by an aggregator.
"""

from signalkit.core.signal.aggregators import Aggregator, Aggregators
from signalkit.core.signal.signal import Signal
from signalkit.core.signal.slot import NO_CONTEXT, SignalSlot

__all__ = ["Aggregator", "Aggregators", "NO_CONTEXT", "Signal", "SignalSlot"]
