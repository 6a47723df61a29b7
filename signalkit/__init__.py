"""
signalkit: typed, in-process signals with pluggable return value aggregation.
"""
from signalkit._version import __version__
from signalkit.core.signal import (
    NO_CONTEXT,
    Aggregator,
    Aggregators,
    Signal,
    SignalSlot,
)
from signalkit.utils import LogLevel, set_log

__all__ = [
    "__version__",
    "Aggregator",
    "Aggregators",
    "LogLevel",
    "NO_CONTEXT",
    "Signal",
    "SignalSlot",
    "set_log",
]
