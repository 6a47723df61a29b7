"""Helper classes and functions of signalkit.
"""
from .logging import LogLevel, set_log

try:
    import pytest
except ModuleNotFoundError:
    pass
else:
    pytest.register_assert_rewrite("signalkit.utils.testing")

__all__ = [
    "LogLevel",
    "set_log",
]
