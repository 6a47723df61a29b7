"""
Module defining the SignalSlot class.
"""
import types
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from signalkit.core.signal.signal import Signal

C = TypeVar("C", bound=Callable)


class _NoContext:
    """Type of the `NO_CONTEXT` sentinel."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_CONTEXT"

    def __bool__(self) -> bool:
        return False


NO_CONTEXT = _NoContext()


def same_callable(a: Callable, b: Callable) -> bool:
    """Identity test between two callables.

    Bound methods are compared through their underlying function and instance,
    since each attribute access creates a new bound method object.
    """
    if a is b:
        return True
    if isinstance(a, types.MethodType) and isinstance(b, types.MethodType):
        return a.__func__ is b.__func__ and a.__self__ is b.__self__
    return False


class SignalSlot(Generic[C]):
    """
    A slot is one listener registered on a signal: a callback, an optional
    receiver (`context`) and a handle to remove itself from the signal.

    Slots are created by :py:meth:`Signal.add`, and should not be
    instantiated directly.
    """

    __slots__ = ["__signal", "__callback", "__context", "__registered"]

    def __init__(self, signal: "Signal", callback: C, context: Any = NO_CONTEXT):
        self.__signal = signal
        self.__callback = callback
        self.__context = context
        self.__registered = True

    @property
    def signal(self) -> "Signal":
        """Signal: signal on which slot was created"""
        return self.__signal

    @property
    def callback(self) -> C:
        """Callable: function called by slot"""
        return self.__callback

    @property
    def context(self) -> Any:
        """Any: receiver passed as first argument to callback, if any"""
        return self.__context

    @property
    def registered(self) -> bool:
        """bool: `True` until slot is removed from its signal"""
        return self.__registered

    def remove(self) -> None:
        """
        Remove slot from its signal.
        Has no effect if slot has already been removed, whichever way.
        """
        self.__signal._remove_slot(self)

    def matches(self, callback: Callable, context: Any = NO_CONTEXT) -> bool:
        """Is slot defined by `callback` bound to `context` (identity test)?"""
        return self.__context is context and same_callable(self.__callback, callback)

    def _detach(self) -> None:
        self.__registered = False

    def __call__(self, *args, **kwargs) -> Any:
        """
        Execute slot, with `context` as receiver, if any.
        """
        if self.__context is NO_CONTEXT:
            return self.__callback(*args, **kwargs)
        return self.__callback(self.__context, *args, **kwargs)

    def __repr__(self) -> str:
        if self.__context is NO_CONTEXT:
            return f"<signalkit.SignalSlot: {self.__callback!r}>"
        return f"<signalkit.SignalSlot: {self.__callback!r}, context={self.__context!r}>"
