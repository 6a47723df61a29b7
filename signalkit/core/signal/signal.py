"""
Module defining the Signal class.
"""
import logging
from typing import (
    Any,
    Callable,
    Generic,
    List,
    Optional,
    ParamSpec,
    Tuple,
    TypeVar,
    overload,
)

from signalkit.core.signal.aggregators import Aggregator
from signalkit.core.signal.slot import NO_CONTEXT, SignalSlot
from signalkit.utils.helpers import check_arg, check_callable
from signalkit.utils.logging import LogLevel

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")
R2 = TypeVar("R2")


class Signal(Generic[P, R, R2]):
    """
    Define a signal by instanciating a :py:class:`Signal` object, ie.:

    >>> conf_loaded = Signal(name="conf_loaded")

    Any callable can be added to a signal. The returned slot may be used
    to remove the callback later on:

    >>> def on_conf_loaded(conf):
    ...     conf['my_option'] = 'foo'
    ...
    >>> slot = conf_loaded.add(on_conf_loaded)

    Emit the signal to call all registered callbacks, in insertion order:

    >>> conf = {}
    >>> conf_loaded.emit(conf)
    >>> conf
    {'my_option': 'foo'}

    A callback may be bound to a receiver, passed as first argument
    at call time:

    >>> class Options:
    ...     def update(self, conf):
    ...         conf.update(vars(self))
    ...
    >>> options = Options()
    >>> conf_loaded.add(Options.update, options)
    <signalkit.SignalSlot: <function Options.update at ...>, context=<...Options object at ...>>

    Callbacks are removed either through their slot, or by value:

    >>> slot.remove()
    >>> conf_loaded.has(on_conf_loaded)
    False
    >>> conf_loaded.remove(Options.update, options)
    True

    Without aggregator, :py:meth:`emit` returns None. If an aggregator is
    specified, the values returned by callbacks are collected into a list,
    which is reduced by the aggregator into the result of :py:meth:`emit`:

    >>> from signalkit import Aggregators
    >>> need_something = Signal(Aggregators.array)
    >>> need_something.add(lambda: 'foo')
    <signalkit.SignalSlot: <function <lambda> at ...>>
    >>> need_something.add(lambda: 'bar')
    <signalkit.SignalSlot: <function <lambda> at ...>>
    >>> need_something.emit()
    ['foo', 'bar']
    """

    @overload
    def __init__(
        self: "Signal[P, R, None]",
        aggregator: None = None,
        name: Optional[str] = None,
    ) -> None:
        ...

    @overload
    def __init__(
        self,
        aggregator: Aggregator[R, R2],
        name: Optional[str] = None,
    ) -> None:
        ...

    def __init__(self, aggregator=None, name=None) -> None:
        check_callable(aggregator, "aggregator", allow_none=True)
        check_arg(name, "name", (str, type(None)))
        self.__slots: List[SignalSlot[Callable[P, R]]] = []
        self.__aggregator = aggregator
        self.__name = name

    @property
    def name(self) -> Optional[str]:
        """str or None: signal name"""
        return self.__name

    @property
    def aggregator(self) -> Optional[Aggregator[R, R2]]:
        """Callable or None: function reducing callback return values into emit result"""
        return self.__aggregator

    @property
    def slots(self) -> Tuple[SignalSlot[Callable[P, R]], ...]:
        """
        Tuple of slots currently registered on this signal, in insertion order.
        """
        return tuple(self.__slots)

    def add(
        self, callback: Callable[P, R], context: Any = NO_CONTEXT,
    ) -> SignalSlot[Callable[P, R]]:
        """
        Add `callback` to this signal, optionally bound to receiver `context`.
        The same callback may be added several times; each addition
        creates a new slot, invoked at each emission.

        Returns
        -------
        SignalSlot
            The new slot, which can be used to remove the callback.
        """
        check_callable(callback, "callback")
        slot = SignalSlot(self, callback, context)
        self.__slots.append(slot)
        logger.debug("%r: added %r", self, slot, extra={"signal": self.__name})
        return slot

    def remove(self, callback: Callable[P, R], context: Any = NO_CONTEXT) -> bool:
        """
        Remove the first slot defined by `callback` and `context`.
        Both are compared by identity.

        Returns
        -------
        bool
            `True` if a slot has been removed, `False` if none was found.
        """
        index = self.__find(callback, context)
        if index < 0:
            return False
        self.__pop(index)
        return True

    def has(self, callback: Callable[P, R], context: Any = NO_CONTEXT) -> bool:
        """
        Check if a slot defined by `callback` and `context` is registered.
        """
        return self.__find(callback, context) >= 0

    def emit(self, *args: P.args, **kwargs: P.kwargs) -> R2:
        """
        Emit signal, which will execute every registered slot, in insertion
        order, passing all arguments.

        Slots are collected before the first callback is executed; slots
        added or removed by a callback during emission do not change the
        list of callbacks invoked by the current emission. Exceptions raised
        by callbacks are propagated, and abort the emission.

        Returns
        -------
        None if signal has no aggregator; otherwise, the result of the
        aggregator applied to the list of callback return values.
        """
        slots = tuple(self.__slots)
        extra = {"signal": self.__name}
        logger.log(LogLevel.FULL_DEBUG, "%r: emit to %d slot(s)", self, len(slots), extra=extra)

        if self.__aggregator is None:
            for slot in slots:
                logger.log(LogLevel.FULL_DEBUG, "%r: calling %r", self, slot, extra=extra)
                slot(*args, **kwargs)
            return None

        results = []
        for slot in slots:
            logger.log(LogLevel.FULL_DEBUG, "%r: calling %r", self, slot, extra=extra)
            results.append(slot(*args, **kwargs))
        return self.__aggregator(results)

    def _remove_slot(self, slot: SignalSlot) -> None:
        """Remove `slot` (identity test), if registered on this signal."""
        for index, registered in enumerate(self.__slots):
            if registered is slot:
                self.__pop(index)
                break

    def __find(self, callback: Callable, context: Any) -> int:
        for index, slot in enumerate(self.__slots):
            if slot.matches(callback, context):
                return index
        return -1

    def __pop(self, index: int) -> None:
        slot = self.__slots.pop(index)
        slot._detach()
        logger.debug("%r: removed %r", self, slot, extra={"signal": self.__name})

    def __repr__(self) -> str:
        return f"<signalkit.Signal: {self.__name or 'NO_NAME'}>"
