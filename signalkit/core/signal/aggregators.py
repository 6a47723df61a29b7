"""
Library of common aggregators.

An aggregator is a function reducing the list of values returned by the
callbacks of a signal (one value per callback, in invocation order) into
the result of :py:meth:`Signal.emit`. Pass one of these functions to the
:py:class:`Signal` constructor to add the described behaviour to that signal.
"""
import asyncio
from typing import Awaitable, Callable, List, TypeVar

R = TypeVar("R")
R2 = TypeVar("R2")
T = TypeVar("T")

Aggregator = Callable[[List[R]], R2]


class Aggregators:
    """Namespace of ready-made aggregators."""

    @staticmethod
    def array(items: List[T]) -> List[T]:
        """
        Basic "pass-through" aggregator. Returns the list of values
        received by the signal emitter, one per callback.

        Note that the size of the returned list depends on the number
        of slots invoked by the emission.
        """
        return items

    @staticmethod
    async def await_all(items: List[Awaitable[T]]) -> List[T]:
        """
        For signals whose callbacks return awaitables (coroutines, tasks or
        futures). Awaits all of them, and returns the list of their results,
        in invocation order.

        If any awaitable fails, the first exception is propagated without
        waiting for the others. If the results are not significant,
        consider :py:meth:`await_void`.
        """
        return list(await asyncio.gather(*items))

    @staticmethod
    async def await_void(items: List[Awaitable[None]]) -> None:
        """
        For signals whose callbacks return awaitables with no significant
        result. Awaits all of them, and discards their return values.
        """
        await asyncio.gather(*items)
