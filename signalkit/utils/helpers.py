"""
Various small helper functions.
"""
import os
import inspect
from typing import Any, Callable, Iterable, Type, Union, Tuple


def get_typename(dtype: Union[Type, Tuple[Type]], multiformat="({})") -> str:
    if inspect.isclass(dtype):
        return dtype.__qualname__
    return multiformat.format(", ".join(sorted(t.__qualname__ for t in dtype)))


def check_arg(
    arg: Any,
    argname: str,
    dtype: Union[Type, Iterable[Type]],
    value_ok: Callable[[Any], bool] = None,
    stack_shift: int = 0,
):
    """
    Utility function for argument type and value validation.
    Raises a TypeError exception if type(arg) is not in type list given by 'dtype'.
    Raises a ValueError exception if value_ok(arg) is False, where 'value_ok' is a
    boolean function defining a validity criterion.

    For example:
    >>> check_arg('foo', 'name', str)
    does not raise any exception, as 'foo' is a str

    >>> check_arg(-0.12, 'name', (int, str))
    raises TypeError, as first argument is neither an int, not a str

    >>> check_arg(-1, 'backupCount', int, value_ok = lambda x: x >= 0)
    raises ValueError, as first argument is negative
    """
    def get_caller():
        level = 3 + max(0, stack_shift)
        stack = inspect.stack()
        return stack[level] if len(stack) > level else stack[-1]

    def get_context(caller):
        context = caller.code_context[0] if caller.code_context else ""
        return os.path.basename(caller.filename), caller.lineno, context

    # Check type
    if not isinstance(arg, dtype):
        valid = get_typename(dtype, multiformat="one of ({})")
        caller = get_caller()
        raise TypeError("argument '{}' should be {}; got {} {!r}\nIn {}, line #{}: \n{}".format(
            argname, valid, type(arg).__qualname__, arg, *get_context(caller)))
    # Check value
    if callable(value_ok) and not value_ok(arg):
        caller = get_caller()
        raise ValueError("argument {!r} was given invalid value {!r}\nIn {}, line #{}: \n{}".format(
            argname, arg, *get_context(caller)))


def check_callable(arg: Any, argname: str, allow_none: bool = False) -> None:
    """Raise a TypeError if `arg` is not callable (or None, if `allow_none`)."""
    if allow_none and arg is None:
        return
    if not callable(arg):
        expected = "a callable object or None" if allow_none else "a callable object"
        raise TypeError(
            f"argument {argname!r} should be {expected}; got {type(arg).__qualname__} {arg!r}"
        )
