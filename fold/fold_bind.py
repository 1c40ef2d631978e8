"""
Manual context binding: the closure equivalent of a bound method.
"""

import functools
from typing import Any, Callable


def emulate_bind(context: Any, func: Callable) -> Callable:
    """
    Return a callable that invokes `func` with `context` as its receiver.

    Call-time arguments are forwarded after the receiver. The receiver is
    shared, not copied, so whatever `func` does to it is visible to the
    caller's object.
    """
    if not callable(func):
        raise TypeError(f"emulate_bind expects a callable, not {type(func).__name__}")

    @functools.wraps(func)
    def bound(*args, **kwargs):
        return func(context, *args, **kwargs)

    bound.__self__ = context
    bound.__func__ = func
    return bound
