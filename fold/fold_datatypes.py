"""
Defines the shared data types for the fold package.

The only runtime value here is the ``MISSING`` marker, which stands for
"no argument was passed" wherever ``None`` or another falsy value would be
a legitimate argument of its own.
"""

from typing import Any, Callable, TypeVar

A = TypeVar("A")
T = TypeVar("T")

# (accumulator, element) -> accumulator
Reducer = Callable[[A, T], A]


class Missing:
    """Singleton marking an optional argument the caller did not pass."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "<missing>"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Missing, ())


MISSING = Missing()


def is_missing(value: Any) -> bool:
    return value is MISSING
