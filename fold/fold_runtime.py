"""
Left-to-right fold over indexable sequences.
"""

import collections.abc
import logging
from typing import Any, Optional, Sequence, Tuple

from fold.fold_datatypes import MISSING, Reducer, is_missing

logger = logging.getLogger(__name__)


def _check_sequence(sequence: Any) -> None:
    if isinstance(sequence, collections.abc.Mapping) or not (
            hasattr(sequence, "__len__") and hasattr(sequence, "__getitem__")):
        raise TypeError(f"fold expects an indexable sequence, not {type(sequence).__name__}")


def _start(sequence: Sequence, length: int, initial: Any) -> Optional[Tuple[Any, int]]:
    """Return the starting (accumulator, index), or None when there is nothing to fold."""
    if not is_missing(initial):
        return initial, 0
    if length == 0:
        return None
    return sequence[0], 1


def fold(sequence: Sequence, reducer: Reducer, initial: Any = MISSING) -> Any:
    """
    Reduce `sequence` to a single value by applying `reducer(acc, element)`
    to its elements from left to right.

    When `initial` is given it seeds the accumulator and every element is
    passed to the reducer. Any value counts as given, including None and
    other falsy values. Without it the first element seeds the accumulator
    and the reducer starts at the second one; an empty sequence then yields
    None without calling the reducer.

    Exceptions raised by the reducer are not caught.
    """
    _check_sequence(sequence)
    if not callable(reducer):
        raise TypeError(f"fold reducer must be callable, not {type(reducer).__name__}")

    length = len(sequence)
    start = _start(sequence, length, initial)
    if start is None:
        logger.debug("fold: empty sequence and no initial value, returning None")
        return None

    acc, index = start
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "fold: %d element(s), seeded=%s, %d reducer call(s)",
            length, not is_missing(initial), length - index,
        )
    for i in range(index, length):
        acc = reducer(acc, sequence[i])
    return acc
