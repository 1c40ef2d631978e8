"""
A to-do list that owns its items and exposes them only through
add, remove and list.
"""

import logging
from typing import Any, Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


class TodoList:
    """An ordered list of to-do items with no outside access to its storage."""

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items = list(items) if items is not None else []

    def add(self, item: Any) -> Any:
        self._items.append(item)
        logger.debug("todo: added %r (%d item(s))", item, len(self._items))
        return item

    def remove(self, item: Any) -> bool:
        """Remove the first item equal to `item`; False when there is none."""
        try:
            index = self._items.index(item)
        except ValueError:
            logger.debug("todo: %r not found, nothing removed", item)
            return False
        del self._items[index]
        logger.debug("todo: removed %r from position %d", item, index)
        return True

    def list(self) -> Tuple[Any, ...]:
        """Snapshot of the items in insertion order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.list())

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"TodoList({self._items!r})"
