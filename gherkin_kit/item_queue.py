"""A queue that can also take items at its front."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator, Optional


class ItemQueue:
    """First-in first-out queue whose push puts an item at the front."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque(items or ())

    def is_empty(self) -> bool:
        """True when the queue holds nothing."""
        return not self._items

    def add(self, item: Any) -> None:
        """Put item at the back of the queue."""
        self._items.append(item)

    def remove(self) -> Any:
        """Take the front item off the queue; None when the queue is empty."""
        return self._items.popleft() if self._items else None

    def extend(self, other: "ItemQueue") -> None:
        """Move every item of other, in order, to the back of this queue."""
        self._items.extend(other._items)
        other._items.clear()

    def push(self, item: Any) -> None:
        """Put item at the front of the queue."""
        self._items.appendleft(item)

    def pop(self) -> Any:
        """Take the front item off the queue; None when the queue is empty."""
        return self.remove()

    def peek(self) -> Any:
        """The front item without removing it; None when the queue is empty."""
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)