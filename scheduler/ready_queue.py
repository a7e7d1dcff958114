"""
Ready queue: an ordered container of waiting jobs.

Ordering comes from an injected three-way comparator (a policy's compare).
Items that compare equal keep insertion order, which is what turns Round
Robin's always-zero comparator into a strict FIFO.

Data structure: a sorted Python list of (key, counter, item) entries
- offer:  bisect + list.insert  → O(log n) search, O(n) shift
- poll:   pop from the front    → O(n)
- at:     plain indexing        → O(1)
- remove: identity scan         → O(n)

Why not heapq like a plain priority queue? Two operations need the full order,
not just the minimum: at(index) for the show_queue listing, and
remove(item) for pulling an arbitrary waiting job. A sorted list gives both
for free at the queue sizes a CPU simulation deals with.

The counter is the tiebreaker: if two items compare equal, the one offered
first wins. Without it Python would fall through to comparing the items
themselves, which would crash.
"""

import bisect
import itertools
from functools import cmp_to_key
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ReadyQueue(Generic[T]):

    def __init__(self, compare: Callable[[T, T], int]):
        self._key = cmp_to_key(compare)
        self._entries: list[tuple] = []
        self._counter = itertools.count()  # monotonic tiebreaker for stability

    def offer(self, item: T) -> int:
        """Insert after every item that does not rank behind it. Returns the index."""
        entry = (self._key(item), next(self._counter), item)
        index = bisect.bisect_right(self._entries, entry)
        self._entries.insert(index, entry)
        return index

    def poll(self) -> Optional[T]:
        """Remove and return the first item, or None if empty."""
        if self._entries:
            return self._entries.pop(0)[2]
        return None

    def peek(self) -> Optional[T]:
        return self._entries[0][2] if self._entries else None

    def at(self, index: int) -> T:
        """Item at position `index` in queue order. Raises IndexError when out of range."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"ready queue index {index} out of range (size {len(self._entries)})")
        return self._entries[index][2]

    def remove(self, item: T) -> bool:
        """Remove `item` by identity (not equality). Returns False if absent."""
        for index, (_, _, queued) in enumerate(self._entries):
            if queued is item:
                del self._entries[index]
                return True
        return False

    def size(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[T]:
        return (item for _, _, item in self._entries)

    def __contains__(self, item: object) -> bool:
        return any(queued is item for _, _, queued in self._entries)
