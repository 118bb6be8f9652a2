"""Growable list with an explicit over-allocation policy.

Directory enumeration appends entries one at a time without knowing how
many will arrive. GrowableList keeps an explicit backing store and grows
it with the same resize formula CPython uses for list objects, so the
number of reallocations stays logarithmic in the entry count.
"""

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from sftpmirror.core.errors import AllocationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def grow_capacity(requested: int) -> int:
    """Return the capacity to allocate for ``requested`` slots.

    Over-allocates by roughly 12.5% plus a constant, rounded down to a
    multiple of four.

    Args:
        requested: Minimum number of slots needed.

    Returns:
        New capacity, always >= requested.
    """
    return (requested + (requested >> 3) + 6) & ~3


class GrowableList(Generic[T]):
    """Ordered, index-addressable list with amortized O(1) append.

    Elements are never reordered. ``pop`` only moves the logical end of
    the list; the slot keeps its value until it is overwritten.

    Attributes:
        allocated: Number of slots in the backing store.
    """

    def __init__(self, initial_capacity: int = 0) -> None:
        """Initialize an empty list.

        Args:
            initial_capacity: Number of slots to preallocate.

        Raises:
            ValueError: If initial_capacity is negative.
        """
        if initial_capacity < 0:
            msg = f"Initial capacity must be non-negative, got {initial_capacity}"
            raise ValueError(msg)
        self._slots: list[T | None] = [None] * initial_capacity
        self._length = 0

    @property
    def allocated(self) -> int:
        return len(self._slots)

    def reserve(self, requested: int) -> None:
        """Make sure the backing store holds at least ``requested`` slots.

        Args:
            requested: Minimum number of slots needed.

        Raises:
            AllocationError: If the backing store cannot grow. The list is
                left untouched at its previous length and capacity.
        """
        if self.allocated >= requested:
            return

        try:
            new_capacity = grow_capacity(requested)
            grown = [*self._slots, *([None] * (new_capacity - self.allocated))]
        except MemoryError as e:
            logger.critical("Couldn't grow list to hold %d elements", requested)
            raise AllocationError(f"Unable to allocate room for {requested} list elements") from e

        self._slots = grown
        logger.debug("Grew list to %d slots", new_capacity)

    def append(self, element: T) -> None:
        """Store ``element`` at the tail, growing the backing store if needed."""
        self.reserve(self._length + 1)
        self._slots[self._length] = element
        self._length += 1

    def pop(self) -> T | None:
        """Remove and return the tail element, or None if the list is empty."""
        if self.is_empty():
            return None
        self._length -= 1
        return self._slots[self._length]

    def is_empty(self) -> bool:
        return self._length == 0

    def release(self) -> None:
        """Drop the backing store.

        Contained elements are not released; that stays the caller's job.
        """
        self._slots = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for index in range(self._length):
            yield self._slots[index]  # type: ignore[misc]

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            msg = f"GrowableList index out of range: {index}"
            raise IndexError(msg)
        return self._slots[index]  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"GrowableList({list(self)!r}, allocated={self.allocated})"
