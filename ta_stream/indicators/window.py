"""Fixed-capacity circular storage for window-based indicators."""

from collections.abc import Iterator


class RingBuffer:
    """
    Bounded FIFO of the last ``capacity`` values.

    Storage is a preallocated list of zeros plus a write cursor. Once full,
    each push overwrites the oldest physical slot.
    """

    __slots__ = ("_capacity", "_slots", "_cursor", "_count")

    def __init__(self, capacity: int):
        self._capacity = capacity
        self._slots = [0.0] * capacity
        self._cursor = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: float) -> float:
        """
        Store value in the oldest slot.

        Returns:
            The overwritten slot content; 0.0 while the buffer is filling
        """
        evicted = self._slots[self._cursor]
        self._slots[self._cursor] = value
        self._cursor += 1
        if self._cursor == self._capacity:
            self._cursor = 0
        if self._count < self._capacity:
            self._count += 1
        return evicted

    def is_full(self) -> bool:
        return self._count == self._capacity

    def oldest(self) -> float:
        """Oldest held value. Raises IndexError when empty."""
        if not self._count:
            raise IndexError("oldest() on empty RingBuffer")
        return self._slots[self._cursor] if self.is_full() else self._slots[0]

    def newest(self) -> float:
        """Most recently pushed value. Raises IndexError when empty."""
        if not self._count:
            raise IndexError("newest() on empty RingBuffer")
        return self._slots[self._cursor - 1]

    def clear(self) -> None:
        for i in range(self._capacity):
            self._slots[i] = 0.0
        self._cursor = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[float]:
        """Held values from oldest to newest."""
        if self.is_full():
            yield from self._slots[self._cursor:]
            yield from self._slots[:self._cursor]
        else:
            yield from self._slots[:self._count]

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self._capacity}, values={list(self)!r})"
