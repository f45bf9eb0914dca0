"""
Bounded Queue - fixed-capacity FIFO ring buffer

Backing storage is a list allocated once at construction; head and tail
wrap modulo capacity, so enqueue/dequeue are O(1) and memory never grows
past the capacity no matter how much churn the queue sees.

Used as the waiting list of every Trip.
"""

from collections.abc import Iterator
from typing import Generic, TypeVar

from src.platform.exception.exceptions import QueueEmptyError, QueueFullError, ValidationError


T = TypeVar('T')


class BoundedQueue(Generic[T]):
    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValidationError('Queue capacity must be positive')
        self._capacity = capacity
        self._items: list[T | None] = [None] * capacity
        self._head = 0
        self._tail = -1
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, item: T) -> None:
        if self.is_full():
            raise QueueFullError('Waiting list is full. Cannot add more passengers.')
        self._tail = (self._tail + 1) % self._capacity
        self._items[self._tail] = item
        self._count += 1

    def dequeue(self) -> T:
        if self.is_empty():
            raise QueueEmptyError('Waiting list is empty.')
        item = self._items[self._head]
        self._items[self._head] = None  # drop the reference
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        return item  # type: ignore[return-value]

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._capacity

    def iterate(self) -> Iterator[T]:
        """Yield items head to tail without mutating the queue.

        Each call starts a fresh pass. Mutating the queue while a pass is
        in progress is not supported.
        """
        index = self._head
        for _ in range(self._count):
            yield self._items[index]  # type: ignore[misc]
            index = (index + 1) % self._capacity

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f'BoundedQueue(capacity={self._capacity}, size={self._count})'
