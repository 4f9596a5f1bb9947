"""A fixed-size circular buffer of events, read independently by each reader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class _Holder(Generic[T]):
    data: T
    gen: int
    targets: FrozenSet[Any]


class EventStreamBuffer(Generic[T]):
    """Events are written round a ring of `size` slots; each lap is a new generation."""

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        self.size = size
        self.head = 0
        self.gen = 0
        self.inner: List[_Holder[T]] = []

    def push(self, data: T, targets: Iterable[Any] = ()) -> None:
        """Write an event for the given readers; no targets means everyone."""
        holder = _Holder(data, self.gen, frozenset(targets))
        if self.head == len(self.inner):
            self.inner.append(holder)
        else:
            self.inner[self.head] = holder
        self.head += 1
        if self.head >= self.size:
            self.head = 0
            self.gen += 1

    def broadcast(self, data: T) -> None:
        """Write an event every reader receives."""
        self.push(data)

    def stream(self, reader_id: Any) -> "EventStreamReader[T]":
        """A reader that starts at the current write position."""
        return EventStreamReader(self, self.head, self.gen, reader_id)


class EventStreamReader(Generic[T]):
    """Reads the events of one buffer that are addressed to one reader."""

    def __init__(self, buffer: EventStreamBuffer[T], curr: int, gen: int, reader_id: Any):
        self._buffer = buffer
        self._curr = curr
        self._gen = gen
        self.reader_id = reader_id

    def try_read(self) -> Optional[T]:
        """Next event for this reader, or None when caught up.

        A reader overtaken by the writer returns None once and then resumes
        from the start of the writer's current lap.
        """
        buffer = self._buffer
        while True:
            if self._curr >= len(buffer.inner):
                return None
            holder = buffer.inner[self._curr]
            if holder.gen < self._gen:
                return None
            if holder.gen > self._gen:
                self._gen = buffer.gen
                self._curr = 0
                return None
            self._advance()
            if not holder.targets or self.reader_id in holder.targets:
                return holder.data

    def _advance(self) -> None:
        self._curr += 1
        if self._curr >= self._buffer.size:
            self._curr = 0
            self._gen += 1

    def __iter__(self) -> Iterator[T]:
        """Drain every event available now."""
        while True:
            item = self.try_read()
            if item is None:
                return
            yield item