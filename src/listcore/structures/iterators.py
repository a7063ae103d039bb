from __future__ import annotations

from collections.abc import Iterator
from typing import (
    Generic,
    TypeVar,
    override,
)

from ..exceptions import IteratorStateError
from ..protocols import PrimitiveSequence

ValueT = TypeVar("ValueT")


class SequenceIterator(Iterator[ValueT], Generic[ValueT]):
    """
    Index-based cursor over any PrimitiveSequence.

    `remove()` deletes the element most recently returned by `next()` through
    the sequence's own `remove(index)` and steps the cursor back, so the
    following `next()` neither skips nor repeats an element.
    """

    def __init__(self, sequence: PrimitiveSequence[ValueT]):
        self._sequence: PrimitiveSequence[ValueT] = sequence
        self._cursor: int = 0
        self._last: int | None = None

    def has_next(self) -> bool:
        return self._cursor < self._sequence.size()

    def next(self) -> ValueT:
        if not self.has_next():
            raise StopIteration
        value = self._sequence.get(self._cursor)
        self._last = self._cursor
        self._cursor += 1
        return value

    @override
    def __next__(self) -> ValueT:
        return self.next()

    def remove(self) -> ValueT:
        if self._last is None:
            raise IteratorStateError("remove() must follow a call to next()")
        removed = self._sequence.remove(self._last)
        self._cursor = self._last
        self._last = None
        return removed
