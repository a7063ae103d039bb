from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import (
    Any,
    ClassVar,
    Generic,
    TypeVar,
    override,
)

from ..exceptions import IteratorStateError
from ..models import DEFAULT_OPTIONS, SequenceOptions
from ..protocols import IteratorFactory
from .sequences import NOT_FOUND, ListMixin

ValueT = TypeVar("ValueT")


class ArraySequence(ListMixin[ValueT], Generic[ValueT]):
    def __init__(
        self,
        *,
        items: Iterable[ValueT] | None = None,
        options: SequenceOptions | None = None,
    ):
        self._options = options or DEFAULT_OPTIONS
        values = list(items) if items is not None else []
        for value in values:
            self._check_value(value, "__init__")
        self._items: list[ValueT] = values

    @override
    def size(self) -> int:
        return len(self._items)

    @override
    def get(self, index: int) -> ValueT:
        self.check_index(index, "get")
        return self._items[index]

    @override
    def set(self, index: int, value: ValueT) -> ValueT:
        self.check_index(index, "set")
        self._check_value(value, "set")
        previous = self._items[index]
        self._items[index] = value
        return previous

    @override
    def add(self, index: int, value: ValueT) -> None:
        self.check_position(index, "add")
        self._check_value(value, "add")
        self._items.insert(index, value)

    @override
    def remove(self, index: int) -> ValueT:
        self.check_index(index, "remove")
        return self._items.pop(index)

    @override
    def index_of(self, target: object) -> int:
        if self._is_searchable(target):
            for index, value in enumerate(self._items):
                if value == target:
                    return index
        return NOT_FOUND

    @override
    def last_index_of(self, target: object) -> int:
        if self._is_searchable(target):
            for index in range(len(self._items) - 1, -1, -1):
                if self._items[index] == target:
                    return index
        return NOT_FOUND


class _Node(Generic[ValueT]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None):
        self.value: ValueT = value
        self.prev: _Node[ValueT] = self
        self.next: _Node[ValueT] = self


class _LinkedIterator(Iterator[ValueT], Generic[ValueT]):
    """Walks the node chain directly; `remove()` unlinks the last node returned."""

    def __init__(self, sequence: LinkedSequence[ValueT]):
        self._sequence: LinkedSequence[ValueT] = sequence
        self._upcoming: _Node[ValueT] = sequence._head.next  # pyright: ignore[reportPrivateUsage]
        self._last: _Node[ValueT] | None = None

    def has_next(self) -> bool:
        return self._upcoming is not self._sequence._tail  # pyright: ignore[reportPrivateUsage]

    def next(self) -> ValueT:
        if not self.has_next():
            raise StopIteration
        node = self._upcoming
        self._last = node
        self._upcoming = node.next
        return node.value

    @override
    def __next__(self) -> ValueT:
        return self.next()

    def remove(self) -> ValueT:
        if self._last is None:
            raise IteratorStateError("remove() must follow a call to next()")
        value = self._sequence._unlink(self._last)  # pyright: ignore[reportPrivateUsage]
        self._last = None
        return value


class LinkedSequence(ListMixin[ValueT], Generic[ValueT]):
    """Doubly linked list with head and tail sentinels."""

    iterator_factory: ClassVar[IteratorFactory] = _LinkedIterator

    def __init__(
        self,
        *,
        items: Iterable[ValueT] | None = None,
        options: SequenceOptions | None = None,
    ):
        self._options = options or DEFAULT_OPTIONS
        self._head: _Node[ValueT] = _Node()
        self._tail: _Node[ValueT] = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size: int = 0

        values = list(items) if items is not None else []
        for value in values:
            self._check_value(value, "__init__")
        for value in values:
            self._link_before(self._tail, value)

    def _node_at(self, index: int) -> _Node[ValueT]:
        # Walk from whichever end is closer.
        if index < self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next
        else:
            node = self._tail.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _link_before(self, successor: _Node[ValueT], value: ValueT) -> None:
        node: _Node[ValueT] = _Node(value)
        node.prev = successor.prev
        node.next = successor
        successor.prev.next = node
        successor.prev = node
        self._size += 1

    def _unlink(self, node: _Node[ValueT]) -> ValueT:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    @override
    def size(self) -> int:
        return self._size

    @override
    def get(self, index: int) -> ValueT:
        self.check_index(index, "get")
        return self._node_at(index).value

    @override
    def set(self, index: int, value: ValueT) -> ValueT:
        self.check_index(index, "set")
        self._check_value(value, "set")
        node = self._node_at(index)
        previous = node.value
        node.value = value
        return previous

    @override
    def add(self, index: int, value: ValueT) -> None:
        self.check_position(index, "add")
        self._check_value(value, "add")
        successor = self._tail if index == self._size else self._node_at(index)
        self._link_before(successor, value)

    @override
    def remove(self, index: int) -> ValueT:
        self.check_index(index, "remove")
        return self._unlink(self._node_at(index))

    @override
    def index_of(self, target: object) -> int:
        if self._is_searchable(target):
            node = self._head.next
            index = 0
            while node is not self._tail:
                if node.value == target:
                    return index
                node = node.next
                index += 1
        return NOT_FOUND

    @override
    def last_index_of(self, target: object) -> int:
        if self._is_searchable(target):
            node = self._tail.prev
            index = self._size - 1
            while node is not self._head:
                if node.value == target:
                    return index
                node = node.prev
                index -= 1
        return NOT_FOUND
