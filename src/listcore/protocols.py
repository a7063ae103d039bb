from __future__ import annotations

from collections.abc import Callable
from typing import (
    Any,
    Protocol,
    TypeVar,
    runtime_checkable,
)

ValueT = TypeVar("ValueT")
ValueT_co = TypeVar("ValueT_co", covariant=True)


@runtime_checkable
class PrimitiveSequence(Protocol[ValueT]):
    """The operations a concrete container implements natively."""

    def size(self) -> int: ...
    def get(self, index: int) -> ValueT: ...
    def set(self, index: int, value: ValueT) -> ValueT: ...
    def add(self, index: int, value: ValueT) -> None: ...
    def remove(self, index: int) -> ValueT: ...
    def index_of(self, target: object) -> int: ...
    def last_index_of(self, target: object) -> int: ...


@runtime_checkable
class RemovingIterator(Protocol[ValueT_co]):
    """A single forward pass that can delete the element it last produced."""

    def has_next(self) -> bool: ...
    def next(self) -> ValueT_co: ...
    def remove(self) -> ValueT_co: ...
    def __iter__(self) -> RemovingIterator[ValueT_co]: ...
    def __next__(self) -> ValueT_co: ...


IteratorFactory = Callable[[Any], RemovingIterator[Any]]
