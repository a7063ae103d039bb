from __future__ import annotations

import abc
from collections.abc import (
    Iterable,
    Iterator,
)
from typing import (
    Any,
    ClassVar,
    Final,
    Generic,
    TypeVar,
    cast,
    get_args,
    overload,
)

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..exceptions import IndexOutOfRange, NoneElementError
from ..log import logger
from ..models import DEFAULT_OPTIONS, SequenceOptions
from ..protocols import IteratorFactory, RemovingIterator
from .iterators import SequenceIterator

ValueT = TypeVar("ValueT")
BufferT = TypeVar("BufferT", bound=list[Any])

NOT_FOUND: Final[int] = -1


class ListMixin(abc.ABC, Generic[ValueT]):
    """
    The full list contract built on a handful of primitives.

    A consuming class implements `size`, `get`, `set`, `add`, `remove`,
    `index_of` and `last_index_of`; everything else (bulk operations, export,
    the Python sequence protocol) is derived here from those primitives and
    from the iterator produced by `iterator_factory`.
    """

    iterator_factory: ClassVar[IteratorFactory] = SequenceIterator
    _options: SequenceOptions = DEFAULT_OPTIONS

    # Primitive core

    @abc.abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, index: int) -> ValueT:
        raise NotImplementedError

    @abc.abstractmethod
    def set(self, index: int, value: ValueT) -> ValueT:
        raise NotImplementedError

    @abc.abstractmethod
    def add(self, index: int, value: ValueT) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def remove(self, index: int) -> ValueT:
        raise NotImplementedError

    @abc.abstractmethod
    def index_of(self, target: object) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def last_index_of(self, target: object) -> int:
        raise NotImplementedError

    def contains(self, target: object) -> bool:
        return self.index_of(target) != NOT_FOUND

    # Helpers shared by concrete containers

    @property
    def options(self) -> SequenceOptions:
        return self._options

    def check_index(self, index: int, operation: str) -> None:
        """Positions 0..size()-1 are valid."""
        _require_int(index)
        size = self.size()
        if index < 0 or index >= size:
            raise IndexOutOfRange(index, size, operation)

    def check_position(self, index: int, operation: str) -> None:
        """Insertion positions 0..size() are valid."""
        _require_int(index)
        size = self.size()
        if index < 0 or index > size:
            raise IndexOutOfRange(index, size, operation)

    def _check_value(self, value: object, operation: str) -> None:
        if value is None and not self._options.allow_none:
            raise NoneElementError(operation)

    def _is_searchable(self, target: object) -> bool:
        return target is not None or self._options.allow_none

    # Derived operations

    def iterator(self) -> RemovingIterator[ValueT]:
        return cast(RemovingIterator[ValueT], type(self).iterator_factory(self))

    def append(self, value: ValueT) -> bool:
        self.add(self.size(), value)
        return True

    def is_empty(self) -> bool:
        return self.size() == 0

    def remove_value(self, target: object) -> bool:
        """Removes the first occurrence of `target`, if any."""
        index = self.index_of(target)
        if index == NOT_FOUND:
            return False
        _ = self.remove(index)
        return True

    def contains_all(self, others: Iterable[object]) -> bool:
        return all(self.contains(element) for element in others)

    def add_all(self, others: Iterable[ValueT]) -> bool:
        values = list(others)
        for value in values:
            self._check_value(value, "add_all")

        modified = False
        for value in values:
            if self.append(value):
                modified = True
        return modified

    def remove_all(self, others: Iterable[object]) -> bool:
        """
        Removes every occurrence of every value found in `others`.

        This is not a multiset difference: `[a, b, a].remove_all([a])` leaves
        `[b]`, however many times `a` appears on either side.
        """
        removed = 0
        for target in _distinct(others):
            while self.remove_value(target):
                removed += 1

        logger().debug(f"remove_all() removed {removed} element(s)")
        return removed > 0

    def retain_all(self, others: Iterable[object]) -> bool:
        keep = list(others)
        removed = 0
        iterator = self.iterator()
        while iterator.has_next():
            if not _matches_any(iterator.next(), keep):
                _ = iterator.remove()
                removed += 1

        logger().debug(f"retain_all() removed {removed} element(s)")
        return removed > 0

    def clear(self) -> None:
        for index in range(self.size() - 1, -1, -1):
            _ = self.remove(index)

    @overload
    def to_array(self) -> list[ValueT]: ...

    @overload
    def to_array(self, buffer: BufferT) -> BufferT: ...

    def to_array(self, buffer: list[Any] | None = None) -> list[Any]:
        """
        Exports the elements in order.

        Without `buffer` a new list is returned. A buffer that is large enough
        is filled in place and, when longer than the sequence, gets `None`
        written right after the last element; slots past that are untouched.
        An undersized buffer is left alone and a populated replacement of the
        same type is returned instead.
        """
        if buffer is None:
            return list(self.iterator())

        size = self.size()
        if len(buffer) < size:
            logger().debug(
                f"to_array() buffer of length {len(buffer)} is too small for "
                f"{size} element(s), allocating a new {type(buffer).__name__}"
            )
            return type(buffer)(self.iterator())

        for index, value in enumerate(self.iterator()):
            buffer[index] = value
        if len(buffer) > size:
            buffer[size] = None
        return buffer

    # Python sequence protocol

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> ValueT:
        return self.get(index)

    def __setitem__(self, index: int, value: ValueT) -> None:
        _ = self.set(index, value)

    def __delitem__(self, index: int) -> None:
        _ = self.remove(index)

    def __iter__(self) -> Iterator[ValueT]:
        return self.iterator()

    def __contains__(self, target: object) -> bool:
        return self.contains(target)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListMixin | list | tuple):
            return NotImplemented
        other = cast(Iterable[Any], other)
        mine = self.to_array()
        theirs = list(other)
        return len(mine) == len(theirs) and all(
            a == b for a, b in zip(mine, theirs)
        )

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """
        Lets `ArraySequence[int]` and friends be used as pydantic field types.

        Input is validated as a list of the declared element type and wrapped
        in the container; serialization emits a plain list.
        """
        args = get_args(source_type)
        item_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()

        def build(items: list[Any]) -> ListMixin[Any]:
            return cls(items=items)  # pyright: ignore[reportCallIssue]

        def unwrap(value: Any) -> Any:
            if isinstance(value, ListMixin):
                return cast(ListMixin[Any], value).to_array()
            return value

        return core_schema.no_info_before_validator_function(
            unwrap,
            core_schema.no_info_after_validator_function(
                build,
                core_schema.list_schema(item_schema),
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_array()
            ),
        )


def _require_int(index: object) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(
            f"Sequence indices must be integers, not {type(index).__name__}"
        )


def _matches_any(value: object, candidates: Iterable[object]) -> bool:
    # Plain ==, unlike `in`, which also accepts identical objects.
    return any(candidate == value for candidate in candidates)


def _distinct(values: Iterable[object]) -> list[object]:
    # Equality-based so unhashable elements are supported.
    distinct: list[object] = []
    for value in values:
        if not _matches_any(value, distinct):
            distinct.append(value)
    return distinct
