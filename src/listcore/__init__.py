__all__ = [
    "ArraySequence",
    "LinkedSequence",
    "ListMixin",
    "NOT_FOUND",
    "SequenceIterator",
    "SequenceOptions",
    "PrimitiveSequence",
    "RemovingIterator",
    "ListCoreError",
    "IndexOutOfRange",
    "IteratorStateError",
    "NoneElementError",
    "logger",
    "set_logger",
]
from .exceptions import (
    IndexOutOfRange,
    IteratorStateError,
    ListCoreError,
    NoneElementError,
)
from .log import logger as logger
from .log import set_logger as set_logger
from .models import SequenceOptions
from .protocols import PrimitiveSequence, RemovingIterator
from .structures import (
    NOT_FOUND,
    ArraySequence,
    LinkedSequence,
    ListMixin,
    SequenceIterator,
)
