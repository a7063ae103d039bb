__all__ = [
    "ArraySequence",
    "LinkedSequence",
    "ListMixin",
    "NOT_FOUND",
    "SequenceIterator",
]
from .containers import ArraySequence, LinkedSequence
from .iterators import SequenceIterator
from .sequences import NOT_FOUND, ListMixin
