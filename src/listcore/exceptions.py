class ListCoreError(Exception):
    """Base class for every error raised by listcore."""

    pass


class IndexOutOfRange(ListCoreError, IndexError):
    """Raised by positional operations when the index is outside their valid range."""

    def __init__(self, index: int, size: int, operation: str):
        self.index: int = index
        self.size: int = size
        self.operation: str = operation
        super().__init__(
            f"Index {index} out of range for {operation}() on a sequence of size {size}"
        )


class IteratorStateError(ListCoreError, RuntimeError):
    """Raised when an iterator has no current element to remove."""

    pass


class NoneElementError(ListCoreError, TypeError):
    def __init__(self, operation: str):
        self.operation: str = operation
        super().__init__(f"{operation}() received None, which this sequence forbids")
