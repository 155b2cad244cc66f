"""
error taxonomy. each class also derives from the builtin that plain python
code raises for the same condition, so `except ValueError` keeps working.
"""


class LazySeqError(Exception):
    """base class for every error raised by lazyseq itself"""
    pass


class EmptySequenceError(LazySeqError, ValueError):
    """raised when head/tail/reduce is forced on an empty stream"""

    def __init__(self, operation: str, message: str = None):
        super().__init__(message or f"{operation} of empty stream")
        self.operation = operation


class IndexOutOfRangeError(LazySeqError, IndexError):
    """raised when get(index) runs past the end of a stream"""

    def __init__(self, index: int, length: int = None):
        if length is None:
            message = f"index {index} out of range"
        else:
            message = f"index {index} out of range for stream of length {length}"
        super().__init__(message)
        self.index = index
        self.length = length


class MatcherMisconfigured(LazySeqError, TypeError):
    """raised while building a matcher whose guards, handlers or fallback are unusable"""
    pass


class ForceLimitExceeded(LazySeqError, RuntimeError):
    """raised when a forcing walk visits more nodes than the configured force_limit"""

    def __init__(self, limit: int):
        super().__init__(f"forcing visited more than {limit} elements (force_limit)")
        self.limit = limit
