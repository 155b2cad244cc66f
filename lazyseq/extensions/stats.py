from __future__ import annotations
import typing
import math
import numpy as np
from ..types import *
from ..errors import EmptySequenceError

if typing.TYPE_CHECKING:
    from ..stream import Stream

Number = Union[int, float]


class StatsAccessor(Generic[T]):
    """numeric summaries of a finite stream"""

    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def _get_values(self, operation: str, selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract numeric values for statistical operations."""
        source = self._stream.map(selector) if selector else self._stream
        data = source.to.list()
        if not data:
            raise EmptySequenceError(operation)
        if not all(isinstance(x, (int, float)) for x in data):
            raise TypeError(f"sequence contains non-numeric types for {operation}.")
        return data

    def product(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """multiply everything; ints stay exact"""
        return math.prod(self._get_values("product", selector))

    def average(self, selector: Optional[Selector[T, Number]] = None) -> float:
        return float(np.mean(self._get_values("average", selector)))

    def min(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        return min(self._get_values("min", selector))

    def max(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        return max(self._get_values("max", selector))

    def median(self, selector: Optional[Selector[T, Number]] = None) -> float:
        return float(np.median(self._get_values("median", selector)))

    def std(self, selector: Optional[Selector[T, Number]] = None, ddof: int = 0) -> float:
        """standard deviation; population (ddof=0) by default, like numpy"""
        values = self._get_values("std", selector)
        if len(values) <= ddof:
            raise ValueError(f"need more than {ddof} values for std with ddof={ddof}")
        return float(np.std(values, ddof=ddof))
