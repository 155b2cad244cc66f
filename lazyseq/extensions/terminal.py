from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream


class TerminalAccessor(Generic[T]):
    """materializing conversions. every one of these forces the whole stream, so it must be finite"""

    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._stream)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._stream)

    def set(self) -> typing.Set[T]:
        """convert to set"""
        return set(self._stream)

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list(), dtype=dtype)

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list(), name=name)

    def dict(self, key_selector: Selector[T, Any],
             value_selector: Optional[Selector[T, Any]] = None) -> Dict[Any, Any]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._stream}
