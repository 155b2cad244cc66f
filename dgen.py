r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from lazyseq import from_iterable, Stream
from typing import Any, Dict, List, Optional, Tuple


class Generator:
    """seeded source of numeric test samples."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def integer(self, min_value: int = 0, max_value: int = 1000) -> int:
        return self._fake.pyint(min_value=min_value, max_value=max_value)

    def integers(self, count: int, min_value: int = 0, max_value: int = 1000) -> List[int]:
        return [self.integer(min_value, max_value) for _ in range(count)]

    def length(self, low: int, high: int) -> int:
        """a sample size in [low, high]"""
        # convert numpy's integer to a native python int
        return int(self._rng.integers(low, high, endpoint=True))

    def create(self, schema: Dict[str, Any]) -> List[int]:
        """
        one integer list from a schema:
            {'count': 10 or (low, high), 'min': 0, 'max': 100}
        """
        count_config = schema.get('count', 5)
        if isinstance(count_config, (list, tuple)) and len(count_config) == 2:
            count = self.length(*count_config)
        elif isinstance(count_config, int):
            count = count_config
        else:
            raise ValueError(f"'count' must be an int or a (low, high) pair, got {count_config!r}")
        return self.integers(count, schema.get('min', 0), schema.get('max', 1000))


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Stream:
        """a finite stream of `count` integer lists"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def pairs(self, count: int) -> List[Tuple[List[int], int]]:
        """(sample, index) pairs where index is a valid position in the sample (samples are non-empty)"""
        result = []
        for sample in self.take(count):
            if not sample:
                continue
            result.append((sample, self._generator.length(0, len(sample) - 1)))
        return result


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def int_lists(count: int, seed: Optional[int] = None, length: Tuple[int, int] = (0, 20),
              min_value: int = -100, max_value: int = 100) -> List[List[int]]:
    """shortcut for the common case: `count` random integer lists"""
    return from_schema({'count': length, 'min': min_value, 'max': max_value}, seed).take(count).to.list()
