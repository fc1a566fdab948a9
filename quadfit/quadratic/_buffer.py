"""
Growable arena of (x, y) samples.

Rows live in a preallocated (capacity, 2) array; appends past the end
double the allocation. Only the first `size` rows are meaningful.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

_MIN_GROWTH = 8


class SampleBuffer:
    """Contiguous, insertion-ordered storage for sample points."""

    __slots__ = ('_data', '_size')

    def __init__(self, capacity: int, dtype: np.dtype):
        self._data = np.empty((capacity, 2), dtype=dtype)
        self._size = 0

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._data.shape[0]

    def append(self, x: Any, y: Any) -> None:
        if self._size == self.capacity:
            self._grow(max(_MIN_GROWTH, 2 * self.capacity))
        self._data[self._size, 0] = x
        self._data[self._size, 1] = y
        self._size += 1

    def row(self, index: int) -> NDArray[np.floating[Any]]:
        return self._data[index]

    def assign(self, index: int, x: Any, y: Any) -> None:
        self._data[index, 0] = x
        self._data[index, 1] = y

    def clear(self) -> None:
        self._size = 0

    def x(self) -> NDArray[np.floating[Any]]:
        """View of the accumulated x-values (not a copy)."""
        return self._data[:self._size, 0]

    def y(self) -> NDArray[np.floating[Any]]:
        """View of the accumulated y-values (not a copy)."""
        return self._data[:self._size, 1]

    def copy(self) -> SampleBuffer:
        dup = SampleBuffer.__new__(SampleBuffer)
        dup._data = self._data.copy()
        dup._size = self._size
        return dup

    def _grow(self, capacity: int) -> None:
        data = np.empty((capacity, 2), dtype=self._data.dtype)
        data[:self._size] = self._data[:self._size]
        self._data = data
