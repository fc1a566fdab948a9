"""
Incremental quadratic fitter.

QuadraticFitter accumulates (x, y) samples and solves the least-squares
quadratic y = a*x^2 + b*x + c in closed form on demand. Computing is
non-destructive: samples can keep arriving between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from quadfit.core.exceptions import DegenerateFitError
from quadfit.core.precision import resolve_dtype
from quadfit.core.result import Result
from quadfit.core.timing import Timer
from quadfit.core.validation import check_capacity, check_index
from quadfit.quadratic._buffer import SampleBuffer
from quadfit.quadratic._closed_form import power_sums, solve_coefficients
from quadfit.quadratic.solution import QuadraticParams, QuadraticSolution


@dataclass(frozen=True)
class Point:
    """One observation. Unpacks as ``x, y = point``."""
    x: Any
    y: Any

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y


class QuadraticFitter:
    """
    Least-squares quadratic fit over accumulated sample points.

    Generic over the floating-point type: every sample and every result is
    held in `dtype` (float64 by default, float32 accepted).

    Usage:
        fitter = QuadraticFitter(8)
        for x, y in samples:
            fitter.add(x, y)
        a, b, c = fitter.compute()

    Fewer than three distinct x-values make the normal equations singular.
    compute() then returns inf/nan coefficients rather than raising, unless
    strict=True is passed.

    Not safe for concurrent mutation; one owner, one thread.
    """

    def __init__(self, capacity_hint: int = 0, *, dtype: str | np.dtype | type | None = None):
        """
        Args:
            capacity_hint: Number of points to pre-allocate storage for.
                Performance hint only.
            dtype: Floating-point type of samples and coefficients.
        """
        capacity_hint = check_capacity(capacity_hint, 'capacity_hint')
        self._samples = SampleBuffer(capacity_hint, resolve_dtype(dtype))

    # === Accumulation ===

    def add(self, x: float, y: float) -> None:
        """Append a point. Values are not validated; NaN and inf pass through."""
        self._samples.append(x, y)

    def at(self, index: int) -> Point:
        """
        Point at `index`.

        Raises:
            SampleIndexError: If index >= size() or index < 0
        """
        row = self._samples.row(check_index(index, self._samples.size))
        return Point(row[0], row[1])

    def set(self, index: int, x: float, y: float) -> None:
        """
        Replace the point at `index`.

        Raises:
            SampleIndexError: If index >= size() or index < 0
        """
        self._samples.assign(check_index(index, self._samples.size), x, y)

    def size(self) -> int:
        return self._samples.size

    @property
    def capacity(self) -> int:
        """Rows currently allocated. Informational only."""
        return self._samples.capacity

    @property
    def dtype(self) -> np.dtype:
        return self._samples.dtype

    def clear(self) -> None:
        """Remove all points. Allocated capacity is kept for reuse."""
        self._samples.clear()

    def samples(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """Copies of the accumulated x and y values."""
        return self._samples.x().copy(), self._samples.y().copy()

    # === Solving ===

    def compute(self, *, strict: bool = False) -> tuple[Any, Any, Any]:
        """
        Coefficients (a, b, c) of the least-squares quadratic.

        Side-effect free and idempotent.

        Args:
            strict: Raise DegenerateFitError instead of returning
                non-finite coefficients for a singular system.

        Returns:
            (a, b, c) as scalars of the fitter's dtype
        """
        return self.solve(strict=strict).as_tuple()

    def solve(self, *, strict: bool = False) -> QuadraticSolution:
        """
        Solve and wrap the coefficients with diagnostics.

        Args:
            strict: Raise DegenerateFitError for a singular system.

        Returns:
            QuadraticSolution

        Raises:
            DegenerateFitError: If strict and the denominator is zero or a
                coefficient is not finite
        """
        timer = Timer()
        timer.start()

        dtype = self._samples.dtype
        x = self._samples.x().copy()
        y = self._samples.y().copy()

        with timer.section('power_sums'):
            s0, s1 = power_sums(x, y, dtype)

        with timer.section('closed_form'):
            a, b, c, d = solve_coefficients(s0, s1)

        timer.stop()

        n = int(x.shape[0])
        n_distinct_x = int(np.unique(x).shape[0])
        degenerate = d == 0 or not np.all(np.isfinite([a, b, c]))

        warnings: tuple[str, ...] = ()
        if degenerate:
            message = (
                f"degenerate fit: {n} samples with {n_distinct_x} distinct "
                f"x-values (denominator={float(d)!r}); coefficients are not finite"
            )
            if strict:
                raise DegenerateFitError(
                    message, n=n, n_distinct_x=n_distinct_x, denominator=float(d)
                )
            warnings = (message,)

        params = QuadraticParams(a=a, b=b, c=c, denominator=d, x=x, y=y)

        info: dict[str, Any] = {
            'method': 'closed_form',
            'dtype': dtype.name,
            'n': n,
            'n_distinct_x': n_distinct_x,
            'denominator': float(d),
        }

        result = Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name='cpu_closed_form',
            warnings=warnings,
        )
        return QuadraticSolution(_result=result)

    # === Copy semantics ===

    def copy(self) -> QuadraticFitter:
        """Independent fitter holding a duplicate of the samples."""
        dup = QuadraticFitter.__new__(QuadraticFitter)
        dup._samples = self._samples.copy()
        return dup

    def __copy__(self) -> QuadraticFitter:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> QuadraticFitter:
        dup = self.copy()
        memo[id(self)] = dup
        return dup

    # === Sequence protocol ===

    def __len__(self) -> int:
        return self._samples.size

    def __getitem__(self, index: int) -> Point:
        return self.at(index)

    def __setitem__(self, index: int, point: tuple[float, float]) -> None:
        x, y = point
        self.set(index, x, y)

    def __iter__(self) -> Iterator[Point]:
        for i in range(self._samples.size):
            row = self._samples.row(i)
            yield Point(row[0], row[1])

    def __repr__(self) -> str:
        return f"QuadraticFitter(size={self.size()}, dtype={self.dtype.name})"
