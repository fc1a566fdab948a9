"""
One-shot fitting entry point.

fit() validates array inputs, feeds them through a QuadraticFitter and
returns the solution.
"""

import numpy as np
from numpy.typing import ArrayLike

from quadfit.core.validation import check_1d, check_array, check_consistent_length
from quadfit.quadratic.fitter import QuadraticFitter
from quadfit.quadratic.solution import QuadraticSolution


def fit(
    x: ArrayLike,
    y: ArrayLike,
    *,
    dtype: str | np.dtype | type | None = 'float64',
    strict: bool = False,
) -> QuadraticSolution:
    """
    Fit y = a*x^2 + b*x + c by least squares.

    Args:
        x: Sample x-values (n,). Any numeric array-like.
        y: Sample y-values (n,). Any numeric array-like.
        dtype: Floating-point type of the computation ('float64' or 'float32').
        strict: Raise DegenerateFitError for a singular system instead of
            returning non-finite coefficients.

    Returns:
        QuadraticSolution with coefficients, diagnostics and summary()

    Raises:
        ValidationError: If inputs are non-numeric or dtype is unsupported
        DimensionError: If x or y is not 1D, or their lengths differ
        DegenerateFitError: If strict and the system is singular

    Example:
        >>> import numpy as np
        >>> from quadfit import fit
        >>> x = np.linspace(-1, 1, 8)
        >>> result = fit(x, 1.23 * x**2 - 9.87 * x + 0.01)
        >>> result.coefficients
    """
    # This is the boundary - validate shape here. Values are not checked:
    # NaN and inf propagate into the coefficients exactly as with add().
    x_arr = check_array(x, 'x')
    y_arr = check_array(y, 'y')
    check_1d(x_arr, 'x')
    check_1d(y_arr, 'y')
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))

    fitter = QuadraticFitter(x_arr.shape[0], dtype=dtype)
    for xi, yi in zip(x_arr, y_arr):
        fitter.add(xi, yi)

    return fitter.solve(strict=strict)
