"""
Closed-form least-squares solution for y = a*x^2 + b*x + c.

The normal equations of quadratic regression form a 3x3 system in the
power sums

    S0(j) = sum(x_i^j),        j = 0..4
    S1(j) = sum(x_i^j * y_i),  j = 0..2

which is solved here by Cramer's rule. All three coefficients share one
denominator D (the determinant of the normal matrix). With fewer than
three distinct x-values D is zero and the coefficients follow IEEE-754
division (inf or nan); nothing here validates that.

Reference: http://mathforum.org/library/drmath/view/72047.html
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

# IEEE arithmetic is the contract: inf/nan inputs and a zero denominator
# produce inf/nan outputs without numpy RuntimeWarnings.
_IEEE = dict(divide='ignore', invalid='ignore', over='ignore')


def power_sums(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    dtype: np.dtype,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Compute the power sums S0(0..4) and S1(0..2).

    Exponentiation uses numpy.power with a floating exponent, so 0^0 == 1.
    Sums accumulate in `dtype`; empty input gives all-zero sums.

    Returns:
        (s0, s1) arrays of length 5 and 3
    """
    dtype = np.dtype(dtype)
    x = np.asarray(x, dtype=dtype)
    y = np.asarray(y, dtype=dtype)

    s0 = np.zeros(5, dtype=dtype)
    s1 = np.zeros(3, dtype=dtype)
    with np.errstate(**_IEEE):
        for j in range(5):
            xj = np.power(x, dtype.type(j))
            s0[j] = np.sum(xj, dtype=dtype)
            if j < 3:
                s1[j] = np.sum(xj * y, dtype=dtype)
    return s0, s1


def denominator(s0: NDArray[np.floating[Any]]) -> np.floating[Any]:
    """Shared denominator D of the three coefficient formulas."""
    # Typed constant keeps float32 sums in float32 under legacy promotion
    two = s0.dtype.type(2)
    with np.errstate(**_IEEE):
        return (s0[0] * s0[2] * s0[4]
                - s0[1] * s0[1] * s0[4]
                - s0[0] * s0[3] * s0[3]
                + two * s0[1] * s0[2] * s0[3]
                - s0[2] * s0[2] * s0[2])


def solve_coefficients(
    s0: NDArray[np.floating[Any]],
    s1: NDArray[np.floating[Any]],
) -> tuple[np.floating[Any], np.floating[Any], np.floating[Any], np.floating[Any]]:
    """
    Evaluate a, b, c from the power sums.

    Division by a zero denominator is not an error; the IEEE result is
    returned.

    Returns:
        (a, b, c, D) as scalars of the power sums' dtype
    """
    d = denominator(s0)

    with np.errstate(**_IEEE):
        num_a = (s1[0] * s0[1] * s0[3]
                 - s1[1] * s0[0] * s0[3]
                 - s1[0] * s0[2] * s0[2]
                 + s1[1] * s0[1] * s0[2]
                 + s1[2] * s0[0] * s0[2]
                 - s1[2] * s0[1] * s0[1])

        num_b = (s1[1] * s0[0] * s0[4]
                 - s1[0] * s0[1] * s0[4]
                 + s1[0] * s0[2] * s0[3]
                 - s1[2] * s0[0] * s0[3]
                 - s1[1] * s0[2] * s0[2]
                 + s1[2] * s0[1] * s0[2])

        num_c = (s1[0] * s0[2] * s0[4]
                 - s1[1] * s0[1] * s0[4]
                 - s1[0] * s0[3] * s0[3]
                 + s1[1] * s0[2] * s0[3]
                 + s1[2] * s0[1] * s0[3]
                 - s1[2] * s0[2] * s0[2])

        return num_a / d, num_b / d, num_c / d, d
