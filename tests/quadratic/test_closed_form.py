"""
Tests for the power sums and the closed-form coefficient solver.

The closed form is cross-checked against LAPACK least squares on the
Vandermonde system.
"""

import numpy as np
import pytest
from scipy import linalg

from quadfit.quadratic._closed_form import denominator, power_sums, solve_coefficients


def _lstsq(x, y):
    V = np.column_stack([x**2, x, np.ones_like(x)])
    coef, *_ = linalg.lstsq(V, y)
    return coef


class TestPowerSums:

    def test_known_values(self):
        x = np.array([-1.0, 0.0, 2.0])
        y = np.array([3.0, 5.0, 7.0])
        s0, s1 = power_sums(x, y, np.dtype(np.float64))
        np.testing.assert_array_equal(s0, [3.0, 1.0, 5.0, 7.0, 17.0])
        np.testing.assert_array_equal(s1, [15.0, 11.0, 31.0])

    def test_zero_to_the_zero_is_one(self):
        s0, s1 = power_sums(np.array([0.0]), np.array([4.0]), np.dtype(np.float64))
        assert s0[0] == 1.0
        assert s1[0] == 4.0
        np.testing.assert_array_equal(s0[1:], 0.0)

    def test_empty_is_all_zero(self):
        s0, s1 = power_sums(np.empty(0), np.empty(0), np.dtype(np.float64))
        np.testing.assert_array_equal(s0, np.zeros(5))
        np.testing.assert_array_equal(s1, np.zeros(3))

    def test_dtype_respected(self):
        s0, s1 = power_sums(np.array([1.0, 2.0]), np.array([1.0, 2.0]), np.dtype(np.float32))
        assert s0.dtype == np.float32
        assert s1.dtype == np.float32


class TestDenominator:

    def test_symmetric_three_points(self):
        s0, _ = power_sums(np.array([-1.0, 0.0, 1.0]), np.zeros(3), np.dtype(np.float64))
        assert denominator(s0) == 4.0

    def test_two_distinct_x_is_zero(self):
        s0, _ = power_sums(np.array([0.0, 1.0]), np.zeros(2), np.dtype(np.float64))
        assert denominator(s0) == 0.0

    def test_identical_x_is_zero(self):
        s0, _ = power_sums(np.full(3, 2.0), np.zeros(3), np.dtype(np.float64))
        assert denominator(s0) == 0.0


class TestSolveCoefficients:

    def test_reference_scenario(self):
        x = np.array([-1.0, 0.0, 1.0])
        y = np.array([11.11, 0.01, -8.63])
        a, b, c, d = solve_coefficients(*power_sums(x, y, np.dtype(np.float64)))
        assert d == 4.0
        np.testing.assert_allclose([a, b, c], [1.23, -9.87, 0.01], rtol=1e-12, atol=1e-12)

    @pytest.mark.parametrize("n", [3, 5, 20, 200])
    def test_matches_lapack_on_noisy_data(self, rng, n):
        x = rng.uniform(-3, 3, size=n)
        y = 0.5 * x**2 - 2.0 * x + 1.0 + rng.standard_normal(n)
        a, b, c, _ = solve_coefficients(*power_sums(x, y, np.dtype(np.float64)))
        np.testing.assert_allclose([a, b, c], _lstsq(x, y), rtol=1e-6, atol=1e-7)

    def test_empty_gives_nan_without_warning(self):
        s0, s1 = power_sums(np.empty(0), np.empty(0), np.dtype(np.float64))
        with np.errstate(all='raise'):
            a, b, c, d = solve_coefficients(s0, s1)
        assert d == 0.0
        assert np.isnan(a) and np.isnan(b) and np.isnan(c)
