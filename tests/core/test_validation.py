"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_1d: dimensionality check
    - check_consistent_length: multi-array length matching
    - check_capacity: non-negative integer hints
    - check_index: bounds checking against a size
"""

import numpy as np
import pytest

from quadfit.core.exceptions import DimensionError, SampleIndexError, ValidationError
from quadfit.core.validation import (
    check_1d,
    check_array,
    check_capacity,
    check_consistent_length,
    check_index,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_passthrough(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "x").dtype == np.float32

    def test_nan_allowed(self):
        result = check_array([1.0, np.nan], "x")
        assert np.isnan(result[1])

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1.0, "a", None], "y")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")


# ═══════════════════════════════════════════════════════════════════════
# Shapes
# ═══════════════════════════════════════════════════════════════════════


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_fails(self):
        with pytest.raises(DimensionError, match=r"x: expected 1D array, got 2D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_scalar_fails(self):
        with pytest.raises(DimensionError):
            check_1d(np.asarray(1.0), "x")


class TestCheckConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(4), np.ones(4), names=("x", "y"))

    def test_mismatch_fails(self):
        with pytest.raises(DimensionError, match="x=4, y=3"):
            check_consistent_length(np.zeros(4), np.ones(3), names=("x", "y"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(4), np.ones(4), names=("x",))


# ═══════════════════════════════════════════════════════════════════════
# check_capacity / check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCapacity:

    def test_zero_ok(self):
        assert check_capacity(0, "capacity_hint") == 0

    def test_numpy_integer_ok(self):
        assert check_capacity(np.int64(16), "capacity_hint") == 16

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative, got -1"):
            check_capacity(-1, "capacity_hint")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="got float"):
            check_capacity(8.0, "capacity_hint")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_capacity(True, "capacity_hint")


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(2, 3) == 2

    def test_equal_to_size_rejected(self):
        with pytest.raises(SampleIndexError) as exc_info:
            check_index(3, 3)
        assert exc_info.value.index == 3
        assert exc_info.value.size == 3

    def test_negative_rejected(self):
        with pytest.raises(SampleIndexError, match="out of range"):
            check_index(-1, 3)

    def test_empty_collection(self):
        with pytest.raises(SampleIndexError):
            check_index(0, 0)

    def test_non_integer_rejected(self):
        with pytest.raises(SampleIndexError, match="expected an integer"):
            check_index(1.0, 3)
