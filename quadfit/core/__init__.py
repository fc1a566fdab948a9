"""
Core infrastructure for quadfit.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Floating-point type resolution
    timing, tolerances: Timing and numeric comparison helpers
"""

from quadfit.core.result import Result
from quadfit.core.exceptions import (
    QuadFitError,
    ValidationError,
    DimensionError,
    SampleIndexError,
    NumericalError,
    DegenerateFitError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "QuadFitError",
    "ValidationError",
    "DimensionError",
    "SampleIndexError",
    "NumericalError",
    "DegenerateFitError",
]
