"""
Exception hierarchy for quadfit.

All exceptions inherit from QuadFitError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class QuadFitError(Exception):
    """Base exception for all quadfit errors."""
    pass


class ValidationError(QuadFitError):
    """
    Input validation failed.

    Raised when user-provided inputs (arrays, dtypes, capacity hints)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when x and y are not 1D or have different lengths.
    """
    pass


class SampleIndexError(ValidationError, IndexError):
    """
    Sample index is outside the accumulated collection.

    Also an IndexError, so plain Python sequence handling (including
    iteration fallbacks) treats it as an ordinary out-of-range access.

    Attributes:
        index: The requested index
        size: Number of accumulated samples at the time of access
    """

    def __init__(self, message: str, index: int, size: int):
        super().__init__(message)
        self.index = index
        self.size = size


class NumericalError(QuadFitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateFitError(NumericalError):
    """
    The quadratic normal equations are singular.

    Only raised in strict mode. The default mode returns the IEEE-754
    result (inf/nan coefficients) instead.

    Attributes:
        n: Number of accumulated samples
        n_distinct_x: Number of distinct x-values among the samples
        denominator: Shared closed-form denominator, if computed
    """

    def __init__(
        self,
        message: str,
        n: int,
        n_distinct_x: int,
        denominator: float | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.n_distinct_x = n_distinct_x
        self.denominator = denominator
