"""
quadfit: least-squares quadratic curve fitting.

Accumulate (x, y) samples incrementally and recover the coefficients of
y = a*x^2 + b*x + c in closed form.

Submodules:
    quadratic: QuadraticFitter and the one-shot fit() function
    core: results, exceptions, validation, precision configuration
"""

__version__ = "0.1.0"

from quadfit.core.exceptions import (
    QuadFitError,
    ValidationError,
    DimensionError,
    SampleIndexError,
    NumericalError,
    DegenerateFitError,
)
from quadfit.quadratic import (
    Point,
    QuadraticFitter,
    QuadraticSolution,
    fit,
)

__all__ = [
    "__version__",
    "fit",
    "Point",
    "QuadraticFitter",
    "QuadraticSolution",
    "QuadFitError",
    "ValidationError",
    "DimensionError",
    "SampleIndexError",
    "NumericalError",
    "DegenerateFitError",
]
