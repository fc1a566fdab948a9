"""
Least-squares quadratic fitting.

Public API:
    QuadraticFitter: incremental accumulator, compute() -> (a, b, c)
    fit(x, y, ...) -> QuadraticSolution

Example:
    >>> from quadfit.quadratic import QuadraticFitter
    >>> fitter = QuadraticFitter(3)
    >>> fitter.add(-1.0, 11.11)
    >>> fitter.add(0.0, 0.01)
    >>> fitter.add(1.0, -8.63)
    >>> a, b, c = fitter.compute()
"""

from quadfit.quadratic.fitter import Point, QuadraticFitter
from quadfit.quadratic.solution import QuadraticParams, QuadraticSolution
from quadfit.quadratic.solvers import fit

__all__ = [
    "fit",
    "Point",
    "QuadraticFitter",
    "QuadraticParams",
    "QuadraticSolution",
]
