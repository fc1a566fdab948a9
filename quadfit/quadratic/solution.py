"""
Quadratic fit solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quadfit.core.result import Result


@dataclass(frozen=True)
class QuadraticParams:
    """
    Parameter payload for a quadratic fit.

    Holds the coefficients in the fitter's dtype, the shared closed-form
    denominator, and copies of the samples they were computed from.
    """
    a: np.floating[Any]
    b: np.floating[Any]
    c: np.floating[Any]
    denominator: np.floating[Any]
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]


@dataclass
class QuadraticSolution:
    """
    User-facing quadratic fit results.

    Wraps the Result envelope and provides accessors for the coefficients,
    fitted values and goodness-of-fit statistics.
    """
    _result: Result[QuadraticParams]

    @property
    def a(self) -> np.floating[Any]:
        return self._result.params.a

    @property
    def b(self) -> np.floating[Any]:
        return self._result.params.b

    @property
    def c(self) -> np.floating[Any]:
        return self._result.params.c

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[a, b, c] in the fit's dtype."""
        p = self._result.params
        return np.array([p.a, p.b, p.c], dtype=p.x.dtype)

    def as_tuple(self) -> tuple[Any, Any, Any]:
        p = self._result.params
        return p.a, p.b, p.c

    @property
    def denominator(self) -> np.floating[Any]:
        return self._result.params.denominator

    @property
    def n(self) -> int:
        return int(self._result.params.x.shape[0])

    @property
    def is_degenerate(self) -> bool:
        """True when the normal equations were singular."""
        return self.denominator == 0 or not np.all(np.isfinite(self.coefficients))

    def predict(self, x: ArrayLike) -> Any:
        """Evaluate a*x^2 + b*x + c at scalar or array x."""
        p = self._result.params
        x = np.asarray(x, dtype=p.x.dtype)
        with np.errstate(invalid='ignore', over='ignore'):
            out = p.a * x ** 2 + p.b * x + p.c
        return out[()] if out.ndim == 0 else out

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return np.asarray(self.predict(self._result.params.x))

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        with np.errstate(invalid='ignore', over='ignore'):
            return self._result.params.y - self.fitted_values

    @property
    def rss(self) -> float:
        r = self.residuals
        return float(r @ r)

    @property
    def tss(self) -> float:
        y = self._result.params.y
        if y.shape[0] == 0:
            return 0.0
        return float(np.sum((y - np.mean(y)) ** 2))

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Quadratic Least-Squares Fit",
            "=" * 48,
            f"Observations: {self.n}",
            f"Distinct x: {self.info.get('n_distinct_x', 'NA')}",
            f"Precision: {self.info.get('dtype', 'NA')}",
            f"Denominator: {float(self.denominator):.6g}",
            "",
            "Coefficients:",
            "-" * 48,
            f"  a (x^2): {float(self.a):16.8g}",
            f"  b (x):   {float(self.b):16.8g}",
            f"  c:       {float(self.c):16.8g}",
            "-" * 48,
        ]
        if self.is_degenerate:
            lines.append("Degenerate: fewer than 3 distinct x-values or singular system")
        else:
            lines.append(f"R-squared: {self.r_squared:.6f}")
            lines.append(f"RSS: {self.rss:.6g}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"QuadraticSolution(n={self.n}, a={float(self.a):.6g}, "
            f"b={float(self.b):.6g}, c={float(self.c):.6g})"
        )
