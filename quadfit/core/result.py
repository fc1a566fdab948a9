"""
Generic result container for quadfit computations.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sample counts, denominator)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every Result."""
    from quadfit import __version__
    return {
        'quadfit_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a fit.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Fitted parameters (coefficients and the samples used)
        info: Structured metadata (method, n, n_distinct_x, denominator)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=QuadraticParams(a=1.0, b=0.0, c=0.0, ...),
        ...     info={'method': 'closed_form', 'n': 8},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_closed_form'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
