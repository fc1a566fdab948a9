"""
Numeric type configuration.

The fitter is generic over an IEEE-754 floating-point type. Only single
and double precision are accepted; everything downstream of
resolve_dtype() works in the resolved type.
"""

import numpy as np

from quadfit.core.exceptions import ValidationError


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

DEFAULT_DTYPE = np.dtype(np.float64)

_ALIASES = {
    'double': np.float64,
    'single': np.float32,
}

SUPPORTED_DTYPES = frozenset({np.dtype(np.float32), np.dtype(np.float64)})


def resolve_dtype(dtype: str | np.dtype | type | None) -> np.dtype:
    """
    Resolve a user-supplied precision to a numpy dtype.

    Args:
        dtype: None (float64), 'float64', 'double', 'float32', 'single',
            np.float64, np.float32 or an equivalent np.dtype

    Returns:
        np.dtype('float64') or np.dtype('float32')

    Raises:
        ValidationError: If dtype is not a supported floating-point type
    """
    if dtype is None:
        return DEFAULT_DTYPE

    if isinstance(dtype, str):
        dtype = _ALIASES.get(dtype.lower(), dtype)

    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e

    if resolved not in SUPPORTED_DTYPES:
        raise ValidationError(
            f"dtype: expected float32 or float64, got {resolved}"
        )
    return resolved


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """Get machine epsilon for a given dtype."""
    return float(np.finfo(dtype).eps)
