"""
Helper functions shared by the distribution modules.

Functions
---------
ensure_float_dtype(dtype) -> np.dtype
    Check that a dtype is float32 or float64.

ensure_integer_dtype(dtype) -> np.dtype
    Check that a dtype is an integer dtype.

sum_to_one(values, tol) -> bool
    Check that values add to 1.0 within relative tolerance ``tol``.

is_integer(value) -> bool
    Check that a number has an integral value.

safe_log(x) -> float
    Natural log returning -inf at 0.
"""  # noqa: D205, D404

import math
from typing import Any, Sequence

import numpy as np

from variates.exceptions import InvalidDtype

_SUPPORTED_FLOAT_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def ensure_float_dtype(dtype: Any) -> np.dtype:
    """Return ``np.dtype(dtype)`` if it is float32 or float64."""
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise InvalidDtype(f"Unrecognized float dtype {dtype!r}.") from e
    if resolved not in _SUPPORTED_FLOAT_DTYPES:
        raise InvalidDtype(
            f"Only float32 and float64 are supported, got {resolved.name}."
        )
    return resolved


def ensure_integer_dtype(dtype: Any) -> np.dtype:
    """Return ``np.dtype(dtype)`` if it is a signed or unsigned integer dtype."""
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise InvalidDtype(f"Unrecognized integer dtype {dtype!r}.") from e
    if not np.issubdtype(resolved, np.integer):
        raise InvalidDtype(f"Expected an integer dtype, got {resolved.name}.")
    return resolved


def sum_to_one(values: Sequence[float] | np.ndarray, tol: float) -> bool:
    """Check whether ``values`` add to 1.0 within relative tolerance ``tol``."""
    total = math.fsum(float(v) for v in values)
    return math.isclose(total, 1.0, rel_tol=tol, abs_tol=0.0)


def is_integer(value: Any) -> bool:
    """True for Python/numpy integers and for finite floats with no fraction."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    try:
        value = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(value) and value.is_integer()


def safe_log(x: float) -> float:
    """Natural log with ``safe_log(0) == -inf``."""
    if x > 0.0:
        return math.log(x)
    if x == 0.0:
        return -math.inf
    raise ValueError(f"math domain error: log({x})")
