from .utils import (
    ensure_float_dtype,
    ensure_integer_dtype,
    is_integer,
    safe_log,
    sum_to_one,
)

__all__ = [
    "ensure_float_dtype",
    "ensure_integer_dtype",
    "is_integer",
    "safe_log",
    "sum_to_one",
]
