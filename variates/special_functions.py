"""Special functions used by the samplers and density formulas.

All functions are pure and operate on Python/numpy scalars in double
precision:

- :func:`gamma` and :func:`log_gamma`: Spouge approximation below 10 (with
  the recurrence Γ(x) = Γ(x + 1) / x for arguments below 1), the
  asymptotic Stirling series from 10 upward.
- :func:`beta`, :func:`log_beta`, :func:`log_multivariate_beta`
- :func:`log_factorial`: direct summation below 1024, Stirling above.
- :func:`binomial_coefficient`, :func:`log_binomial_coefficient`
"""

import math
from typing import Sequence

import numpy as np

from variates.config.constants import (
    HALF_LOG_2PI,
    LOG_FACTORIAL_STIRLING_THRESHOLD,
    LOG_GAMMA_ASYMPTOTIC_THRESHOLD,
    SPOUGE_A,
)
from variates.exceptions import (
    DomainError,
    NegativeK,
    NegativeN,
    NLessThanK,
    NonPositiveN,
)
from variates.support_utils import is_integer

# Largest argument whose exp() is representable in double precision
_MAX_EXP_ARG = math.log(np.finfo(np.float64).max)


def _spouge_coefficients(a: int) -> tuple[float, ...]:
    coefficients = [math.sqrt(2.0 * math.pi)]
    for k in range(1, a):
        c_k = (
            (-1.0) ** (k - 1)
            / math.factorial(k - 1)
            * (a - k) ** (k - 0.5)
            * math.exp(a - k)
        )
        coefficients.append(c_k)
    return tuple(coefficients)


_SPOUGE_COEFFICIENTS = _spouge_coefficients(SPOUGE_A)

# B_2k / (2k (2k - 1)) for k = 1..7
_STIRLING_COEFFICIENTS = (
    1.0 / 12.0,
    -1.0 / 360.0,
    1.0 / 1260.0,
    -1.0 / 1680.0,
    1.0 / 1188.0,
    -691.0 / 360360.0,
    1.0 / 156.0,
)

# ln n! = (n + 1/2) ln n - n + ln sqrt(2 pi) + 1 / (12 n) - 1 / (360 n^3)
_LOG_FACTORIAL_C1 = 1.0 / 12.0
_LOG_FACTORIAL_C3 = -1.0 / 360.0


def _check_non_negative(x: float, name: str = "x") -> float:
    x = float(x)
    if not x >= 0.0:
        raise DomainError(f"{name} must be non-negative, got {x}.")
    return x


def _spouge_gamma(x: float) -> float:
    """Γ(x) for 1 <= x < 10."""
    z = x - 1.0
    total = _SPOUGE_COEFFICIENTS[0]
    for k in range(1, SPOUGE_A):
        total += _SPOUGE_COEFFICIENTS[k] / (z + k)
    return math.exp((z + 0.5) * math.log(z + SPOUGE_A) - (z + SPOUGE_A)) * total


def _asymptotic_log_gamma(x: float) -> float:
    """ln Γ(x) for x >= 10."""
    inv_x = 1.0 / x
    inv_x2 = inv_x * inv_x
    series = 0.0
    for coefficient in reversed(_STIRLING_COEFFICIENTS):
        series = series * inv_x2 + coefficient
    return (x - 0.5) * math.log(x) - x + HALF_LOG_2PI + series * inv_x


def gamma(x: float) -> float:
    """Gamma function for non-negative ``x``.

    Returns ``inf`` at 0 and where the result overflows.

    Raises:
        DomainError: If ``x`` is negative or NaN.
    """
    x = _check_non_negative(x)
    if x == 0.0:
        return math.inf
    if x < 1.0:
        return gamma(x + 1.0) / x
    if x < LOG_GAMMA_ASYMPTOTIC_THRESHOLD:
        return _spouge_gamma(x)
    log_value = _asymptotic_log_gamma(x)
    if log_value > _MAX_EXP_ARG:
        return math.inf
    return math.exp(log_value)


def log_gamma(x: float) -> float:
    """Natural log of the gamma function for non-negative ``x``.

    Raises:
        DomainError: If ``x`` is negative or NaN.
    """
    x = _check_non_negative(x)
    if x == 0.0 or math.isinf(x):
        return math.inf
    if x < LOG_GAMMA_ASYMPTOTIC_THRESHOLD:
        return math.log(gamma(x))
    return _asymptotic_log_gamma(x)


def log_beta(a: float, b: float) -> float:
    """ln B(a, b) = ln Γ(a) + ln Γ(b) - ln Γ(a + b)."""
    return log_gamma(a) + log_gamma(b) - log_gamma(a + b)


def beta(a: float, b: float) -> float:
    """Beta function B(a, b)."""
    return math.exp(log_beta(a, b))


def log_multivariate_beta(alpha: Sequence[float] | np.ndarray) -> float:
    """ln B(alpha) = sum(ln Γ(alpha_i)) - ln Γ(sum(alpha_i))."""
    total = 0.0
    alpha_sum = 0.0
    for a in alpha:
        total += log_gamma(a)
        alpha_sum += float(a)
    return total - log_gamma(alpha_sum)


def log_factorial(n: int) -> float:
    """Natural log of n!.

    Raises:
        NegativeN: If ``n < 0``.
        DomainError: If ``n`` is not an integer.
    """
    if not is_integer(n):
        raise DomainError(f"n must be an integer, got {n!r}.")
    n = int(n)
    if n < 0:
        raise NegativeN(f"n must be non-negative, got {n}.")

    if n < LOG_FACTORIAL_STIRLING_THRESHOLD:
        if n <= 1:
            return 0.0
        return math.fsum(math.log(i) for i in range(2, n + 1))

    n_f = float(n)
    r = 1.0 / n_f
    return (
        (n_f + 0.5) * math.log(n_f)
        - n_f
        + HALF_LOG_2PI
        + r * (_LOG_FACTORIAL_C1 + r * r * _LOG_FACTORIAL_C3)
    )


def _check_n_k(n: int, k: int) -> tuple[int, int]:
    if not (is_integer(n) and is_integer(k)):
        raise DomainError(f"n and k must be integers, got n={n!r}, k={k!r}.")
    n, k = int(n), int(k)
    if n <= 0:
        raise NonPositiveN(f"n must be positive, got {n}.")
    if k < 0:
        raise NegativeK(f"k must be non-negative, got {k}.")
    if n < k:
        raise NLessThanK(f"n must be at least k, got n={n}, k={k}.")
    return n, k


def log_binomial_coefficient(n: int, k: int) -> float:
    """Natural log of the binomial coefficient C(n, k).

    Raises:
        NonPositiveN: If ``n <= 0``.
        NegativeK: If ``k < 0``.
        NLessThanK: If ``n < k``.
    """
    n, k = _check_n_k(n, k)

    # C(1, k) == C(n, n) == C(n, 0) == 1
    if n == 1 or n == k or k == 0:
        return 0.0

    return log_factorial(n) - (log_factorial(k) + log_factorial(n - k))


def binomial_coefficient(n: int, k: int) -> int:
    """Binomial coefficient C(n, k), rounded from its log form."""
    n, k = _check_n_k(n, k)
    return int(round(math.exp(log_binomial_coefficient(n, k))))
