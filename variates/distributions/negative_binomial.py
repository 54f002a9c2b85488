"""Negative binomial distribution: failures before the ``r``-th success."""

import math

from variates.distributions.base import DiscreteDistribution
from variates.distributions.gamma import Gamma
from variates.distributions.poisson import Poisson, check_poisson_lambda
from variates.exceptions import BadNumSuccesses, BadProbSuccess, KOutOfRange
from variates.source import UniformSource
from variates.special_functions import log_factorial
from variates.support_utils import is_integer


def _check(r, p) -> tuple[int, float]:
    if not is_integer(r) or int(r) <= 0:
        raise BadNumSuccesses(f"r must be a positive integer, got {r!r}.")
    p = float(p)
    if not 0.0 < p < 1.0:
        raise BadProbSuccess(f"p must lie in (0, 1), got {p}.")
    return int(r), p


class NegativeBinomial(DiscreteDistribution):
    """NegativeBinomial(r, p) as a Gamma-Poisson mixture.

    Draws ``Y ~ Gamma(shape=r, scale=(1 - p) / p)`` and returns a
    Poisson(Y) variate. The mass function is
    ``C(k + r - 1, k) * (1 - p)**k * p**r`` for ``k = 0, 1, ...``.
    """

    name = "negative_binomial"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._gamma = Gamma(self.dtype, self.int_dtype, self.max_iterations)
        self._poisson = Poisson(self.dtype, self.int_dtype, self.max_iterations)

    def _prepare(self, r, p):
        return _check(r, p)

    def _draw(self, r, p, source: UniformSource):
        y = (1.0 - p) / p * self._gamma.standard_gamma(float(r), source)
        return self._poisson._draw(check_poisson_lambda(y), source=source)

    def ln_pmf(self, k, r, p) -> float:
        r, p = _check(r, p)
        if not is_integer(k) or int(k) < 0:
            raise KOutOfRange(f"k must be a non-negative integer, got {k!r}.")
        k = int(k)
        ln_coeff = log_factorial(k + r - 1) - log_factorial(k) - log_factorial(r - 1)
        return ln_coeff + k * math.log1p(-p) + r * math.log(p)
