"""Poisson distribution with rate ``lambda``."""

import math

from variates.config.constants import (
    POISSON_INVERSION_BOUND,
    POISSON_INVERSION_THRESHOLD,
    POISSON_LOW_LAMBDA,
    POISSON_MAX_LAMBDA,
)
from variates.distributions.base import DiscreteDistribution
from variates.exceptions import BadLambda, KOutOfRange, LambdaTooLarge
from variates.source import UniformSource
from variates.special_functions import log_factorial
from variates.support_utils import is_integer


def check_poisson_lambda(lam) -> float:
    lam = float(lam)
    if not lam >= 0.0:
        raise BadLambda(f"lambda must be non-negative, got {lam}.")
    if lam > POISSON_MAX_LAMBDA:
        raise LambdaTooLarge(
            f"lambda must not exceed {POISSON_MAX_LAMBDA:g}, got {lam:g}."
        )
    return lam


class Poisson(DiscreteDistribution):
    """Poisson(lambda) sampler and mass function.

    Branches by rate:

    - ``lambda == 0``: always 0, no deviates consumed.
    - ``lambda < 1e-6``: at most two uniform comparisons; P(X >= 3) is
      negligible at these rates.
    - ``lambda < 17``: inversion, accumulating terms from ``exp(-lambda)``.
    - otherwise: ratio-of-uniforms rejection with an envelope built from the
      mode (Stadlober's ratio-of-uniforms method).

    Rates above 2e9 raise :class:`~variates.exceptions.LambdaTooLarge`.
    """

    name = "poisson"

    def _prepare(self, lam):
        return (check_poisson_lambda(lam),)

    def _method(self, lam) -> str:
        if lam < POISSON_LOW_LAMBDA:
            return "low rate"
        if lam < POISSON_INVERSION_THRESHOLD:
            return "inversion"
        return "ratio-of-uniforms"

    def _draw(self, lam, source: UniformSource):
        if lam < POISSON_INVERSION_THRESHOLD:
            if lam < POISSON_LOW_LAMBDA:
                if lam == 0.0:
                    return 0
                return self._low(lam, source)
            return self._inversion(lam, source)
        return self._ratio_of_uniforms(lam, source)

    @staticmethod
    def _low(lam: float, source: UniformSource) -> int:
        d = math.sqrt(lam)
        if source.next_uniform() >= d:
            return 0
        r = source.next_uniform() * d
        if r > lam * (1.0 - lam):
            return 0
        if r > 0.5 * lam * lam * (1.0 - lam):
            return 1
        return 2

    def _inversion(self, lam: float, source: UniformSource) -> int:
        p_f0 = math.exp(-lam)
        for _ in self._attempts("poisson inversion"):
            r = source.next_uniform()
            x = 0
            f = p_f0
            while x <= POISSON_INVERSION_BOUND:
                r -= f
                if r <= 0.0:
                    return x
                x += 1
                f *= lam
                r *= x

    def _ratio_of_uniforms(self, lam: float, source: UniformSource) -> int:
        p_a = lam + 0.5
        mode = int(lam)
        p_g = math.log(lam)
        p_q = mode * p_g - log_factorial(mode)
        p_h = math.sqrt(2.943035529371538573 * (lam + 0.5)) + 0.8989161620588987408
        p_bound = int(p_a + 6.0 * p_h)

        for _ in self._attempts("poisson ratio-of-uniforms"):
            u = source.next_uniform()
            if u == 0.0:
                continue

            x = p_a + p_h * (source.next_uniform() - 0.5) / u
            if x < 0.0 or x >= p_bound:
                continue

            k = int(x)
            lf = k * p_g - log_factorial(k) - p_q
            # quick acceptance
            if lf >= u * (4.0 - u) - 3.0:
                return k
            # quick rejection
            if u * (u - lf) > 1.0:
                continue
            if 2.0 * math.log(u) <= lf:
                return k

    def ln_pmf(self, k, lam) -> float:
        lam = check_poisson_lambda(lam)
        if not is_integer(k) or int(k) < 0:
            raise KOutOfRange(f"k must be a non-negative integer, got {k!r}.")
        k = int(k)
        if lam == 0.0:
            return 0.0 if k == 0 else -math.inf
        return k * math.log(lam) - lam - log_factorial(k)
