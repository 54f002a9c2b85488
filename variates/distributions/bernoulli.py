"""Bernoulli distribution."""

import math

from variates.distributions.base import DiscreteDistribution
from variates.exceptions import KOutOfRange, ProbabilityInvalid
from variates.source import UniformSource


def _check(p) -> float:
    p = float(p)
    if not 0.0 <= p <= 1.0:
        raise ProbabilityInvalid(f"p must lie in [0, 1], got {p}.")
    return p


class Bernoulli(DiscreteDistribution):
    """Bernoulli(p): 1 with probability ``p``, else 0."""

    name = "bernoulli"

    def _prepare(self, p):
        return (_check(p),)

    def _draw(self, p, source: UniformSource):
        return 1 if source.next_uniform() < p else 0

    def pmf(self, k, p) -> float:
        p = _check(p)
        if k == 1:
            return p
        if k == 0:
            return 1.0 - p
        raise KOutOfRange(f"k must be 0 or 1, got {k!r}.")

    def ln_pmf(self, k, p) -> float:
        mass = self.pmf(k, p)
        return math.log(mass) if mass > 0.0 else -math.inf
