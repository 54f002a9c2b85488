"""Geometric distribution: number of trials up to and including the first success."""

import math

from variates.distributions.base import DiscreteDistribution
from variates.exceptions import KOutOfRange, ProbabilityInvalid, VariateOutOfRange
from variates.source import UniformSource
from variates.support_utils import is_integer


def _check(p) -> float:
    p = float(p)
    if not 0.0 < p <= 1.0:
        raise ProbabilityInvalid(f"p must lie in (0, 1], got {p}.")
    return p


class Geometric(DiscreteDistribution):
    """Geometric(p) on {1, 2, ...} by inversion: ``floor(log(u) / log(1 - p)) + 1``."""

    name = "geometric"

    def _prepare(self, p):
        return (_check(p),)

    def _draw(self, p, source: UniformSource):
        if p == 1.0:
            return 1
        u = source.next_uniform()
        while u == 0.0:
            u = source.next_uniform()
        x = math.log(u) / math.log1p(-p)
        if not math.isfinite(x):
            raise VariateOutOfRange(
                f"Geometric draw for p={p:g} is too large to represent as an integer."
            )
        return math.floor(x) + 1

    def ln_pmf(self, k, p) -> float:
        p = _check(p)
        if not is_integer(k) or int(k) < 1:
            raise KOutOfRange(f"k must be a positive integer, got {k!r}.")
        k = int(k)
        if p == 1.0:
            return 0.0 if k == 1 else -math.inf
        return (k - 1) * math.log1p(-p) + math.log(p)
