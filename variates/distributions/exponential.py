"""Exponential distribution with rate ``lambda``."""

import math

from variates.distributions.base import ContinuousDistribution
from variates.exceptions import LambdaInvalid
from variates.source import UniformSource


def _check(lam) -> float:
    lam = float(lam)
    if not lam > 0.0:
        raise LambdaInvalid(f"lambda must be positive, got {lam}.")
    return lam


class Exponential(ContinuousDistribution):
    """Exponential(lambda) by inversion: ``-log(1 - u) / lambda``."""

    name = "exponential"

    def _prepare(self, lam):
        return (_check(lam),)

    def _draw(self, lam, source: UniformSource):
        return -math.log1p(-source.next_uniform()) / lam

    def pdf(self, x, lam) -> float:
        lam = _check(lam)
        x = float(x)
        if x < 0.0:
            return 0.0
        return lam * math.exp(-lam * x)

    def ln_pdf(self, x, lam) -> float:
        lam = _check(lam)
        x = float(x)
        if x < 0.0:
            return -math.inf
        return math.log(lam) - lam * x
