"""Cauchy distribution with location ``x0`` and scale ``gamma``."""

import math

from variates.distributions.base import ContinuousDistribution
from variates.exceptions import ScaleTooSmall
from variates.source import UniformSource


def _check(x0, gamma) -> tuple[float, float]:
    x0, gamma = float(x0), float(gamma)
    if not gamma > 0.0:
        raise ScaleTooSmall(f"gamma must be positive, got {gamma}.")
    return x0, gamma


class Cauchy(ContinuousDistribution):
    """Cauchy(x0, gamma) by inversion: ``x0 + gamma * tan(pi * (u - 0.5))``."""

    name = "cauchy"

    def _prepare(self, x0, gamma):
        return _check(x0, gamma)

    def _draw(self, x0, gamma, source: UniformSource):
        u = source.next_uniform()
        # tan(pi * (u - 0.5)) is unusable at u == 0.5
        while u == 0.5:
            u = source.next_uniform()
        return x0 + gamma * math.tan(math.pi * (u - 0.5))

    def pdf(self, x, x0, gamma) -> float:
        x0, gamma = _check(x0, gamma)
        z = (float(x) - x0) / gamma
        return 1.0 / (math.pi * gamma * (1.0 + z * z))

    def ln_pdf(self, x, x0, gamma) -> float:
        x0, gamma = _check(x0, gamma)
        z = (float(x) - x0) / gamma
        return -math.log(math.pi * gamma) - math.log1p(z * z)
