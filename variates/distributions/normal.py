"""Normal distribution with mean ``mu`` and standard deviation ``sigma``."""

import math

from variates.config.constants import HALF_LOG_2PI, INV_SQRT_2PI
from variates.distributions.base import ContinuousDistribution
from variates.exceptions import SigmaInvalid
from variates.source import UniformSource


def _check(mu, sigma) -> tuple[float, float]:
    mu, sigma = float(mu), float(sigma)
    if not sigma > 0.0 or math.isinf(sigma):
        raise SigmaInvalid(f"sigma must be positive and finite, got {sigma}.")
    return mu, sigma


class Normal(ContinuousDistribution):
    """Normal(mu, sigma) sampler and density.

    The standard-normal deviate comes straight from the source; this class
    only applies the location-scale transform ``x * sigma + mu``.
    """

    name = "normal"

    def _prepare(self, mu, sigma):
        return _check(mu, sigma)

    def _draw(self, mu, sigma, source: UniformSource):
        return source.next_standard_normal() * sigma + mu

    def pdf(self, x, mu, sigma) -> float:
        mu, sigma = _check(mu, sigma)
        z = (float(x) - mu) / sigma
        return INV_SQRT_2PI / sigma * math.exp(-0.5 * z * z)

    def ln_pdf(self, x, mu, sigma) -> float:
        mu, sigma = _check(mu, sigma)
        z = (float(x) - mu) / sigma
        return -HALF_LOG_2PI - math.log(sigma) - 0.5 * z * z
