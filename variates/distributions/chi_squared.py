"""Chi-squared distribution with ``k`` degrees of freedom."""

import math

from scipy.special import xlogy

from variates.config.constants import CHI_SQUARED_SUM_OF_NORMALS_MAX_DF
from variates.distributions.base import ContinuousDistribution
from variates.distributions.gamma import Gamma
from variates.exceptions import DegreesOfFreedomInvalid
from variates.source import UniformSource
from variates.special_functions import log_gamma
from variates.support_utils import is_integer

_LOG_2 = math.log(2.0)


def _check(k) -> int:
    if not is_integer(k) or int(k) <= 0:
        raise DegreesOfFreedomInvalid(
            f"degrees of freedom must be a positive integer, got {k!r}."
        )
    return int(k)


class ChiSquared(ContinuousDistribution):
    """Chi-squared(k) sampler and density.

    Up to 100 degrees of freedom the variate is a sum of ``k`` squared
    standard normals; above that it is drawn as Gamma(k / 2, 2).
    """

    name = "chi_squared"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._gamma = Gamma(self.dtype, self.int_dtype, self.max_iterations)

    def _prepare(self, k):
        return (_check(k),)

    def _method(self, k) -> str:
        if k <= CHI_SQUARED_SUM_OF_NORMALS_MAX_DF:
            return "sum of squared normals"
        return "gamma"

    def _draw(self, k, source: UniformSource):
        if k <= CHI_SQUARED_SUM_OF_NORMALS_MAX_DF:
            total = 0.0
            for _ in range(k):
                x = source.next_standard_normal()
                total += x * x
            return total
        return 2.0 * self._gamma.standard_gamma(0.5 * k, source)

    def ln_pdf(self, x, k) -> float:
        k = _check(k)
        x = float(x)
        if x < 0.0:
            return -math.inf
        half_k = 0.5 * k
        return float(xlogy(half_k - 1.0, x)) - 0.5 * x - half_k * _LOG_2 - log_gamma(
            half_k
        )
