"""Beta distribution with shape parameters ``alpha`` and ``beta``."""

import math

from scipy.special import xlog1py, xlogy

from variates.distributions.base import ContinuousDistribution
from variates.distributions.gamma import Gamma
from variates.exceptions import AlphaLessThanZero, BetaLessThanZero, XOutOfRange
from variates.source import UniformSource
from variates.special_functions import log_beta
from variates.support_utils import safe_log


def _check(alpha, beta) -> tuple[float, float]:
    alpha, beta = float(alpha), float(beta)
    if not alpha > 0.0:
        raise AlphaLessThanZero(f"alpha must be positive, got {alpha}.")
    if not beta > 0.0:
        raise BetaLessThanZero(f"beta must be positive, got {beta}.")
    return alpha, beta


def _check_x(x) -> float:
    x = float(x)
    if not 0.0 <= x <= 1.0:
        raise XOutOfRange(f"x must lie in [0, 1], got {x}.")
    return x


class Beta(ContinuousDistribution):
    """Beta(alpha, beta) sampler and density.

    When both shapes are at most one, Jöhnk's algorithm is used: accept
    ``x / (x + y)`` with ``x = u ** (1 / alpha)``, ``y = v ** (1 / beta)``
    whenever ``x + y <= 1``. Otherwise the variate is ``X1 / (X1 + X2)``
    for independent Gamma(alpha, 1) and Gamma(beta, 1) draws.
    """

    name = "beta"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._gamma = Gamma(self.dtype, self.int_dtype, self.max_iterations)

    def _prepare(self, alpha, beta):
        return _check(alpha, beta)

    def _method(self, alpha, beta) -> str:
        return "johnk" if alpha <= 1.0 and beta <= 1.0 else "gamma ratio"

    def _draw(self, alpha, beta, source: UniformSource):
        if alpha <= 1.0 and beta <= 1.0:
            return self._johnk(alpha, beta, source)

        x1 = self._gamma.standard_gamma(alpha, source)
        x2 = self._gamma.standard_gamma(beta, source)
        return x1 / (x1 + x2)

    def _johnk(self, alpha: float, beta: float, source: UniformSource) -> float:
        for _ in self._attempts("beta Johnk acceptance"):
            u = source.next_uniform()
            v = source.next_uniform()
            x = u ** (1.0 / alpha)
            y = v ** (1.0 / beta)
            if x + y <= 1.0:
                if x + y > 0.0:
                    return x / (x + y)

                # both powers underflowed: take the ratio in log space
                log_x = safe_log(u) / alpha
                log_y = safe_log(v) / beta
                if math.isinf(log_x) or math.isinf(log_y):
                    continue
                log_m = max(log_x, log_y)
                log_x -= log_m
                log_y -= log_m
                return math.exp(log_x - math.log(math.exp(log_x) + math.exp(log_y)))

    def pdf(self, x, alpha, beta) -> float:
        alpha, beta = _check(alpha, beta)
        x = _check_x(x)
        return math.exp(self._ln_pdf(x, alpha, beta))

    def ln_pdf(self, x, alpha, beta) -> float:
        alpha, beta = _check(alpha, beta)
        x = _check_x(x)
        return self._ln_pdf(x, alpha, beta)

    @staticmethod
    def _ln_pdf(x: float, alpha: float, beta: float) -> float:
        return float(
            xlogy(alpha - 1.0, x) + xlog1py(beta - 1.0, -x) - log_beta(alpha, beta)
        )
