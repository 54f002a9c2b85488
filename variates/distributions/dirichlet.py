"""Dirichlet distribution with concentration vector ``alpha``."""

import numpy as np
from scipy.special import xlogy

from variates.config.constants import SUM_TO_ONE_TOL
from variates.distributions.base import ContinuousDistribution
from variates.distributions.gamma import Gamma
from variates.exceptions import AlphaInvalid, ShapeMismatch, VariateOutOfRange, XOutOfRange
from variates.source import UniformSource
from variates.special_functions import log_multivariate_beta
from variates.support_utils import sum_to_one


def _check_alpha(alpha) -> np.ndarray:
    alpha = np.asarray(alpha, dtype=np.float64)
    if alpha.ndim != 1 or alpha.size == 0:
        raise ShapeMismatch(
            f"alpha must be a non-empty 1-D vector, got shape {alpha.shape}."
        )
    if not np.all(alpha > 0.0) or not np.all(np.isfinite(alpha)):
        raise AlphaInvalid(f"every alpha must be positive and finite, got {alpha}.")
    return alpha


class Dirichlet(ContinuousDistribution):
    """Dirichlet(alpha_1, ..., alpha_K) sampler and density.

    A variate is K independent Gamma(alpha_i, 1) draws divided by their
    sum. The division is done on the log scale (subtracting the largest log
    draw first), so the output sums to one even for concentrations small
    enough that every raw Gamma draw would underflow to zero. If even the
    log draws all reach -inf, :class:`~variates.exceptions.VariateOutOfRange`
    is raised.
    """

    name = "dirichlet"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._gamma = Gamma(self.dtype, self.int_dtype, self.max_iterations)

    def _prepare(self, alpha):
        return (_check_alpha(alpha),)

    def _event_shape(self, alpha):
        return alpha.shape

    def _draw(self, alpha, source: UniformSource):
        log_draws = np.array(
            [self._gamma.log_standard_gamma(float(a), source) for a in alpha]
        )
        top = log_draws.max()
        if not np.isfinite(top):
            raise VariateOutOfRange(
                f"Every Gamma component underflowed in log space for alpha={alpha}."
            )
        weights = np.exp(log_draws - top)
        return weights / weights.sum()

    def _check_x(self, x, alpha: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        if x.shape != alpha.shape:
            raise ShapeMismatch(
                f"x has shape {x.shape}, expected {alpha.shape} to match alpha."
            )
        if np.any(x < 0.0) or np.any(x > 1.0) or not sum_to_one(x, SUM_TO_ONE_TOL):
            raise XOutOfRange(f"x must lie on the probability simplex, got {x}.")
        return x

    def ln_pdf(self, x, alpha) -> float:
        alpha = _check_alpha(alpha)
        x = self._check_x(x, alpha)
        return float(np.sum(xlogy(alpha - 1.0, x))) - log_multivariate_beta(alpha)
