"""Multivariate normal distribution with mean vector ``mu`` and covariance ``cov``."""

import logging
import math

import numpy as np

from variates.config.constants import HALF_LOG_2PI
from variates.distributions.base import ContinuousDistribution
from variates.exceptions import (
    CovarianceNotSymmetric,
    NotPositiveDefinite,
    ShapeMismatch,
)
from variates.source import UniformSource

logger = logging.getLogger(__name__)


def cholesky_in_place(a: np.ndarray) -> np.ndarray:
    """Cholesky-Banachiewicz factorization of a symmetric positive-definite matrix.

    Overwrites ``a`` with the lower-triangular factor L such that
    ``a == L @ L.T`` (the strict upper triangle is zeroed) and returns it.

    Raises:
        NotPositiveDefinite: If a pivot is not strictly positive.
    """
    n = a.shape[0]
    for i in range(n):
        for j in range(i + 1):
            s = float(np.dot(a[i, :j], a[j, :j]))
            if i == j:
                pivot = a[i, i] - s
                if not pivot > 0.0:
                    logger.debug("Non-positive pivot %r at row %d", pivot, i)
                    raise NotPositiveDefinite(
                        f"covariance matrix is not positive-definite "
                        f"(pivot {pivot!r} at row {i})."
                    )
                a[i, i] = math.sqrt(pivot)
            else:
                a[i, j] = (a[i, j] - s) / a[j, j]
        a[i, i + 1 :] = 0.0
    return a


class MultivariateNormal(ContinuousDistribution):
    """MultivariateNormal(mu, cov) sampler and density.

    The covariance is factored as ``L @ L.T`` before any deviate is drawn;
    a variate is ``mu + L @ w`` for N independent standard normals ``w``.

    Args:
        overwrite_cov: Factor the caller's covariance array in place
            instead of a copy. Only takes effect for C-contiguous float64
            arrays; after a call the array holds L.
        **kwargs: Forwarded to :class:`~variates.distributions.base.Distribution`.
    """

    name = "multivariate_normal"

    def __init__(self, *args, overwrite_cov: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.overwrite_cov = overwrite_cov

    def _prepare(self, mu, cov):
        mu = np.asarray(mu, dtype=np.float64)
        if mu.ndim != 1 or mu.size == 0:
            raise ShapeMismatch(f"mu must be a non-empty 1-D vector, got shape {mu.shape}.")
        n = mu.size

        if (
            self.overwrite_cov
            and isinstance(cov, np.ndarray)
            and cov.dtype == np.float64
            and cov.flags.c_contiguous
        ):
            factor = cov
        else:
            factor = np.array(cov, dtype=np.float64)
        if factor.shape != (n, n):
            raise ShapeMismatch(
                f"cov must have shape {(n, n)} to match mu, got {factor.shape}."
            )
        if not np.allclose(factor, factor.T):
            raise CovarianceNotSymmetric("covariance matrix must be symmetric.")
        return mu, cholesky_in_place(factor)

    def _event_shape(self, mu, factor):
        return mu.shape

    def _draw(self, mu, factor, source: UniformSource):
        n = mu.size
        work = np.array([source.next_standard_normal() for _ in range(n)])
        out = np.empty(n)
        for i in range(n):
            out[i] = mu[i] + np.dot(factor[i, : i + 1], work[: i + 1])
        return out

    def ln_pdf(self, x, mu, cov) -> float:
        mu, factor = self._prepare(mu, cov)
        x = np.asarray(x, dtype=np.float64)
        if x.shape != mu.shape:
            raise ShapeMismatch(f"x has shape {x.shape}, expected {mu.shape}.")

        # forward substitution: factor @ z == x - mu
        n = mu.size
        diff = x - mu
        z = np.empty(n)
        for i in range(n):
            z[i] = (diff[i] - np.dot(factor[i, :i], z[:i])) / factor[i, i]

        log_det = 2.0 * float(np.sum(np.log(np.diag(factor))))
        return -n * HALF_LOG_2PI - 0.5 * log_det - 0.5 * float(np.dot(z, z))
