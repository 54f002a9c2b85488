"""Multinomial distribution with ``n`` trials over K categories."""

import logging

import numpy as np
from scipy.special import xlogy

from variates.config.sampler_config import get_default_sampler_config
from variates.distributions.base import DiscreteDistribution
from variates.distributions.binomial import Binomial
from variates.exceptions import (
    KOutOfRange,
    ProbabilityInvalid,
    ProbSumNotOne,
    ShapeMismatch,
    TrialsInvalid,
)
from variates.source import UniformSource
from variates.special_functions import log_factorial
from variates.support_utils import is_integer, sum_to_one

logger = logging.getLogger(__name__)


class Multinomial(DiscreteDistribution):
    """Multinomial(n, p_1..p_K) by sequential conditional binomials.

    Category ``i`` gets ``Binomial(remaining trials, p_i / remaining mass)``
    for ``i < K``; the last category takes whatever trials are left, so the
    counts always sum to ``n``.

    Args:
        sum_to_one_tol: Relative tolerance on ``sum(p) == 1``. Defaults to
            the square root of double machine epsilon.
        **kwargs: Forwarded to :class:`~variates.distributions.base.Distribution`.
    """

    name = "multinomial"

    def __init__(self, *args, sum_to_one_tol: float | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        if sum_to_one_tol is None:
            sum_to_one_tol = get_default_sampler_config()["sum_to_one_tol"]
        self.sum_to_one_tol = float(sum_to_one_tol)
        self._binomial = Binomial(self.dtype, self.int_dtype, self.max_iterations)

    @classmethod
    def from_config(cls, config: dict) -> "Multinomial":
        return cls(
            dtype=config.get("float_dtype"),
            int_dtype=config.get("int_dtype"),
            max_iterations=config.get("max_iterations"),
            sum_to_one_tol=config.get("sum_to_one_tol"),
        )

    def _check_probabilities(self, p) -> np.ndarray:
        p = np.asarray(p, dtype=np.float64)
        if p.ndim != 1 or p.size == 0:
            raise ShapeMismatch(f"p must be a non-empty 1-D vector, got shape {p.shape}.")
        if not np.all((p >= 0.0) & (p <= 1.0)):
            raise ProbabilityInvalid(f"every probability must lie in [0, 1], got {p}.")
        if not sum_to_one(p, self.sum_to_one_tol):
            raise ProbSumNotOne(
                f"probabilities must sum to 1 (tolerance {self.sum_to_one_tol:.3g}), "
                f"got {p.sum()!r}."
            )
        return p

    def _prepare(self, n, p):
        if not is_integer(n) or int(n) < 0:
            raise TrialsInvalid(f"n must be a non-negative integer, got {n!r}.")
        return int(n), self._check_probabilities(p)

    def _event_shape(self, n, p):
        return p.shape

    def _draw(self, n, p, source: UniformSource):
        n_cat = p.size
        out = np.zeros(n_cat, dtype=np.int64)
        p_tot = 1.0
        n_tot = n

        for icat in range(n_cat - 1):
            if p_tot > 0.0:
                prob = p[icat] / p_tot
            else:
                prob = 1.0
            if prob > 1.0:
                # rounding in the running mass can push the ratio just past 1
                logger.warning("Clipping conditional probability %r to 1.0", prob)
                prob = 1.0
            out[icat] = self._binomial._draw(n_tot, prob, source=source)
            n_tot -= out[icat]
            if n_tot <= 0:
                return out
            p_tot -= p[icat]

        out[n_cat - 1] = n_tot
        return out

    def sample(self, n, p, source: UniformSource, out: np.ndarray | None = None):
        """Draw one vector of counts.

        Args:
            n: Number of trials.
            p: Probabilities of the K categories.
            source: Uniform source to draw from.
            out: Optional length-K integer buffer to fill.

        Raises:
            ShapeMismatch: If ``out`` is not an integer array of length K
                with the configured ``int_dtype``.
        """
        n, p = self._prepare(n, p)
        if out is not None:
            self._check_out(out, p.shape)
        counts = self._cast(self._check_range(self._draw(n, p, source=source)))
        if out is None:
            return counts
        out[...] = counts
        return out

    def ln_pmf(self, k, n, p) -> float:
        p = self._check_probabilities(p)
        if not is_integer(n) or int(n) < 0:
            raise TrialsInvalid(f"n must be a non-negative integer, got {n!r}.")
        n = int(n)
        k = np.asarray(k)
        if k.shape != p.shape:
            raise ShapeMismatch(f"k has shape {k.shape}, expected {p.shape} to match p.")
        if not all(is_integer(x) and int(x) >= 0 for x in k) or int(k.sum()) != n:
            raise KOutOfRange(f"k must be non-negative integers summing to {n}, got {k}.")

        coeff = log_factorial(n) - sum(log_factorial(int(x)) for x in k)
        return coeff + float(np.sum(xlogy(k, p)))
