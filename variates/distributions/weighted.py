"""Random selection of items from a sequence."""

import bisect
import itertools
from typing import Any, Sequence

from variates.config.constants import WEIGHTED_SUM_TOL
from variates.distributions.base import Distribution
from variates.exceptions import (
    InvalidCount,
    ProbabilityInvalid,
    ProbSumNotOne,
    ShapeMismatch,
)
from variates.source import UniformSource
from variates.support_utils import is_integer, sum_to_one


class Weighted(Distribution):
    """Pick one item of a sequence, either by weight or uniformly.

    Items can be any Python objects, so results are returned as-is rather
    than cast to a numpy dtype and :meth:`sample_many` returns a list.

    Example:
        >>> from variates.source import default_source
        >>> weighted = Weighted()
        >>> weighted.sample(["a", "b"], [0.25, 0.75], source=default_source(0)) in ("a", "b")
        True
    """

    name = "weighted"
    discrete = True

    def _prepare(self, items, weights):
        items = list(items)
        weights = [float(w) for w in weights]
        if not items:
            raise ShapeMismatch("items must not be empty.")
        if len(items) != len(weights):
            raise ShapeMismatch(
                f"got {len(items)} items but {len(weights)} weights."
            )
        if not all(0.0 <= w <= 1.0 for w in weights):
            raise ProbabilityInvalid(f"every weight must lie in [0, 1], got {weights}.")
        if not sum_to_one(weights, WEIGHTED_SUM_TOL):
            raise ProbSumNotOne(
                f"weights must sum to 1 (tolerance {WEIGHTED_SUM_TOL:g}), "
                f"got {sum(weights)!r}."
            )
        return items, list(itertools.accumulate(weights))

    def _draw(self, items, cumulative, source: UniformSource):
        u = source.next_uniform()
        # first index whose running total exceeds u; the tail absorbs rounding
        idx = bisect.bisect_right(cumulative, u)
        return items[min(idx, len(items) - 1)]

    def sample(self, items: Sequence[Any], weights: Sequence[float], source: UniformSource) -> Any:
        """Draw one item, item ``i`` having probability ``weights[i]``."""
        return self._draw(*self._prepare(items, weights), source=source)

    def sample_many(
        self,
        count: int,
        items: Sequence[Any],
        weights: Sequence[float],
        source: UniformSource,
        out: list | None = None,
    ) -> list:
        """Draw ``count`` items with replacement.

        Args:
            count: Number of draws.
            items: Items to choose from.
            weights: Probabilities of the items; must sum to 1 within 1e-6.
            source: Uniform source to draw from.
            out: Optional list of length ``count`` to fill.

        Raises:
            InvalidCount: If ``count`` is negative or not an integer.
            ShapeMismatch: If ``out`` has the wrong length.
        """
        if not is_integer(count) or count < 0:
            raise InvalidCount(f"count must be a non-negative integer, got {count!r}.")
        count = int(count)
        prepared = self._prepare(items, weights)
        if out is None:
            out = [None] * count
        elif len(out) != count:
            raise ShapeMismatch(f"out has length {len(out)}, expected {count}.")
        for i in range(count):
            out[i] = self._draw(*prepared, source=source)
        return out

    def choice(self, items: Sequence[Any], source: UniformSource) -> Any:
        """Draw one item with every item equally likely."""
        if len(items) == 0:
            raise ShapeMismatch("items must not be empty.")
        return items[source.next_int_in_range(0, len(items) - 1)]
