"""Continuous and discrete uniform distributions."""

import math

from variates.distributions.base import ContinuousDistribution, DiscreteDistribution
from variates.exceptions import BoundsInvalid, KOutOfRange
from variates.source import UniformSource
from variates.support_utils import is_integer


def _check_real_bounds(low, high) -> tuple[float, float]:
    low, high = float(low), float(high)
    if not (math.isfinite(low) and math.isfinite(high)):
        raise BoundsInvalid(f"bounds must be finite, got low={low}, high={high}.")
    if not low < high:
        raise BoundsInvalid(f"low must be less than high, got low={low}, high={high}.")
    return low, high


def _check_int_bounds(low, high) -> tuple[int, int]:
    if not (is_integer(low) and is_integer(high)):
        raise BoundsInvalid(f"bounds must be integers, got low={low!r}, high={high!r}.")
    low, high = int(low), int(high)
    if low > high:
        raise BoundsInvalid(f"low must not exceed high, got low={low}, high={high}.")
    return low, high


class Uniform(ContinuousDistribution):
    """Continuous Uniform(low, high): ``low + (high - low) * u``."""

    name = "uniform"

    def _prepare(self, low, high):
        return _check_real_bounds(low, high)

    def _draw(self, low, high, source: UniformSource):
        return low + (high - low) * source.next_uniform()

    def pdf(self, x, low, high) -> float:
        low, high = _check_real_bounds(low, high)
        if low <= float(x) <= high:
            return 1.0 / (high - low)
        return 0.0

    def ln_pdf(self, x, low, high) -> float:
        low, high = _check_real_bounds(low, high)
        if low <= float(x) <= high:
            return -math.log(high - low)
        return -math.inf


class UniformInt(DiscreteDistribution):
    """Discrete Uniform on the integers ``low..high``, both ends inclusive."""

    name = "uniform_int"

    def _prepare(self, low, high):
        return _check_int_bounds(low, high)

    def _draw(self, low, high, source: UniformSource):
        return source.next_int_in_range(low, high)

    def pmf(self, k, low, high) -> float:
        low, high = _check_int_bounds(low, high)
        self._check_k(k, low, high)
        return 1.0 / (high - low + 1)

    def ln_pmf(self, k, low, high) -> float:
        low, high = _check_int_bounds(low, high)
        self._check_k(k, low, high)
        return -math.log(high - low + 1)

    @staticmethod
    def _check_k(k, low, high):
        if not is_integer(k) or not low <= int(k) <= high:
            raise KOutOfRange(f"k must be an integer in [{low}, {high}], got {k!r}.")
