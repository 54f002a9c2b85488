"""Base classes for all distributions.

A distribution object holds no parameters and no random state. It only
knows its output dtypes and the diagnostic cap on rejection-loop attempts.
Parameters and the uniform source are passed to every call, so one object
can serve many threads as long as each thread brings its own source.

Subclasses implement two hooks:

- ``_prepare(*params)`` validates the parameters and returns them in the
  form ``_draw`` expects. It runs before any randomness is consumed, so a
  call that fails validation leaves the source untouched.
- ``_draw(*prepared, source)`` produces one variate.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Iterator

import numpy as np

from variates.config.sampler_config import get_default_sampler_config
from variates.exceptions import (
    AllocationError,
    InvalidCount,
    RejectionLimitExceeded,
    ShapeMismatch,
    VariateOutOfRange,
)
from variates.source import UniformSource
from variates.support_utils import (
    ensure_float_dtype,
    ensure_integer_dtype,
    is_integer,
)

logger = logging.getLogger(__name__)


class Distribution(ABC):
    """Abstract base class for all samplers.

    Args:
        dtype: Floating point dtype of continuous outputs (float32 or float64).
        int_dtype: Integer dtype of discrete outputs.
        max_iterations: Cap on attempts of any single rejection loop. Hitting
            it raises :class:`~variates.exceptions.RejectionLimitExceeded`.
            It exists to stop NaN/Inf-poisoned inputs from looping forever
            and never changes the accept/reject decisions.

    Raises:
        InvalidDtype: If a dtype is not supported.
        ValueError: If ``max_iterations`` is not a positive integer.
    """

    name: str = ""
    discrete: bool = False

    def __init__(
        self,
        dtype: Any = None,
        int_dtype: Any = None,
        max_iterations: int | None = None,
    ):
        defaults = get_default_sampler_config()
        self.dtype = ensure_float_dtype(
            defaults["float_dtype"] if dtype is None else dtype
        )
        self.int_dtype = ensure_integer_dtype(
            defaults["int_dtype"] if int_dtype is None else int_dtype
        )
        if max_iterations is None:
            max_iterations = defaults["max_iterations"]
        if not is_integer(max_iterations) or max_iterations <= 0:
            raise ValueError(
                f"max_iterations must be a positive integer, got {max_iterations!r}."
            )
        self.max_iterations = int(max_iterations)

    @classmethod
    def from_config(cls, config: dict) -> "Distribution":
        """Build a distribution from a sampler configuration dict.

        Args:
            config: Dictionary as returned by
                :func:`~variates.config.get_default_sampler_config` or
                :func:`~variates.config.load_sampler_config`.
        """
        return cls(
            dtype=config.get("float_dtype"),
            int_dtype=config.get("int_dtype"),
            max_iterations=config.get("max_iterations"),
        )

    @property
    def output_dtype(self) -> np.dtype:
        """Dtype of the variates this distribution returns."""
        return self.int_dtype if self.discrete else self.dtype

    @abstractmethod
    def _prepare(self, *params) -> tuple:
        """Validate parameters and return them in the form ``_draw`` expects."""
        ...

    @abstractmethod
    def _draw(self, *prepared, source: UniformSource) -> Any:
        """Draw one variate from already validated parameters."""
        ...

    def _event_shape(self, *prepared) -> tuple[int, ...]:
        """Shape of a single variate; scalar distributions return ()."""
        return ()

    def _method(self, *prepared) -> str:
        """Name of the algorithm branch used for these parameters."""
        return "default"

    def sample(self, *params, source: UniformSource) -> Any:
        """Draw one variate.

        Args:
            *params: Distribution parameters, in the order documented by
                the subclass.
            source: Uniform source to draw from.

        Returns:
            A numpy scalar of :attr:`output_dtype`, or a 1-D array for
            vector-valued distributions.
        """
        prepared = self._prepare(*params)
        return self._cast(self._check_range(self._draw(*prepared, source=source)))

    def sample_many(
        self,
        count: int,
        *params,
        source: UniformSource,
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Draw ``count`` independent variates.

        Args:
            count: Number of variates.
            *params: Distribution parameters, as for :meth:`sample`.
            source: Uniform source to draw from.
            out: Optional buffer of shape ``(count,) + event_shape`` to fill.
                If None, a new array is allocated and ownership passes to
                the caller.

        Returns:
            The filled buffer.

        Raises:
            InvalidCount: If ``count`` is negative or not an integer.
            ShapeMismatch: If ``out`` has the wrong shape or dtype.
            VariateOutOfRange: If a discrete variate does not fit the
                integer output dtype.
            AllocationError: If the output buffer cannot be allocated.
        """
        if not is_integer(count) or count < 0:
            raise InvalidCount(f"count must be a non-negative integer, got {count!r}.")
        count = int(count)

        prepared = self._prepare(*params)
        buffer = self._output_buffer(count, self._event_shape(*prepared), out)

        logger.debug(
            "Drawing %d %s variates (dtype=%s, method=%s)",
            count,
            self.name or self.__class__.__name__,
            buffer.dtype,
            self._method(*prepared),
        )
        for i in range(count):
            buffer[i] = self._check_range(self._draw(*prepared, source=source))
        return buffer

    def _output_buffer(
        self,
        count: int,
        event_shape: tuple[int, ...],
        out: np.ndarray | None,
    ) -> np.ndarray:
        shape = (count,) + tuple(event_shape)
        if out is None:
            try:
                return np.empty(shape, dtype=self.output_dtype)
            except MemoryError as e:
                raise AllocationError(
                    f"Could not allocate an output buffer of shape {shape}."
                ) from e

        return self._check_out(out, shape)

    def _check_out(self, out, shape: tuple[int, ...]) -> np.ndarray:
        """Check a caller-supplied buffer against the expected shape and dtype."""
        if not isinstance(out, np.ndarray):
            raise ShapeMismatch(
                f"out must be a numpy array, got {type(out).__name__}."
            )
        if out.shape != shape:
            raise ShapeMismatch(
                f"out has shape {out.shape}, expected {shape}."
            )
        if out.dtype != self.output_dtype:
            raise ShapeMismatch(
                f"out has dtype {out.dtype}, expected {self.output_dtype}."
            )
        return out

    def _check_range(self, value: Any) -> Any:
        """Reject discrete variates the integer output dtype cannot hold."""
        if not self.discrete:
            return value
        info = np.iinfo(self.int_dtype)
        if np.ndim(value) == 0:
            low = high = int(value)
        else:
            value = np.asarray(value)
            if value.size == 0:
                return value
            low, high = int(value.min()), int(value.max())
        if low < info.min or high > info.max:
            raise VariateOutOfRange(
                f"{self.__class__.__name__} drew a variate outside the range of "
                f"{self.int_dtype.name} [{info.min}, {info.max}]; use a wider int_dtype."
            )
        return value

    def _cast(self, value: Any) -> Any:
        if np.ndim(value) == 0:
            return self.output_dtype.type(value)
        return np.asarray(value, dtype=self.output_dtype)

    def _attempts(self, loop_name: str) -> Iterator[int]:
        """Iterate over rejection-loop attempts, raising once the cap is hit."""
        for attempt in range(self.max_iterations):
            yield attempt
        logger.error(
            "%s: %s gave up after %d attempts",
            self.__class__.__name__,
            loop_name,
            self.max_iterations,
        )
        raise RejectionLimitExceeded(
            f"{loop_name} did not accept a candidate within "
            f"{self.max_iterations} attempts; check the parameters for NaN/Inf."
        )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"{self.__class__.__name__}(dtype={self.dtype.name}, "
            f"int_dtype={self.int_dtype.name}, max_iterations={self.max_iterations})"
        )


class ContinuousDistribution(Distribution):
    """Distribution over real numbers (or real vectors) with a density."""

    discrete = False

    @abstractmethod
    def ln_pdf(self, x, *params) -> float:
        """Natural log of the probability density at ``x``."""
        ...

    def pdf(self, x, *params) -> float:
        """Probability density at ``x``."""
        return math.exp(self.ln_pdf(x, *params))


class DiscreteDistribution(Distribution):
    """Distribution over integers (or integer vectors) with a mass function."""

    discrete = True

    @abstractmethod
    def ln_pmf(self, k, *params) -> float:
        """Natural log of the probability mass at ``k``."""
        ...

    def pmf(self, k, *params) -> float:
        """Probability mass at ``k``."""
        return math.exp(self.ln_pmf(k, *params))
