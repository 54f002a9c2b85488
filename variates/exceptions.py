"""Exception classes for the variates package.

Every error raised on purpose by the package derives from
:class:`VariatesError`, so callers can catch all of them in one clause.
The second base of each family ties it to the matching builtin
(``ValueError``, ``ArithmeticError``, ``MemoryError``, ``TypeError``) so
code written against plain Python exceptions keeps working.

Families:

- :class:`DomainError`: a parameter (or an observation passed to a
  density) lies outside the domain of the distribution or special
  function. Raised before any randomness is drawn.
- :class:`StructuralError`: inputs have the wrong shape, length or
  normalization.
- :class:`NumericalError`: the computation itself broke down (non
  positive-definite covariance, runaway rejection loop).
- :class:`AllocationError`: an output buffer could not be allocated.
- :class:`UnsupportedRangeError`: parameters are valid mathematically but no
  algorithm branch supports them, or the variate drawn does not fit the
  integer output dtype.
- :class:`InvalidDtype`: a distribution was built with an unsupported
  numeric type.
"""


class VariatesError(Exception):
    """Base class for all exceptions in the variates package."""


# ----------------------------------------------------------------------------
# Domain errors
# ----------------------------------------------------------------------------


class DomainError(VariatesError, ValueError):
    """A parameter or observation is outside the permitted domain."""


class NegativeN(DomainError):
    """n < 0 where a non-negative integer is required."""


class NonPositiveN(DomainError):
    """n <= 0 where a positive integer is required."""


class NegativeK(DomainError):
    """k < 0 where a non-negative integer is required."""


class NLessThanK(DomainError):
    """n < k in a binomial coefficient."""


class ShapeInvalid(DomainError):
    """Gamma shape is NaN or not strictly positive."""


class ScaleInvalid(DomainError):
    """Gamma scale is NaN or not strictly positive."""


class ParamsInfinite(DomainError):
    """Both Gamma parameters are infinite."""


class SigmaInvalid(DomainError):
    """Normal standard deviation is NaN or not strictly positive."""


class BoundsInvalid(DomainError):
    """Uniform bounds are not finite or not ordered."""


class AlphaLessThanZero(DomainError):
    """Beta ``alpha`` is not strictly positive."""


class BetaLessThanZero(DomainError):
    """Beta ``beta`` is not strictly positive."""


class AlphaInvalid(DomainError):
    """A Dirichlet concentration parameter is not strictly positive."""


class XOutOfRange(DomainError):
    """An observation lies outside the support of the distribution."""


class LambdaInvalid(DomainError):
    """Exponential rate is NaN or not strictly positive."""


class ScaleTooSmall(DomainError):
    """Cauchy scale is not strictly positive."""


class DegreesOfFreedomInvalid(DomainError):
    """Chi-squared degrees of freedom are not a positive integer."""


class ParamTooSmall(DomainError):
    """Binomial probability is below 0 (or NaN)."""


class ParamTooBig(DomainError):
    """Binomial probability is above 1."""


class TrialsInvalid(DomainError):
    """Number of trials is negative or not an integer."""


class KOutOfRange(DomainError):
    """A count passed to a mass function is outside the support."""


class BadLambda(DomainError):
    """Poisson rate is negative or NaN."""


class BadNumSuccesses(DomainError):
    """Negative binomial number of successes is not a positive integer."""


class BadProbSuccess(DomainError):
    """Negative binomial success probability is outside (0, 1)."""


class ProbabilityInvalid(DomainError):
    """A probability is NaN or outside its permitted interval."""


# ----------------------------------------------------------------------------
# Structural errors
# ----------------------------------------------------------------------------


class StructuralError(VariatesError, ValueError):
    """Inputs are malformed: wrong lengths, shapes or normalization."""


class ProbSumNotOne(StructuralError):
    """A probability vector does not sum to one within tolerance."""


class ShapeMismatch(StructuralError):
    """Parameter, observation or output buffer shapes are inconsistent."""


class InvalidCount(StructuralError):
    """A negative number of draws was requested."""


class CovarianceNotSymmetric(StructuralError):
    """A covariance matrix is not symmetric."""


# ----------------------------------------------------------------------------
# Numerical, resource and range errors
# ----------------------------------------------------------------------------


class NumericalError(VariatesError, ArithmeticError):
    """The computation broke down numerically."""


class NotPositiveDefinite(NumericalError):
    """Cholesky factorization met a non-positive pivot."""


class RejectionLimitExceeded(NumericalError):
    """A rejection loop hit the diagnostic iteration cap."""


class AllocationError(VariatesError, MemoryError):
    """An output buffer could not be allocated."""


class UnsupportedRangeError(VariatesError):
    """Valid parameters that no sampling algorithm branch supports."""


class LambdaTooLarge(UnsupportedRangeError):
    """Poisson rate exceeds the largest supported value."""


class VariateOutOfRange(UnsupportedRangeError):
    """A drawn variate does not fit the integer output dtype."""


class InvalidDtype(VariatesError, TypeError):
    """A distribution was configured with an unsupported numeric type."""
