from .base import ContinuousDistribution, DiscreteDistribution, Distribution
from .bernoulli import Bernoulli
from .beta import Beta
from .binomial import Binomial
from .cauchy import Cauchy
from .chi_squared import ChiSquared
from .dirichlet import Dirichlet
from .exponential import Exponential
from .gamma import Gamma
from .geometric import Geometric
from .multinomial import Multinomial
from .multivariate_normal import MultivariateNormal, cholesky_in_place
from .negative_binomial import NegativeBinomial
from .normal import Normal
from .poisson import Poisson
from .uniform import Uniform, UniformInt
from .weighted import Weighted

__all__ = [
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "Bernoulli",
    "Beta",
    "Binomial",
    "Cauchy",
    "ChiSquared",
    "Dirichlet",
    "Exponential",
    "Gamma",
    "Geometric",
    "Multinomial",
    "MultivariateNormal",
    "NegativeBinomial",
    "Normal",
    "Poisson",
    "Uniform",
    "UniformInt",
    "Weighted",
    "cholesky_in_place",
]
