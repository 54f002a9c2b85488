__version__ = "0.1.0"

from . import config, distributions, exceptions, special_functions, support_utils
from .config import get_distribution, list_distributions, load_sampler_config
from .distributions import (
    Bernoulli,
    Beta,
    Binomial,
    Cauchy,
    ChiSquared,
    Dirichlet,
    Exponential,
    Gamma,
    Geometric,
    Multinomial,
    MultivariateNormal,
    NegativeBinomial,
    Normal,
    Poisson,
    Uniform,
    UniformInt,
    Weighted,
)
from .exceptions import VariatesError
from .source import GeneratorSource, UniformSource, default_source

__all__ = [
    "config",
    "distributions",
    "exceptions",
    "special_functions",
    "support_utils",
    "get_distribution",
    "list_distributions",
    "load_sampler_config",
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
    "VariatesError",
    "GeneratorSource",
    "UniformSource",
    "default_source",
]
