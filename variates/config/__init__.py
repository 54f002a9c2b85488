from .constants import DEFAULT_MAX_ITERATIONS, SUM_TO_ONE_TOL
from .registry import (
    DistributionRegistry,
    get_distribution,
    get_distribution_registry,
    list_distributions,
    register_distribution,
    register_distribution_factory,
)
from .sampler_config import get_default_sampler_config, load_sampler_config

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "SUM_TO_ONE_TOL",
    "DistributionRegistry",
    "get_distribution",
    "get_distribution_registry",
    "list_distributions",
    "register_distribution",
    "register_distribution_factory",
    "get_default_sampler_config",
    "load_sampler_config",
]
