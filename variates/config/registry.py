"""Global registry of distributions.

This module maps distribution names to factories that build distribution
objects, so that callers (and configuration files) can refer to a
distribution by name.

Examples
--------
Look up a built-in distribution:

>>> from variates.config import get_distribution
>>> binomial = get_distribution("binomial")

Register a custom one:

>>> from variates.config import register_distribution_factory
>>> register_distribution_factory("my_gamma", lambda **kwargs: MyGamma(**kwargs))

List what is available:

>>> from variates.config import get_distribution_registry
>>> print(get_distribution_registry().list_distributions())
"""

from typing import Any, Callable


class DistributionRegistry:
    """Registry of distribution factories keyed by name.

    A factory is any callable accepting the keyword arguments of the
    distribution constructor (``dtype``, ``int_dtype``, ``max_iterations``)
    and returning a distribution object. Classes qualify as factories.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._factories: dict[str, Callable[..., Any]] = {}

    def register_factory(self, name: str, factory: Callable[..., Any]) -> None:
        """Register a distribution factory.

        Parameters
        ----------
        name : str
            Unique name for the distribution (e.g., "binomial")
        factory : Callable[..., Any]
            Callable returning a distribution object

        Raises
        ------
        ValueError
            If name already registered
        """
        if name in self._factories:
            raise ValueError(
                f"Distribution '{name}' is already registered. "
                f"Use a different name or unregister the existing distribution first."
            )
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        """Remove a registered distribution.

        Raises
        ------
        KeyError
            If name not registered
        """
        if name not in self._factories:
            raise KeyError(f"Distribution '{name}' is not registered.")
        del self._factories[name]

    def get(self, name: str, **kwargs) -> Any:
        """Build a distribution by name.

        Parameters
        ----------
        name : str
            Name of the registered distribution
        **kwargs
            Forwarded to the factory

        Returns
        -------
        Any
            A new distribution object

        Raises
        ------
        KeyError
            If name not registered
        """
        if name not in self._factories:
            available = self.list_distributions()
            raise KeyError(
                f"Distribution '{name}' is not registered. "
                f"Available distributions: {available}"
            )
        return self._factories[name](**kwargs)

    def has_distribution(self, name: str) -> bool:
        """Check if a distribution name is registered."""
        return name in self._factories

    def list_distributions(self) -> list[str]:
        """Sorted list of all registered distribution names."""
        return sorted(self._factories)

    def __repr__(self) -> str:
        """String representation of registry."""
        return f"DistributionRegistry({len(self._factories)} distributions)"


# Global singleton instance
_GLOBAL_DISTRIBUTION_REGISTRY = DistributionRegistry()


def register_distribution(name: str, distribution_class: type) -> None:
    """Register a distribution class globally.

    Parameters
    ----------
    name : str
        Unique name for the distribution
    distribution_class : type
        Class whose constructor accepts the standard keyword arguments

    Raises
    ------
    ValueError
        If name already registered
    """
    _GLOBAL_DISTRIBUTION_REGISTRY.register_factory(name, distribution_class)


def register_distribution_factory(name: str, factory: Callable[..., Any]) -> None:
    """Register a distribution factory function globally."""
    _GLOBAL_DISTRIBUTION_REGISTRY.register_factory(name, factory)


def get_distribution_registry() -> DistributionRegistry:
    """Get the global distribution registry.

    Returns
    -------
    DistributionRegistry
        The global registry instance
    """
    return _GLOBAL_DISTRIBUTION_REGISTRY


def get_distribution(name: str, **kwargs) -> Any:
    """Build a registered distribution by name."""
    return _GLOBAL_DISTRIBUTION_REGISTRY.get(name, **kwargs)


def list_distributions() -> list[str]:
    """List all registered distribution names."""
    return _GLOBAL_DISTRIBUTION_REGISTRY.list_distributions()


def _lazy(module_name: str, class_name: str) -> Callable[..., Any]:
    """Factory importing the distribution class on first use."""

    def factory(**kwargs):
        module = __import__(f"variates.distributions.{module_name}", fromlist=["*"])
        return getattr(module, class_name)(**kwargs)

    factory.__name__ = f"make_{module_name}"
    return factory


_BUILTIN_DISTRIBUTIONS = {
    "bernoulli": ("bernoulli", "Bernoulli"),
    "beta": ("beta", "Beta"),
    "binomial": ("binomial", "Binomial"),
    "cauchy": ("cauchy", "Cauchy"),
    "chi_squared": ("chi_squared", "ChiSquared"),
    "dirichlet": ("dirichlet", "Dirichlet"),
    "exponential": ("exponential", "Exponential"),
    "gamma": ("gamma", "Gamma"),
    "geometric": ("geometric", "Geometric"),
    "multinomial": ("multinomial", "Multinomial"),
    "multivariate_normal": ("multivariate_normal", "MultivariateNormal"),
    "negative_binomial": ("negative_binomial", "NegativeBinomial"),
    "normal": ("normal", "Normal"),
    "poisson": ("poisson", "Poisson"),
    "uniform": ("uniform", "Uniform"),
    "uniform_int": ("uniform", "UniformInt"),
    "weighted": ("weighted", "Weighted"),
}

# Lazy factories keep variates.config importable from the distribution modules
for _name, (_module, _class) in _BUILTIN_DISTRIBUTIONS.items():
    register_distribution_factory(_name, _lazy(_module, _class))
