"""Sampler configuration.

Convenience functions for getting and loading the defaults that every
distribution object is built from.
"""

import logging
from pathlib import Path
from typing import IO, Any

import numpy as np
import yaml

from variates.config.constants import DEFAULT_MAX_ITERATIONS, SUM_TO_ONE_TOL

logger = logging.getLogger(__name__)

_DTYPE_KEYS = ("float_dtype", "int_dtype")


def get_default_sampler_config() -> dict:
    """Get the default sampler configuration.

    Returns
    -------
    dict
        A fresh dictionary with the keys:

        - ``float_dtype``: output dtype of continuous variates (float64)
        - ``int_dtype``: output dtype of discrete variates (int64)
        - ``max_iterations``: diagnostic cap on rejection-loop attempts
        - ``sum_to_one_tol``: relative tolerance for probability vectors
    """
    return {
        "float_dtype": np.float64,
        "int_dtype": np.int64,
        "max_iterations": DEFAULT_MAX_ITERATIONS,
        "sum_to_one_tol": SUM_TO_ONE_TOL,
    }


def load_sampler_config(yaml_config_path: str | Path | IO[Any]) -> dict:
    """Load a sampler configuration from YAML and overlay it on the defaults.

    Keys are matched case-insensitively. Dtypes may be given by name
    (``"float32"``, ``"int32"``, ...).

    Args:
        yaml_config_path: Path to a YAML file or a file-like object.

    Returns:
        The merged configuration dictionary.

    Raises:
        ValueError: If the document is not a mapping or holds unknown keys.
    """
    # Handle both file paths and file-like objects
    if hasattr(yaml_config_path, "read"):
        loaded = yaml.safe_load(yaml_config_path)
    else:
        with open(yaml_config_path, "rb") as f:
            loaded = yaml.safe_load(f)

    config = get_default_sampler_config()
    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError(
            f"Sampler configuration must be a mapping, got {type(loaded).__name__}."
        )

    overrides = {str(k).lower(): v for k, v in loaded.items()}
    unknown = sorted(set(overrides) - set(config))
    if unknown:
        raise ValueError(
            f"Unknown sampler configuration keys: {unknown}. "
            f"Valid keys: {sorted(config)}"
        )

    for key in _DTYPE_KEYS:
        if key in overrides:
            overrides[key] = np.dtype(overrides[key]).type
    if "max_iterations" in overrides:
        overrides["max_iterations"] = int(overrides["max_iterations"])
    if "sum_to_one_tol" in overrides:
        overrides["sum_to_one_tol"] = float(overrides["sum_to_one_tol"])

    config.update(overrides)
    logger.debug("Loaded sampler configuration: %s", config)
    return config
