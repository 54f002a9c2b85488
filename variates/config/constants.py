"""Design constants of the sampling algorithms.

The thresholds below select between algorithm branches. They are part of
the published algorithms (BTPE, PTRD, Marsaglia-Tsang) and must not be tuned.
"""

import math

import numpy as np

INV_SQRT_2PI = 0.3989422804014327  # 1 / sqrt(2 * pi)
HALF_LOG_2PI = 0.9189385332046727  # 0.5 * log(2 * pi)

# Special functions
LOG_GAMMA_ASYMPTOTIC_THRESHOLD = 10.0
LOG_FACTORIAL_STIRLING_THRESHOLD = 1024
SPOUGE_A = 13

# Binomial (BTPE)
BINOMIAL_INVERSION_THRESHOLD = 30.0
BINOMIAL_INVERSION_MAX_TERMS = 110
BINOMIAL_SQUEEZE_THRESHOLD = 20

# Poisson
POISSON_LOW_LAMBDA = 1.0e-6
POISSON_INVERSION_THRESHOLD = 17.0
POISSON_INVERSION_BOUND = 127
POISSON_MAX_LAMBDA = 2.0e9

# Chi-squared
CHI_SQUARED_SUM_OF_NORMALS_MAX_DF = 100

# Weighted sampling
WEIGHTED_SUM_TOL = 1.0e-6

# Multinomial probability vectors must sum to one within sqrt(eps)
SUM_TO_ONE_TOL = math.sqrt(np.finfo(np.float64).eps)

DEFAULT_MAX_ITERATIONS = 10_000_000
